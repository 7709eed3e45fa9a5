"""
Configuration module for the restaurant records core.
"""

from restaurant.config.settings import Settings
from restaurant.config.seed_data import (
    get_default_menu,
    get_default_tables,
    initialize_data_files,
)

__all__ = [
    "Settings",
    "get_default_menu",
    "get_default_tables",
    "initialize_data_files",
]
