"""
Logging setup for the restaurant records core.
"""

from monitoring.logger import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
