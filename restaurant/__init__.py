"""
Restaurant Records Package

This package contains the record-management core of the restaurant
console: JSON-backed stores, the menu, table, order and reservation
services, their data models, and configuration.
"""

from restaurant.services import create_services, RestaurantServices

__all__ = ["create_services", "RestaurantServices"]
__version__ = "1.0.0"
