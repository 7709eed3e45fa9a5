"""
Data models for the restaurant records core.
"""

from restaurant.models.menu import MenuItemDraft, MenuItem, MenuCategory, Menu
from restaurant.models.order import OrderLine, OrderDraft, Order, OrderStatus
from restaurant.models.table import Table, TableStatus
from restaurant.models.reservation import ReservationDraft, Reservation
from restaurant.models.results import ErrorCode, OperationResult

__all__ = [
    "MenuItemDraft",
    "MenuItem",
    "MenuCategory",
    "Menu",
    "OrderLine",
    "OrderDraft",
    "Order",
    "OrderStatus",
    "Table",
    "TableStatus",
    "ReservationDraft",
    "Reservation",
    "ErrorCode",
    "OperationResult",
]
