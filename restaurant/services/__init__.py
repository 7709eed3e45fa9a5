"""
Service layer for the restaurant records core.
"""

from dataclasses import dataclass
from typing import Optional

from restaurant.config.settings import Settings
from restaurant.services.menu_service import MenuService
from restaurant.services.table_service import TableService
from restaurant.services.order_service import OrderService
from restaurant.services.reservation_service import ReservationService
from restaurant.storage.json_store import DataStores


@dataclass
class RestaurantServices:
    """All services of one data directory, sharing the same stores."""

    stores: DataStores
    menu: MenuService
    tables: TableService
    orders: OrderService
    reservations: ReservationService


def create_services(settings: Optional[Settings] = None) -> RestaurantServices:
    """
    Wire every service to the stores of one data directory.

    Args:
        settings: Data directory settings (defaults to ``Settings.from_env()``)
    """
    settings = settings or Settings.from_env()
    stores = DataStores.from_settings(settings)

    menu = MenuService(stores.menu)
    tables = TableService(stores.tables)

    return RestaurantServices(
        stores=stores,
        menu=menu,
        tables=tables,
        orders=OrderService(stores.orders, tables, menu),
        reservations=ReservationService(stores.reservations),
    )


__all__ = [
    "MenuService",
    "TableService",
    "OrderService",
    "ReservationService",
    "RestaurantServices",
    "create_services",
]
