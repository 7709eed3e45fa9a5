"""
Default restaurant data written to a fresh data directory.
Customize this file with your actual menu and floor plan.
"""

from typing import List

from restaurant.models.menu import Menu, MenuCategory, MenuItem
from restaurant.models.table import Table
from monitoring.logger import get_logger

logger = get_logger(__name__)


def get_default_menu() -> Menu:
    """
    Get the starter menu with all categories and items.
    """

    # Appetizers
    appetizers = MenuCategory(
        id=1,
        name="Appetizers",
        items=[
            MenuItem(
                id=101,
                name="Garlic Bread",
                price=5.99,
                description="Toasted bread with garlic butter",
            ),
            MenuItem(
                id=102,
                name="Bruschetta",
                price=7.99,
                description="Toasted bread topped with tomatoes, garlic, and basil",
            ),
        ],
    )

    # Main Courses
    mains = MenuCategory(
        id=2,
        name="Main Courses",
        items=[
            MenuItem(
                id=201,
                name="Spaghetti Bolognese",
                price=14.99,
                description="Spaghetti with meat sauce",
            ),
            MenuItem(
                id=202,
                name="Grilled Salmon",
                price=18.99,
                description="Fresh salmon fillet with lemon herb sauce",
            ),
        ],
    )

    # Desserts
    desserts = MenuCategory(
        id=3,
        name="Desserts",
        items=[
            MenuItem(
                id=301,
                name="Tiramisu",
                price=6.99,
                description="Classic Italian coffee-flavored dessert",
            ),
            MenuItem(
                id=302,
                name="Chocolate Cake",
                price=5.99,
                description="Rich chocolate cake with ganache",
            ),
        ],
    )

    # Beverages
    beverages = MenuCategory(
        id=4,
        name="Beverages",
        items=[
            MenuItem(
                id=401,
                name="Soda",
                price=2.99,
                description="Assorted soft drinks",
            ),
            MenuItem(
                id=402,
                name="Fresh Juice",
                price=4.99,
                description="Orange, apple, or pineapple",
            ),
        ],
    )

    return Menu(categories=[appetizers, mains, desserts, beverages])


def get_default_tables() -> List[Table]:
    """Eight tables: two each of 2, 4, 6 and 8 seats."""
    capacities = [2, 2, 4, 4, 6, 6, 8, 8]
    return [Table(id=i, capacity=c) for i, c in enumerate(capacities, 1)]


def initialize_data_files(stores) -> List[str]:
    """
    Write seed documents for every collection file that does not exist yet.

    Args:
        stores: ``DataStores`` for the target data directory

    Returns:
        Names of the collections that were seeded

    Raises:
        PersistenceError: a seed file could not be written
    """
    seeds = {
        "menu": (stores.menu, lambda: get_default_menu().model_dump(mode="json")),
        "orders": (stores.orders, list),
        "tables": (
            stores.tables,
            lambda: {"tables": [t.model_dump(mode="json") for t in get_default_tables()]},
        ),
        "reservations": (stores.reservations, list),
    }

    seeded = []
    for name, (store, build) in seeds.items():
        with store.lock:
            if store.exists():
                continue
            store.save(build())
            seeded.append(name)

    if seeded:
        logger.info(f"Seeded collections: {', '.join(seeded)}", extra={"collections": seeded})

    return seeded
