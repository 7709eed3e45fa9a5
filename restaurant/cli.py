#!/usr/bin/env python3
"""
Command-line console for the restaurant records core.

Each invocation runs one action against the JSON files in the configured
data directory, e.g.::

    restaurant-admin tables available --party-size 4
    restaurant-admin orders create --table 3 --item 101:2 --item 401:1
    restaurant-admin orders status 1 completed
"""

import argparse
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from restaurant.config.seed_data import initialize_data_files
from restaurant.config.settings import Settings
from restaurant.errors import PersistenceError
from restaurant.models.order import OrderStatus
from restaurant.models.results import OperationResult
from restaurant.models.table import TableStatus
from restaurant.services import RestaurantServices, create_services
from monitoring.logger import get_logger

logger = get_logger(__name__)

TIME_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")


def order_line(value: str) -> dict:
    """Parse ``MENU_ITEM_ID[:QUANTITY]``."""
    item_id, _, quantity = value.partition(":")
    try:
        return {"menuItemId": int(item_id), "quantity": int(quantity or 1)}
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid order item '{value}', expected ID or ID:QTY")


def calendar_date(value: str) -> str:
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise argparse.ArgumentTypeError("Invalid date format. Please use YYYY-MM-DD.")
    return value


def clock_time(value: str) -> str:
    if not TIME_PATTERN.match(value):
        raise argparse.ArgumentTypeError("Invalid time format. Please use HH:MM (24-hour format).")
    hours, minutes = value.split(":")
    return f"{int(hours):02d}:{minutes}"


def report(result: OperationResult) -> int:
    """Print a result and turn it into an exit code."""
    if result:
        print(result.message)
        return 0
    print(f"Error ({result.error.value}): {result.message}")
    return 1


# Menu

def cmd_menu_list(services: RestaurantServices, args: argparse.Namespace) -> int:
    menu = services.menu.load_menu()
    if menu is None:
        print("Could not read the menu.")
        return 1
    if not menu.categories:
        print("The menu is empty.")
        return 0
    print(menu.to_summary(), end="")
    return 0


def cmd_menu_add(services: RestaurantServices, args: argparse.Namespace) -> int:
    draft = {"name": args.name, "price": args.price, "description": args.description}
    result = services.menu.add_item(args.category_id, draft)
    if result:
        result.message += f" (item #{result.record.id})"
    return report(result)


def cmd_menu_update(services: RestaurantServices, args: argparse.Namespace) -> int:
    current = services.menu.find_item_by_id(args.item_id)
    if current is None:
        print(f"Menu item {args.item_id} not found.")
        return 1

    # Blank options keep the current value
    draft = {
        "name": args.name or current.name,
        "price": args.price if args.price is not None else current.price,
        "description": args.description if args.description is not None else current.description,
    }
    return report(services.menu.update_item(args.item_id, draft))


def cmd_menu_delete(services: RestaurantServices, args: argparse.Namespace) -> int:
    return report(services.menu.delete_item(args.item_id))


# Tables

def cmd_tables_list(services: RestaurantServices, args: argparse.Namespace) -> int:
    tables = services.tables.list_tables()
    if not tables:
        print("No tables available.")
        return 0
    for table in tables:
        print(table.to_line())
    return 0


def cmd_tables_available(services: RestaurantServices, args: argparse.Namespace) -> int:
    tables = services.tables.find_available(args.party_size)
    if not tables:
        print(f"No available tables for a party of {args.party_size}.")
        return 0
    print(f"Available tables for a party of {args.party_size}:")
    for table in tables:
        print(f"  Table #{table.id} - Capacity: {table.capacity}")
    return 0


def cmd_tables_status(services: RestaurantServices, args: argparse.Namespace) -> int:
    return report(services.tables.set_status(args.table_id, args.status))


# Orders

def cmd_orders_list(services: RestaurantServices, args: argparse.Namespace) -> int:
    orders = services.orders.list_orders()
    if args.status:
        orders = [o for o in orders if o.status.value == args.status]
    if not orders:
        print("No orders available.")
        return 0
    for order in orders:
        print(order.to_summary(), end="")
        total = services.orders.calculate_total(order.id)
        if total is not None:
            print(f"Total: ${total:.2f}")
        print()
    return 0


def cmd_orders_create(services: RestaurantServices, args: argparse.Namespace) -> int:
    draft = {"tableId": args.table, "items": args.items, "notes": args.notes}
    result = services.orders.place(draft)
    return report(result)


def cmd_orders_status(services: RestaurantServices, args: argparse.Namespace) -> int:
    return report(services.orders.set_status(args.order_id, args.status))


def cmd_orders_delete(services: RestaurantServices, args: argparse.Namespace) -> int:
    return report(services.orders.delete(args.order_id))


def cmd_orders_total(services: RestaurantServices, args: argparse.Namespace) -> int:
    total = services.orders.calculate_total(args.order_id)
    if total is None:
        print(f"Order {args.order_id} not found.")
        return 1
    print(f"Order #{args.order_id} total: ${total:.2f}")
    return 0


# Reservations

def cmd_reservations_list(services: RestaurantServices, args: argparse.Namespace) -> int:
    if args.date:
        reservations = services.reservations.list_by_date(args.date)
    else:
        reservations = services.reservations.list()

    if not reservations:
        print("No reservations found.")
        return 0

    for reservation in sorted(reservations, key=lambda r: r.date):
        print(reservation.to_summary())
    return 0


def _reservation_draft(args: argparse.Namespace) -> dict:
    return {
        "customerName": args.name,
        "phone": args.phone,
        "partySize": args.party_size,
        "date": f"{args.date}T{args.time}:00",
        "notes": args.notes,
    }


def cmd_reservations_create(services: RestaurantServices, args: argparse.Namespace) -> int:
    return report(services.reservations.create(_reservation_draft(args)))


def cmd_reservations_update(services: RestaurantServices, args: argparse.Namespace) -> int:
    return report(services.reservations.update(args.reservation_id, _reservation_draft(args)))


def cmd_reservations_delete(services: RestaurantServices, args: argparse.Namespace) -> int:
    return report(services.reservations.delete(args.reservation_id))


def cmd_init(services: RestaurantServices, args: argparse.Namespace) -> int:
    try:
        seeded = initialize_data_files(services.stores)
    except PersistenceError as e:
        logger.error(f"Error seeding data files: {e}", exc_info=True)
        print(f"Error: {e}")
        return 1

    if seeded:
        print(f"Created: {', '.join(seeded)}")
    else:
        print("All data files already exist.")
    return 0


def _add_reservation_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name", required=True, help="Customer name")
    parser.add_argument("--phone", required=True, help="Phone number")
    parser.add_argument("--party-size", type=int, required=True, help="Number of guests")
    parser.add_argument("--date", type=calendar_date, required=True, help="Date (YYYY-MM-DD)")
    parser.add_argument("--time", type=clock_time, required=True, help="Time (HH:MM, 24-hour)")
    parser.add_argument("--notes", default="", help="Special notes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="restaurant-admin",
        description="Manage the restaurant menu, tables, orders and reservations",
    )
    parser.add_argument(
        "--data-dir",
        help="Directory holding the JSON files (default: RESTAURANT_DATA_DIR or ./data)",
    )
    sections = parser.add_subparsers(dest="section", required=True)

    init = sections.add_parser("init", help="Create missing data files with seed data")
    init.set_defaults(handler=cmd_init)

    # menu
    menu = sections.add_parser("menu", help="Menu management").add_subparsers(dest="action", required=True)

    p = menu.add_parser("list", help="Show the menu")
    p.set_defaults(handler=cmd_menu_list)

    p = menu.add_parser("add", help="Add a menu item")
    p.add_argument("category_id", type=int)
    p.add_argument("--name", required=True)
    p.add_argument("--price", type=float, required=True)
    p.add_argument("--description", default="")
    p.set_defaults(handler=cmd_menu_add)

    p = menu.add_parser("update", help="Update a menu item")
    p.add_argument("item_id", type=int)
    p.add_argument("--name")
    p.add_argument("--price", type=float)
    p.add_argument("--description")
    p.set_defaults(handler=cmd_menu_update)

    p = menu.add_parser("delete", help="Delete a menu item")
    p.add_argument("item_id", type=int)
    p.set_defaults(handler=cmd_menu_delete)

    # tables
    tables = sections.add_parser("tables", help="Table management").add_subparsers(dest="action", required=True)

    p = tables.add_parser("list", help="Show all tables")
    p.set_defaults(handler=cmd_tables_list)

    p = tables.add_parser("available", help="Find available tables")
    p.add_argument("--party-size", type=int, required=True)
    p.set_defaults(handler=cmd_tables_available)

    p = tables.add_parser("status", help="Set a table's status")
    p.add_argument("table_id", type=int)
    p.add_argument("status", choices=[s.value for s in TableStatus])
    p.set_defaults(handler=cmd_tables_status)

    # orders
    orders = sections.add_parser("orders", help="Order management").add_subparsers(dest="action", required=True)

    p = orders.add_parser("list", help="Show orders")
    p.add_argument("--status", choices=[s.value for s in OrderStatus])
    p.set_defaults(handler=cmd_orders_list)

    p = orders.add_parser("create", help="Create an order and occupy its table")
    p.add_argument("--table", type=int, required=True, help="Table ID")
    p.add_argument(
        "--item",
        dest="items",
        type=order_line,
        action="append",
        required=True,
        help="Menu item as ID or ID:QTY (repeatable)",
    )
    p.add_argument("--notes", default="")
    p.set_defaults(handler=cmd_orders_create)

    p = orders.add_parser("status", help="Set an order's status")
    p.add_argument("order_id", type=int)
    p.add_argument("status", choices=[s.value for s in OrderStatus])
    p.set_defaults(handler=cmd_orders_status)

    p = orders.add_parser("delete", help="Delete an order")
    p.add_argument("order_id", type=int)
    p.set_defaults(handler=cmd_orders_delete)

    p = orders.add_parser("total", help="Price an order with current menu prices")
    p.add_argument("order_id", type=int)
    p.set_defaults(handler=cmd_orders_total)

    # reservations
    reservations = sections.add_parser("reservations", help="Reservation management").add_subparsers(
        dest="action", required=True
    )

    p = reservations.add_parser("list", help="Show reservations")
    p.add_argument("--date", type=calendar_date, help="Only this day (YYYY-MM-DD)")
    p.set_defaults(handler=cmd_reservations_list)

    p = reservations.add_parser("create", help="Create a reservation")
    _add_reservation_fields(p)
    p.set_defaults(handler=cmd_reservations_create)

    p = reservations.add_parser("update", help="Replace a reservation's details")
    p.add_argument("reservation_id", type=int)
    _add_reservation_fields(p)
    p.set_defaults(handler=cmd_reservations_update)

    p = reservations.add_parser("delete", help="Delete a reservation")
    p.add_argument("reservation_id", type=int)
    p.set_defaults(handler=cmd_reservations_delete)

    return parser


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    settings = settings or Settings.from_env()
    if args.data_dir:
        settings = settings.model_copy(update={"data_dir": Path(args.data_dir)})

    services = create_services(settings)

    if settings.seed_on_start and args.section != "init":
        try:
            initialize_data_files(services.stores)
        except PersistenceError as e:
            logger.error(f"Error seeding data files: {e}", exc_info=True)
            print(f"Error: {e}")
            return 1

    return args.handler(services, args)


if __name__ == "__main__":
    exit(main())
