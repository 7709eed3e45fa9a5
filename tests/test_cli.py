"""
Tests for the restaurant-admin console.
"""

import pytest

from restaurant.cli import main
from restaurant.models.order import OrderStatus
from restaurant.models.table import TableStatus


@pytest.fixture
def seeded_settings(settings):
    return settings.model_copy(update={"seed_on_start": True})


def run(settings, *argv):
    return main(list(argv), settings=settings)


def test_init_creates_data_files(settings, capsys):
    assert run(settings, "init") == 0
    assert "Created: menu, orders, tables, reservations" in capsys.readouterr().out

    assert run(settings, "init") == 0
    assert "already exist" in capsys.readouterr().out


def test_menu_list_after_seeding(seeded_settings, capsys):
    assert run(seeded_settings, "menu", "list") == 0

    out = capsys.readouterr().out
    assert "Appetizers (category #1)" in out
    assert "#101 Garlic Bread - $5.99" in out


def test_menu_add_update_delete(seeded_settings, services, capsys):
    assert run(seeded_settings, "menu", "add", "4", "--name", "Iced Tea", "--price", "3.25") == 0
    assert "item #403" in capsys.readouterr().out

    assert run(seeded_settings, "menu", "update", "403", "--price", "3.5") == 0
    item = services.menu.find_item_by_id(403)
    assert item.name == "Iced Tea"
    assert item.price == 3.5

    assert run(seeded_settings, "menu", "delete", "403") == 0
    assert services.menu.find_item_by_id(403) is None


def test_menu_add_unknown_category_fails(seeded_settings, capsys):
    assert run(seeded_settings, "menu", "add", "9", "--name", "Soup", "--price", "4") == 1
    assert "Error (not_found)" in capsys.readouterr().out


def test_tables_available(seeded_settings, capsys):
    assert run(seeded_settings, "tables", "available", "--party-size", "7") == 0

    out = capsys.readouterr().out
    assert "Table #7 - Capacity: 8" in out
    assert "Table #6" not in out


def test_order_lifecycle_frees_table(seeded_settings, services, capsys):
    assert run(seeded_settings, "orders", "create", "--table", "3", "--item", "101:2", "--item", "401") == 0
    assert services.tables.get_table(3).status == TableStatus.OCCUPIED

    assert run(seeded_settings, "orders", "total", "1") == 0
    assert "$14.97" in capsys.readouterr().out

    assert run(seeded_settings, "orders", "status", "1", "completed") == 0
    assert services.orders.find_by_id(1).status == OrderStatus.COMPLETED
    assert services.tables.get_table(3).status == TableStatus.AVAILABLE


def test_order_on_occupied_table_fails(seeded_settings, services, capsys):
    assert run(seeded_settings, "init") == 0
    assert services.tables.set_status(2, "occupied")

    assert run(seeded_settings, "orders", "create", "--table", "2", "--item", "101") == 1
    assert "validation_error" in capsys.readouterr().out


def test_order_with_unknown_menu_item_fails(seeded_settings, services, capsys):
    assert run(seeded_settings, "orders", "create", "--table", "2", "--item", "999:3") == 1

    assert "Error (not_found)" in capsys.readouterr().out
    assert services.orders.list_orders() == []
    assert services.tables.get_table(2).status == TableStatus.AVAILABLE


def test_order_repeated_items_are_merged(seeded_settings, services):
    assert run(seeded_settings, "orders", "create", "--table", "1", "--item", "101", "--item", "101:2") == 0

    order = services.orders.find_by_id(1)
    assert [(line.menu_item_id, line.quantity) for line in order.items] == [(101, 3)]


def test_invalid_order_item_is_a_usage_error(seeded_settings):
    with pytest.raises(SystemExit):
        run(seeded_settings, "orders", "create", "--table", "2", "--item", "bread")


def test_reservations_by_date(seeded_settings, capsys):
    base = ["reservations", "create", "--phone", "555-0100", "--party-size", "2"]
    assert run(seeded_settings, *base, "--name", "Ada", "--date", "2024-02-01", "--time", "19:00") == 0
    assert run(seeded_settings, *base, "--name", "Alan", "--date", "2024-02-02", "--time", "7:30") == 0
    capsys.readouterr()

    assert run(seeded_settings, "reservations", "list", "--date", "2024-02-02") == 0

    out = capsys.readouterr().out
    assert "Name: Alan" in out
    assert "2024-02-02T07:30:00" in out
    assert "Ada" not in out


def test_reservation_time_is_validated(seeded_settings):
    with pytest.raises(SystemExit):
        run(
            seeded_settings, "reservations", "create", "--name", "Ada", "--phone", "1",
            "--party-size", "2", "--date", "2024-02-01", "--time", "25:00",
        )


def test_delete_missing_reservation_fails(seeded_settings, capsys):
    assert run(seeded_settings, "reservations", "delete", "5") == 1
    assert "Error (not_found)" in capsys.readouterr().out
