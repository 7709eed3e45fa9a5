"""
Tests for the JSON document store.
"""

import json

import pytest

from restaurant.errors import ParseError, PersistenceError
from restaurant.storage.json_store import DataStores, JsonStore


def test_load_missing_file_returns_default(tmp_path):
    """An absent file yields the default document."""
    store = JsonStore(tmp_path / "orders.json", list)

    assert store.exists() is False
    assert store.load() == []


def test_load_invalid_json_raises_parse_error(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonStore(path, dict)

    with pytest.raises(ParseError):
        store.load()


def test_parse_error_is_a_persistence_error(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text("[1, 2", encoding="utf-8")

    with pytest.raises(PersistenceError):
        JsonStore(path, dict).load()


def test_save_writes_pretty_printed_json(tmp_path):
    """Documents are saved with a 2-space indent and read back unchanged."""
    path = tmp_path / "nested" / "tables.json"
    store = JsonStore(path, dict)
    document = {"tables": [{"id": 1, "capacity": 4, "status": "available"}]}

    store.save(document)

    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "tables": [\n    {\n      "id": 1,')
    assert json.loads(text) == document
    assert store.load() == document


def test_save_leaves_no_temporary_file(tmp_path):
    store = JsonStore(tmp_path / "orders.json", list)

    store.save([{"id": 1}])

    assert sorted(p.name for p in tmp_path.iterdir()) == ["orders.json"]


def test_save_unserializable_document_keeps_previous_file(tmp_path):
    path = tmp_path / "orders.json"
    store = JsonStore(path, list)
    store.save([{"id": 1}])

    with pytest.raises(PersistenceError):
        store.save([{"id": object()}])

    assert store.load() == [{"id": 1}]


def test_save_keeps_non_ascii_text(tmp_path):
    store = JsonStore(tmp_path / "menu.json", dict)

    store.save({"name": "Crème brûlée"})

    assert "Crème brûlée" in (tmp_path / "menu.json").read_text(encoding="utf-8")


def test_data_stores_follow_settings(settings):
    stores = DataStores.from_settings(settings)

    assert stores.menu.path == settings.data_dir / "menu.json"
    assert stores.orders.path == settings.data_dir / "orders.json"
    assert stores.tables.path == settings.data_dir / "tables.json"
    assert stores.reservations.path == settings.data_dir / "reservations.json"
    assert stores.menu.load() == {"categories": []}
    assert stores.tables.load() == {"tables": []}
    assert stores.orders.load() == []
    assert stores.reservations.load() == []
