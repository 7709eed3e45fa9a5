"""
Tests for table records and availability.
"""

from restaurant.models.results import ErrorCode
from restaurant.models.table import TableStatus


def test_find_available_filters_status_and_capacity(services, sample_tables):
    tables = services.tables.find_available(6)

    assert [table.id for table in tables] == [2]


def test_find_available_keeps_file_order(services, sample_tables):
    tables = services.tables.find_available(1)

    assert [table.id for table in tables] == [1, 2]


def test_set_status_changes_only_that_table(services, sample_tables):
    before = services.tables.list_tables()

    result = services.tables.set_status(1, "maintenance")

    assert result
    after = services.tables.list_tables()
    assert after[0].status == TableStatus.MAINTENANCE
    assert after[1:] == before[1:]


def test_set_status_allows_any_transition(services, sample_tables):
    assert services.tables.set_status(3, TableStatus.RESERVED)
    assert services.tables.set_status(3, TableStatus.OCCUPIED)
    assert services.tables.get_table(3).status == TableStatus.OCCUPIED


def test_set_status_unknown_table(services, sample_tables):
    result = services.tables.set_status(9, "available")

    assert not result
    assert result.error == ErrorCode.NOT_FOUND


def test_set_status_rejects_unknown_status(services, sample_tables):
    result = services.tables.set_status(1, "on_fire")

    assert result.error == ErrorCode.VALIDATION_ERROR
    assert services.tables.get_table(1).status == TableStatus.AVAILABLE


def test_set_status_persists_document_shape(services, sample_tables, read_json):
    services.tables.set_status(2, "reserved")

    assert read_json("tables.json")["tables"][1] == {"id": 2, "capacity": 6, "status": "reserved"}


def test_missing_tables_file(services):
    assert services.tables.list_tables() == []
    assert services.tables.find_available(2) == []
    assert services.tables.set_status(1, "available").error == ErrorCode.NOT_FOUND


def test_tables_document_must_be_an_object(services, write_json):
    write_json("tables.json", [{"id": 1, "capacity": 2, "status": "available"}])

    assert services.tables.list_tables() == []
    assert services.tables.set_status(1, "occupied").error == ErrorCode.PERSISTENCE_ERROR
