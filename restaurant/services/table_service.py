"""
Table records and availability queries.
"""

from typing import List, Optional, Union

from pydantic import ValidationError

from restaurant.errors import (
    InvalidInputError,
    NotFoundError,
    ParseError,
    PersistenceError,
    RestaurantError,
)
from restaurant.models.results import OperationResult
from restaurant.models.table import Table, TableStatus
from restaurant.services.base import CollectionService
from restaurant.storage.json_store import JsonStore
from monitoring.logger import get_logger

logger = get_logger(__name__)


def parse_table_status(status: Union[TableStatus, str]) -> TableStatus:
    try:
        return TableStatus(status)
    except ValueError:
        options = ", ".join(s.value for s in TableStatus)
        raise InvalidInputError(f"Invalid table status '{status}'. Available options: {options}")


class TableService(CollectionService):
    """Reads and edits the tables document."""

    collection_name = "tables"

    def __init__(self, store: JsonStore):
        self.store = store

    def read_tables(self) -> List[Table]:
        """
        Parse the stored tables.

        Raises:
            PersistenceError: the file cannot be read or is malformed
        """
        raw = self.store.load()
        if not isinstance(raw, dict):
            raise ParseError("Malformed tables document: expected an object with a 'tables' list")
        return self._parse_list(Table, raw.get("tables"))

    def write_tables(self, tables: List[Table]) -> None:
        self.store.save({"tables": [table.model_dump(mode="json") for table in tables]})

    def list_tables(self) -> List[Table]:
        try:
            return self.read_tables()
        except PersistenceError as e:
            logger.error(f"Error reading tables: {e}", exc_info=True)
            return []

    def get_table(self, table_id: int) -> Optional[Table]:
        for table in self.list_tables():
            if table.id == table_id:
                return table
        return None

    def find_available(self, min_capacity: int) -> List[Table]:
        """Available tables seating at least ``min_capacity``, in file order."""
        return [
            table for table in self.list_tables()
            if table.is_available and table.capacity >= min_capacity
        ]

    def set_status(self, table_id: int, status: Union[TableStatus, str]) -> OperationResult:
        """Set a table's status. Any status may follow any other."""
        try:
            new_status = parse_table_status(status)

            with self.store.lock:
                tables = self.read_tables()
                table = next((t for t in tables if t.id == table_id), None)
                if table is None:
                    raise NotFoundError(f"Table {table_id} does not exist")

                table.status = new_status
                self.write_tables(tables)

        except (RestaurantError, ValidationError) as e:
            return self._failure(e, "updating table status")

        logger.info(
            f"Table {table_id} status set to {new_status.value}",
            extra={"table_id": table_id, "status": new_status.value}
        )
        return OperationResult.ok(table, f"Table {table_id} status updated to \"{new_status.value}\"")
