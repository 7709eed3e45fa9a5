"""
Flat-file JSON storage, one document per collection.

Each ``JsonStore`` owns a single file. Every service operation reloads the
document, mutates a fresh copy and writes the whole document back while
holding the store's lock, so operations in one process never interleave
on the same file. Nothing guards against a second process writing the
same file; the last save wins.
"""

import os
import json
import threading
from pathlib import Path
from dataclasses import dataclass
from typing import Any, Callable, Union

from restaurant.config.settings import Settings
from restaurant.errors import ParseError, PersistenceError
from monitoring.logger import get_logger

logger = get_logger(__name__)


class JsonStore:
    """Load and save one JSON document."""

    def __init__(
        self,
        path: Union[str, Path],
        default_factory: Callable[[], Any],
        indent: int = 2,
    ):
        """
        Args:
            path: File holding the document
            default_factory: Builds the document returned when the file is absent
            indent: Pretty-print indent used on save
        """
        self.path = Path(path)
        self.default_factory = default_factory
        self.indent = indent
        self.lock = threading.RLock()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Any:
        """
        Read the document from disk.

        Returns:
            The parsed document, or ``default_factory()`` if the file is absent

        Raises:
            ParseError: the file does not contain valid JSON
            PersistenceError: the file could not be read
        """
        if not self.path.exists():
            return self.default_factory()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON in {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Could not read {self.path}: {e}") from e

    def save(self, document: Any) -> None:
        """
        Write the document, replacing the previous file contents.

        The document is written to a temporary sibling first and renamed
        over the target, so an interrupted write leaves the last good copy.

        Raises:
            PersistenceError: the document could not be serialized or written
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            payload = json.dumps(document, indent=self.indent, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Could not serialize document for {self.path}: {e}") from e
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise PersistenceError(f"Could not write {self.path}: {e}") from e

        logger.debug(f"Saved {self.path}", extra={"path": str(self.path)})


def empty_menu() -> dict:
    return {"categories": []}


def empty_tables() -> dict:
    return {"tables": []}


@dataclass
class DataStores:
    """The four collection stores of one data directory."""

    menu: JsonStore
    orders: JsonStore
    tables: JsonStore
    reservations: JsonStore

    @classmethod
    def from_settings(cls, settings: Settings) -> "DataStores":
        indent = settings.json_indent
        return cls(
            menu=JsonStore(settings.menu_path, empty_menu, indent),
            orders=JsonStore(settings.orders_path, list, indent),
            tables=JsonStore(settings.tables_path, empty_tables, indent),
            reservations=JsonStore(settings.reservations_path, list, indent),
        )
