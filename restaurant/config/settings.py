"""
Runtime settings for the restaurant records core.

Values come from environment variables, optionally loaded from
``.env.local`` by ``python-dotenv``. Services never read the environment
themselves; they receive stores built from a ``Settings`` instance.
"""

import os
from pathlib import Path
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from monitoring.logger import get_logger

logger = get_logger(__name__)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_int(name: str, default: int) -> int:
    """Read a non-negative integer, falling back to the default on bad input."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        logger.warning(f"Ignoring {name}={raw!r}, expected a non-negative integer; using {default}")
        return default
    return value


class Settings(BaseModel):
    """Where the collection files live and how they are written."""

    data_dir: Path = Field(Path("data"), description="Directory holding the collection files")
    menu_file: str = Field("menu.json", description="Menu document file name")
    orders_file: str = Field("orders.json", description="Orders document file name")
    tables_file: str = Field("tables.json", description="Tables document file name")
    reservations_file: str = Field("reservations.json", description="Reservations document file name")
    json_indent: int = Field(2, ge=0, description="Pretty-print indent for saved documents")
    seed_on_start: bool = Field(True, description="Seed missing files before the console runs")

    @classmethod
    def from_env(cls, env_file: str = ".env.local") -> "Settings":
        """Build settings from environment variables."""
        load_dotenv(env_file)

        return cls(
            data_dir=Path(os.getenv("RESTAURANT_DATA_DIR", "data")),
            menu_file=os.getenv("RESTAURANT_MENU_FILE", "menu.json"),
            orders_file=os.getenv("RESTAURANT_ORDERS_FILE", "orders.json"),
            tables_file=os.getenv("RESTAURANT_TABLES_FILE", "tables.json"),
            reservations_file=os.getenv("RESTAURANT_RESERVATIONS_FILE", "reservations.json"),
            json_indent=_env_int("RESTAURANT_JSON_INDENT", 2),
            seed_on_start=_env_flag("RESTAURANT_SEED_ON_START", "true"),
        )

    @property
    def menu_path(self) -> Path:
        return self.data_dir / self.menu_file

    @property
    def orders_path(self) -> Path:
        return self.data_dir / self.orders_file

    @property
    def tables_path(self) -> Path:
        return self.data_dir / self.tables_file

    @property
    def reservations_path(self) -> Path:
        return self.data_dir / self.reservations_file
