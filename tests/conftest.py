"""
Pytest configuration and fixtures.
"""

import json
import os

import pytest
from dotenv import load_dotenv

# Load test environment variables
load_dotenv(".env.local")


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment."""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "DEBUG"

    yield


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at an empty temporary data directory."""
    from restaurant.config.settings import Settings

    return Settings(data_dir=tmp_path / "data", seed_on_start=False)


@pytest.fixture
def services(settings):
    """All services wired to the temporary data directory."""
    from restaurant.services import create_services

    return create_services(settings)


@pytest.fixture
def write_json(settings):
    """Write a raw document into the temporary data directory."""

    def _write(file_name, document):
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        path = settings.data_dir / file_name
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def read_json(settings):
    """Read a raw document back from the temporary data directory."""

    def _read(file_name):
        return json.loads((settings.data_dir / file_name).read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def sample_tables(write_json):
    """Three tables, one of them occupied."""
    write_json("tables.json", {
        "tables": [
            {"id": 1, "capacity": 2, "status": "available"},
            {"id": 2, "capacity": 6, "status": "available"},
            {"id": 3, "capacity": 6, "status": "occupied"},
        ]
    })


@pytest.fixture
def sample_menu(write_json):
    """Two categories whose item ids overlap."""
    write_json("menu.json", {
        "categories": [
            {
                "id": 1,
                "name": "Appetizers",
                "items": [
                    {"id": 1, "name": "Garlic Bread", "price": 5.99, "description": "Toasted"},
                ],
            },
            {
                "id": 2,
                "name": "Beverages",
                "items": [
                    {"id": 1, "name": "Soda", "price": 2.5, "description": "Fizzy"},
                    {"id": 2, "name": "Juice", "price": 4.0, "description": "Fresh"},
                ],
            },
        ]
    })
