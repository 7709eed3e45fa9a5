"""
Tests for the logging setup.
"""

import json
import logging

import pytest

from monitoring.logger import get_logger, setup_logging


@pytest.fixture
def restore_logging():
    yield
    setup_logging()


def test_json_events_reach_log_file(tmp_path, restore_logging):
    log_file = tmp_path / "logs" / "app.log"
    setup_logging(log_level="info", log_file=str(log_file), enable_json=True)

    get_logger("restaurant.test").info("order placed", order_id=7)
    get_logger("restaurant.test").debug("filtered out")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event"] == "order placed"
    assert event["order_id"] == 7
    assert event["level"] == "info"
    assert "timestamp" in event


def test_unknown_level_falls_back_to_info(restore_logging):
    setup_logging(log_level="chatty")

    assert logging.getLogger().level == logging.INFO
