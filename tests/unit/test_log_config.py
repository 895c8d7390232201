"""Unit tests for the logging setup."""

import json
import logging

import pytest

from app.config import get_settings
from app.infrastructure.logging.log_config import (
    JsonFormatter,
    level_from_name,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("loud", logging.INFO)],
)
def test_level_from_name(name, expected):
    assert level_from_name(name) == expected


def test_setup_logging_is_repeatable(restore_root_logger):
    setup_logging()
    setup_logging()

    ours = [h for h in logging.getLogger().handlers if h.get_name() == "furnitrack"]
    assert len(ours) == 1
    expected_sql = level_from_name(get_settings().log_level_sql)
    assert logging.getLogger("sqlalchemy.engine").level == expected_sql


def test_json_formatter_emits_one_object():
    record = logging.LogRecord(
        "app.test", logging.ERROR, __file__, 1, "Insert %s failed", ("r1",), None
    )
    entry = json.loads(JsonFormatter().format(record))
    assert entry["level"] == "ERROR"
    assert entry["logger"] == "app.test"
    assert entry["message"] == "Insert r1 failed"
