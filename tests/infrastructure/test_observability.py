"""Structured Logging — verifies JSON formatting and handler setup.

Tests:
    - JSONFormatter emits timestamp/level/logger/message plus request extras
    - setup_logging installs exactly one library handler, even when called twice
    - setup_logging_from_settings honours log_level/log_format
"""

import json
import logging

import pytest

from ecommerce_shared.config import Settings
from ecommerce_shared.infrastructure.observability import (
    JSONFormatter, setup_logging, setup_logging_from_settings,
)


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _record(**extra):
    record = logging.LogRecord(
        "ecommerce_shared.infrastructure.api_client", logging.WARNING,
        __file__, 1, "API request failed: %s", ("HTTP error! status: 404",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_request_fields():
    out = json.loads(JSONFormatter().format(_record(
        method="GET", url="http://api.test/x", status_code=404,
        error_code="HTTP_404", duration_ms=12,
    )))
    assert out["level"] == "WARNING"
    assert out["logger"] == "ecommerce_shared.infrastructure.api_client"
    assert out["message"] == "API request failed: HTTP error! status: 404"
    assert out["status_code"] == 404
    assert out["error_code"] == "HTTP_404"
    assert out["duration_ms"] == 12
    assert "timestamp" in out


def test_json_formatter_skips_missing_extras():
    out = json.loads(JSONFormatter().format(_record()))
    assert "status_code" not in out
    assert "exception" not in out


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging("DEBUG", "json")
    handler = setup_logging("WARNING", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "ecommerce_shared"]
    assert ours == [handler]
    assert logging.root.level == logging.WARNING
    assert not isinstance(handler.formatter, JSONFormatter)


def test_setup_logging_from_settings(restore_root_logger):
    handler = setup_logging_from_settings(Settings(log_level="debug", log_format="json"))
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG
