"""Structured logging - JSON formatter fields and handler setup."""

import json
import logging
import sys

from agency_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "agency_api.test", logging.ERROR, __file__, 1, "boom %s", ("now",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "ERROR"
    assert out["logger"] == "agency_api.test"
    assert out["message"] == "boom now"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(error_code="DATABASE_ERROR", cust_code="C001", secret="x"),
    ))
    assert out["error_code"] == "DATABASE_ERROR"
    assert out["cust_code"] == "C001"
    assert "secret" not in out


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    out = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in out["exception"]


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("WARNING", "text")
        assert first not in root.handlers
        assert second in root.handlers
        assert isinstance(second.formatter, logging.Formatter)
        assert not isinstance(second.formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
