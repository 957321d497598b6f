"""Structured logging — JSON records carry the known extra fields."""

import json
import logging

from newsletter.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "newsletter.test", logging.ERROR, __file__, 1, "insert failed", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "ERROR"
    assert out["logger"] == "newsletter.test"
    assert out["message"] == "insert failed"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(error_code="DATABASE_ERROR", operation="commit", secret="x"),
    ))
    assert out["error_code"] == "DATABASE_ERROR"
    assert out["operation"] == "commit"
    assert "secret" not in out


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    level = logging.root.level
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    try:
        assert len(logging.root.handlers) == before + 1
        assert logging.root.level == logging.INFO
    finally:
        for handler in list(logging.root.handlers):
            if handler.get_name() == "newsletter":
                logging.root.removeHandler(handler)
        logging.root.setLevel(level)
