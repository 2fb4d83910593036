"""Structured Logging — verifies JSON formatter output and setup idempotence."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, msg, None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "app.test"
    assert out["message"] == "hello"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(error_code="UNAUTHORIZED", todo_id=3, secret="nope"),
    ))
    assert out["error_code"] == "UNAUTHORIZED"
    assert out["todo_id"] == 3
    assert "secret" not in out


def test_json_formatter_keeps_non_ascii():
    out = JSONFormatter().format(_record("Olá"))
    assert "Olá" in out


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    assert len(logging.root.handlers) == before + 1
    assert logging.root.level == logging.WARNING
    for h in list(logging.root.handlers):
        if h.get_name() == "copy_updater":
            logging.root.removeHandler(h)
