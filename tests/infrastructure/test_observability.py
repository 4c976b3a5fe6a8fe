"""Structured Logging: JSON formatter fields and handler setup."""

import json
import logging

from ledger_gateway.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "ledger_gateway.test", logging.INFO, __file__, 1, "dispatching %s",
        ("get_user",), None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "ledger_gateway.test"
    assert out["message"] == "dispatching get_user"
    assert "timestamp" in out


def test_json_formatter_surfaces_gateway_extras():
    out = json.loads(JSONFormatter().format(
        _record(operation="get_user", mode="invoke", caller_id="alice", result_count=0),
    ))
    assert out["operation"] == "get_user"
    assert out["mode"] == "invoke"
    assert out["caller_id"] == "alice"
    assert out["result_count"] == 0


def test_setup_logging_does_not_stack_handlers():
    first = setup_logging("DEBUG", "text")
    second = setup_logging("INFO", "json")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(second)
