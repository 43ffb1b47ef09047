"""Structured Logging — JSON fields and idempotent setup."""

import json
import logging

from agent_gateway.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "agent_gateway.test", logging.WARNING, __file__, 1,
        "Direct action failed", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_request_fields():
    out = json.loads(JSONFormatter().format(_record(
        user_id="u1", agent_key="calendar", action="create", error_code="NOT_FOUND",
    )))
    assert out["level"] == "WARNING"
    assert out["logger"] == "agent_gateway.test"
    assert out["message"] == "Direct action failed"
    assert out["user_id"] == "u1"
    assert out["agent_key"] == "calendar"
    assert out["action"] == "create"
    assert out["error_code"] == "NOT_FOUND"


def test_json_formatter_includes_engine_failure_fields():
    out = json.loads(JSONFormatter().format(_record(
        request_type="direct_action", api_error_type="engine_error", status_code=404,
    )))
    assert out["request_type"] == "direct_action"
    assert out["api_error_type"] == "engine_error"
    assert out["status_code"] == 404


def test_json_formatter_omits_absent_fields():
    out = json.loads(JSONFormatter().format(_record(agent_key=None)))
    assert "agent_key" not in out
    assert "user_id" not in out


def test_setup_logging_does_not_stack_handlers():
    original_level = logging.root.level
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    ours = [
        h for h in logging.root.handlers
        if type(h).__name__ == "_GatewayHandler"
    ]
    try:
        assert len(ours) == 1
        assert not isinstance(ours[0].formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        for handler in ours:
            logging.root.removeHandler(handler)
        logging.root.setLevel(original_level)
