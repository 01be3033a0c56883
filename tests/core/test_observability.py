"""Structured logging — JSON formatter fields and idempotent setup."""

import json
import logging

from producer_registry.infrastructure import observability
from producer_registry.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="producer_registry.test", level=logging.ERROR, pathname=__file__,
        lineno=1, msg="Producer %s failed", args=("update",), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "producer_registry.test"
    assert log["message"] == "Producer update failed"
    assert "timestamp" in log


def test_json_formatter_includes_known_extras():
    log = json.loads(JSONFormatter().format(
        _record(producer_id=7, operation="update", error_code="DATABASE_ERROR"),
    ))
    assert log["producer_id"] == 7
    assert log["operation"] == "update"
    assert log["error_code"] == "DATABASE_ERROR"


def test_json_formatter_skips_none_extras():
    log = json.loads(JSONFormatter().format(_record(producer_id=None)))
    assert "producer_id" not in log


def test_json_formatter_keeps_non_ascii():
    record = _record()
    record.msg = "Fazenda em Goiânia"
    record.args = ()
    assert "Goiânia" in JSONFormatter().format(record)


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        added = [h for h in logging.root.handlers if h not in before]
        assert added == [observability._handler]
        assert not isinstance(added[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(observability._handler)
        observability._handler = None


def test_json_formatter_includes_severity_and_category():
    log = json.loads(JSONFormatter().format(
        _record(severity="critical", category="database"),
    ))
    assert log["severity"] == "critical"
    assert log["category"] == "database"
