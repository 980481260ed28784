# tests/unit/utils/test_logger.py
import json
import logging

from src.utils.logger import (
    CorrelationIdFilter,
    CustomJsonFormatter,
    correlation_id_var,
)


def _record(message="hello"):
    return logging.LogRecord("waitlist", logging.INFO, __file__, 1, message, None, None)


def test_filter_copies_current_correlation_id():
    token = correlation_id_var.set("req-7")
    try:
        record = _record()
        assert CorrelationIdFilter().filter(record) is True
    finally:
        correlation_id_var.reset(token)

    assert record.correlation_id == "req-7"


def test_filter_leaves_records_alone_outside_a_request():
    record = _record()

    CorrelationIdFilter().filter(record)

    assert not hasattr(record, "correlation_id")


def test_formatter_emits_correlation_id():
    record = _record()
    record.correlation_id = "req-7"
    formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')

    payload = json.loads(formatter.format(record))

    assert payload["correlation_id"] == "req-7"
    assert payload["level"] == "INFO"
    assert payload["message"] == "hello"
