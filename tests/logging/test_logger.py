import json
import logging

import pytest
from opentelemetry import trace
from opentelemetry.trace import NonRecordingSpan, SpanContext, TraceFlags

from recordbase.logging import CustomJsonFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="recordbase.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=5,
        msg="value %s",
        args=(42,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_formatter_emits_json_with_extras():
    payload = json.loads(CustomJsonFormatter().format(_record(error_code="COLUMN_001")))

    assert payload["message"] == "value 42"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "recordbase.test"
    assert payload["error_code"] == "COLUMN_001"
    assert "timestamp" in payload
    assert "trace_id" not in payload


def test_formatter_adds_active_span_ids():
    context = SpanContext(
        trace_id=0x1234,
        span_id=0x42,
        is_remote=False,
        trace_flags=TraceFlags(TraceFlags.SAMPLED),
    )
    with trace.use_span(NonRecordingSpan(context)):
        payload = json.loads(CustomJsonFormatter().format(_record()))

    assert payload["trace_id"] == format(0x1234, "032x")
    assert payload["span_id"] == format(0x42, "016x")


def test_formatter_serializes_exceptions():
    try:
        raise ValueError("bad")
    except ValueError:
        import sys
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(CustomJsonFormatter().format(record))

    assert "ValueError: bad" in payload["exception"]


def test_setup_logging_uses_settings_level(restore_root_logger, monkeypatch):
    from recordbase.settings import reload_settings

    monkeypatch.setenv("RECORDBASE_LOG_LEVEL", "debug")
    reload_settings()

    setup_logging()

    assert restore_root_logger.level == logging.DEBUG
    handler = restore_root_logger.handlers[-1]
    assert isinstance(handler.formatter, CustomJsonFormatter)


def test_setup_logging_explicit_level(restore_root_logger):
    setup_logging("warning")

    assert restore_root_logger.level == logging.WARNING
