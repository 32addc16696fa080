"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
so log lines emitted while a record operation runs can be correlated with the
record type and operation that produced them.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional
from recordbase.__version__ import __version__

operation_var: ContextVar[Optional[str]] = ContextVar("record_operation", default=None)
record_type_var: ContextVar[Optional[str]] = ContextVar("record_type", default=None)

_static_context: Dict[str, Any] = {}


class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records.

    Static context (environment and free-form extras) is set once through
    ``set_logging_context``; the record operation and record type come from
    context variables set by ``operation_scope``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        for key, value in _static_context.items():
            setattr(record, key, value)

        setattr(record, "record_operation", operation_var.get())
        setattr(record, "record_type", record_type_var.get())
        setattr(record, "sdk_name", "recordbase")
        setattr(record, "sdk_version", __version__)

        return True


def set_logging_context(
    environment: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Replace the static context attached to every log record."""
    _static_context.clear()
    if environment is not None:
        _static_context["environment"] = environment
    if extra:
        _static_context.update(extra)


@contextmanager
def operation_scope(operation: str, record_type: Optional[type] = None) -> Iterator[None]:
    """Tag log records emitted inside the block with a record operation."""
    operation_token = operation_var.set(operation)
    type_token = record_type_var.set(record_type.__name__ if record_type is not None else None)
    try:
        yield
    finally:
        record_type_var.reset(type_token)
        operation_var.reset(operation_token)
