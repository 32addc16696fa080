"""Logging infrastructure for recordbase.

This module provides structured logging with JSON output, record-operation
context tracking, and OpenTelemetry trace correlation.
"""

from recordbase.logging.filters import ContextFilter, operation_scope, set_logging_context
from recordbase.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
    "operation_scope",
    "set_logging_context",
]
