"""Common exceptions for recordbase.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions inherit from
    RecordError and include structured error information. The only subclass
    is InstantiationError, raised when a record cannot be cloned.
"""

from recordbase.common.exceptions import (
    RecordError,
    InstantiationError,
    ErrorCode,
    # Helper functions
    configuration_error,
    column_definition_error,
    unknown_column_error,
    instantiation_error,
)

__all__ = [
    # Base Exception and Error Codes
    "RecordError",
    "InstantiationError",
    "ErrorCode",
    # Helper functions
    "configuration_error",
    "column_definition_error",
    "unknown_column_error",
    "instantiation_error",
]
