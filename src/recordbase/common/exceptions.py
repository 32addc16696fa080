from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for recordbase operations.

    This enum provides categorized error codes that can be used
    to identify error types without creating numerous exception classes.
    Each category has a specific number range for easy identification.

    Attributes:
        CONFIG_*: Configuration-related errors (1xxx)
        COLUMN_*: Column declaration and lookup errors (2xxx)
        RECORD_*: Record construction errors (3xxx)
    """
    # Configuration errors (1xxx)
    CONFIG_ERROR = "CONFIG_001"

    # Column errors (2xxx)
    COLUMN_DEFINITION_ERROR = "COLUMN_001"
    UNKNOWN_COLUMN = "COLUMN_002"

    # Record errors (3xxx)
    RECORD_ERROR = "RECORD_001"
    INSTANTIATION_ERROR = "RECORD_002"


class RecordError(Exception):
    """Base exception for all recordbase-related errors.

    Uses error codes for categorization instead of a deep hierarchy of
    exception classes.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.RECORD_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize recordbase error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

        # Lazy import to avoid circular dependency
        from recordbase.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=(type(cause), cause, cause.__traceback__) if cause is not None else None,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs
    ) -> "RecordError":
        """Create exception from error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for RecordError

        Returns:
            RecordError instance (InstantiationError for INSTANTIATION_ERROR)
        """
        if error_code is ErrorCode.INSTANTIATION_ERROR and cls is RecordError:
            return InstantiationError(message=message, **kwargs)
        return cls(message=message, error_code=error_code, **kwargs)


class InstantiationError(RecordError):
    """Raised when a record type cannot be built through its no-argument constructor."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INSTANTIATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, error_code=error_code, details=details, cause=cause)


# Helper functions for common error scenarios
def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> RecordError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        RecordError with CONFIG_ERROR code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return RecordError(
        message=message,
        error_code=ErrorCode.CONFIG_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def column_definition_error(
    message: str,
    record_type: Optional[type] = None,
    column: Optional[str] = None,
    **kwargs
) -> RecordError:
    """Create a column definition error.

    Args:
        message: Error message
        record_type: Record class whose declaration is invalid
        column: Offending column name
        **kwargs: Additional error details

    Returns:
        RecordError with COLUMN_DEFINITION_ERROR code
    """
    details = kwargs.get('details', {})
    if record_type is not None:
        details["record_type"] = record_type.__name__
    if column:
        details["column"] = column

    return RecordError(
        message=message,
        error_code=ErrorCode.COLUMN_DEFINITION_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def unknown_column_error(
    column: str,
    record_type: type,
    **kwargs
) -> RecordError:
    """Create an error for a key that does not name a column of the record type.

    Args:
        column: The unknown column name
        record_type: Record class that was searched
        **kwargs: Additional error details

    Returns:
        RecordError with UNKNOWN_COLUMN code
    """
    details = kwargs.get('details', {})
    details["column"] = column
    details["record_type"] = record_type.__name__

    return RecordError(
        message=f"'{column}' is not a column of {record_type.__name__}",
        error_code=ErrorCode.UNKNOWN_COLUMN,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def instantiation_error(
    record_type: type,
    cause: Optional[Exception] = None,
    **kwargs
) -> InstantiationError:
    """Create an error for a record type without a usable no-argument constructor.

    Args:
        record_type: The record class that could not be constructed
        cause: Exception raised by the constructor, if any
        **kwargs: Additional error details

    Returns:
        InstantiationError with INSTANTIATION_ERROR code
    """
    details = kwargs.get('details', {})
    details["record_type"] = f"{record_type.__module__}.{record_type.__qualname__}"

    return InstantiationError(
        message=f"Cannot create new instance of {record_type.__name__}",
        details=details,
        cause=cause,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )
