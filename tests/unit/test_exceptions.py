"""Tests for the error-code based exceptions."""

import logging

from recordbase.common import (
    ErrorCode,
    InstantiationError,
    RecordError,
    column_definition_error,
    configuration_error,
    instantiation_error,
)


class Widget:
    pass


class TestRecordError:
    """Test RecordError formatting and serialization."""

    def test_str_includes_code(self):
        error = RecordError("broken", error_code=ErrorCode.UNKNOWN_COLUMN)

        assert str(error) == "[COLUMN_002] broken"

    def test_str_includes_cause(self):
        error = RecordError("broken", cause=ValueError("bad value"))

        assert str(error) == "[RECORD_001] broken (caused by: ValueError: bad value)"
        assert isinstance(error.__cause__, ValueError)

    def test_to_dict(self):
        error = configuration_error("missing", config_key="null_token")

        assert error.to_dict() == {
            "type": "RecordError",
            "message": "missing",
            "error_code": "CONFIG_001",
            "error_name": "CONFIG_ERROR",
            "details": {"config_key": "null_token"},
        }

    def test_from_error_code(self):
        error = RecordError.from_error_code(ErrorCode.UNKNOWN_COLUMN, "no such column")
        instantiation = RecordError.from_error_code(ErrorCode.INSTANTIATION_ERROR, "cannot build")

        assert type(error) is RecordError
        assert error.error_code == ErrorCode.UNKNOWN_COLUMN
        assert isinstance(instantiation, InstantiationError)

    def test_logs_on_creation(self, caplog):
        with caplog.at_level(logging.ERROR, logger="recordbase.common.exceptions"):
            column_definition_error("bad column", record_type=Widget, column="c")

        record = caplog.records[-1]
        assert record.getMessage() == "bad column"
        assert record.error_code == "COLUMN_001"
        assert record.details == {"record_type": "Widget", "column": "c"}


class TestInstantiationError:
    """Test the clone failure error."""

    def test_helper(self):
        cause = TypeError("missing argument")

        error = instantiation_error(Widget, cause=cause)

        assert isinstance(error, RecordError)
        assert error.error_code == ErrorCode.INSTANTIATION_ERROR
        assert error.message == "Cannot create new instance of Widget"
        assert error.details["record_type"].endswith("Widget")
        assert error.cause is cause
