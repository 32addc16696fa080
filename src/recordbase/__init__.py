from recordbase.__version__ import __version__
from recordbase.columns import (
    Column,
    ColumnDescriptor,
    ColumnReflector,
    TableMetadata,
    columns_of,
    get_reflector,
    register_columns,
    table,
    table_name_of,
)
from recordbase.records import (
    RecordBase,
    records_equal,
    records_not_equal,
    to_value_sink,
)

from recordbase.common.exceptions import ErrorCode, InstantiationError, RecordError

from recordbase.logging import setup_logging
from recordbase.settings import get_settings


__all__ = [
    "__version__",

    "RecordBase",
    "records_equal",
    "records_not_equal",
    "to_value_sink",

    # Column reflector
    "Column",
    "ColumnDescriptor",
    "ColumnReflector",
    "columns_of",
    "get_reflector",
    "register_columns",
    "TableMetadata",
    "table",
    "table_name_of",

    # Exceptions (public API)
    "RecordError",
    "InstantiationError",
    "ErrorCode",

    # Configuration
    "setup_logging",
    "get_settings",
]
