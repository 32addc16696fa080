"""Record base class and the column value rules it applies."""

from .base import RecordBase, records_equal, records_not_equal, to_value_sink
from .values import compare_values, format_value, values_equal

__all__ = [
    "RecordBase",
    "records_equal",
    "records_not_equal",
    "to_value_sink",
    "compare_values",
    "format_value",
    "values_equal",
]
