"""Column declarations and the column reflector.

Record classes declare their columns with ``Column`` descriptors; the
reflector turns the declarations into an ordered, memoized table of
``ColumnDescriptor`` objects that every record operation iterates.
"""

from .column import Column
from .decorators import TableMetadata, table, table_metadata_of, table_name_of
from .reflector import (
    ColumnDescriptor,
    ColumnReflector,
    columns_of,
    get_reflector,
    register_columns,
)

__all__ = [
    "Column",
    "ColumnDescriptor",
    "ColumnReflector",
    "columns_of",
    "get_reflector",
    "register_columns",
    "TableMetadata",
    "table",
    "table_metadata_of",
    "table_name_of",
]
