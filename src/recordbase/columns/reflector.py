"""Column reflector: ordered, memoized column tables per record type.

The reflector maps a record class to the ordered tuple of ``ColumnDescriptor``
objects every record operation iterates. Tables are derived once per class
from its ``Column`` declarations (base-class columns first, then definition
order) or registered explicitly, and are never recomputed afterwards.
"""

import threading
import typing
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Type

from pydantic import ConfigDict, Field, field_serializer

from recordbase.columns.column import Column
from recordbase.common.exceptions import column_definition_error
from recordbase.logging import get_logger
from recordbase.types.base import MetadataModel


logger = get_logger(__name__)


def _unwrap_optional(declared_type: Any) -> Any:
    """Strip ``Optional[...]`` so ``Optional[str]`` is still textual."""
    if typing.get_origin(declared_type) is typing.Union:
        args = [arg for arg in typing.get_args(declared_type) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return declared_type


def _make_getter(attribute: str) -> Callable[[Any], Any]:
    def getter(instance: Any) -> Any:
        return getattr(instance, attribute)
    return getter


def _make_setter(attribute: str) -> Callable[[Any, Any], None]:
    def setter(instance: Any, value: Any) -> None:
        setattr(instance, attribute, value)
    return setter


def _no_default() -> Any:
    return None


class ColumnDescriptor(MetadataModel):
    """Immutable description of one column of a record type.

    Attributes:
        name: Column name, unique per record type
        attribute: Python attribute holding the value
        declared_type: Declared value type
        ordinal: Position in reflector order
        getter: ``getter(instance) -> value``
        setter: ``setter(instance, value)``
        default_factory: Produces the value of a freshly constructed record
    """
    model_config = ConfigDict(frozen=True)

    name: str
    attribute: str
    declared_type: Any = object
    ordinal: int = Field(default=0, ge=0)
    getter: Callable[[Any], Any] = Field(exclude=True)
    setter: Callable[[Any, Any], None] = Field(exclude=True)
    default_factory: Callable[[], Any] = Field(default=_no_default, exclude=True)

    @field_serializer("declared_type")
    def serialize_declared_type(self, declared_type: Any) -> str:
        if typing.get_origin(declared_type) is None and isinstance(declared_type, type):
            return declared_type.__name__
        return repr(declared_type)

    @classmethod
    def from_column(cls, column: Column, ordinal: int) -> "ColumnDescriptor":
        """Build the descriptor for a ``Column`` declared in a class body."""
        return cls(
            name=column.name,
            attribute=column.attribute,
            declared_type=column.declared_type,
            ordinal=ordinal,
            getter=_make_getter(column.attribute),
            setter=_make_setter(column.attribute),
            default_factory=column.make_default,
        )

    @property
    def is_textual(self) -> bool:
        """Whether the declared type is ``str`` (or a subclass)."""
        base = _unwrap_optional(self.declared_type)
        return isinstance(base, type) and issubclass(base, str)

    def get(self, instance: Any) -> Any:
        return self.getter(instance)

    def set(self, instance: Any, value: Any) -> None:
        self.setter(instance, value)


ColumnTable = Tuple[ColumnDescriptor, ...]


class ColumnReflector:
    """Registry of column tables keyed by record type.

    Tables are derived lazily on first access and cached for the lifetime of
    the reflector. Access is guarded by a lock so records of the same type
    can be used from different threads.

    Example:
        >>> reflector = ColumnReflector()
        >>> [c.name for c in reflector.columns_of(Person)]
        ['id', 'full_name', 'tags']
    """

    def __init__(self):
        """Initialize the reflector."""
        self._tables: Dict[type, ColumnTable] = {}
        self._lock = threading.RLock()

    def columns_of(self, record_type: Type[Any]) -> ColumnTable:
        """Return the ordered column table of a record type.

        Args:
            record_type: The concrete record class

        Returns:
            Tuple of ColumnDescriptor in reflector order

        Raises:
            TypeError: If record_type is not a class
            RecordError: If the class declares two columns with the same name
        """
        table = self._tables.get(record_type)
        if table is not None:
            return table

        if not isinstance(record_type, type):
            raise TypeError(f"columns_of() expects a class, got {type(record_type).__name__}")

        with self._lock:
            table = self._tables.get(record_type)
            if table is None:
                table = self._derive(record_type)
                self._tables[record_type] = table
                logger.debug(
                    f"Derived column table for {record_type.__name__}: "
                    f"{', '.join(c.name for c in table) or '<none>'}"
                )
        return table

    def register(self, record_type: Type[Any], descriptors: Iterable[ColumnDescriptor]) -> None:
        """Register an explicit column table for a record type.

        Once a type has a table, subsequent registration attempts are ignored
        so every operation keeps seeing the same column order.

        Args:
            record_type: The record class
            descriptors: Column descriptors, in the order operations iterate them
        """
        table = tuple(descriptors)
        self._check_unique(record_type, table)

        with self._lock:
            if record_type in self._tables:
                logger.debug(
                    f"Columns of {record_type.__name__} already registered, ignoring re-registration attempt"
                )
                return
            self._tables[record_type] = table
        logger.debug(f"Registered column table for {record_type.__name__} ({len(table)} columns)")

    def is_registered(self, record_type: Type[Any]) -> bool:
        return record_type in self._tables

    def find(self, record_type: Type[Any], name: str) -> Optional[ColumnDescriptor]:
        """Look up a column of a record type by column name."""
        for column in self.columns_of(record_type):
            if column.name == name:
                return column
        return None

    def clear(self) -> None:
        """Drop every cached table."""
        with self._lock:
            self._tables.clear()

    def _derive(self, record_type: type) -> ColumnTable:
        declared: Dict[str, Column] = {}
        # Reversed MRO puts base-class columns first; overriding keeps the position
        for klass in reversed(record_type.__mro__):
            for attribute, value in vars(klass).items():
                if isinstance(value, Column):
                    declared[attribute] = value

        table = tuple(
            ColumnDescriptor.from_column(column, ordinal)
            for ordinal, column in enumerate(declared.values())
        )
        self._check_unique(record_type, table)
        return table

    @staticmethod
    def _check_unique(record_type: type, table: ColumnTable) -> None:
        seen = set()
        for column in table:
            if column.name in seen:
                raise column_definition_error(
                    f"Duplicate column name '{column.name}' on {record_type.__name__}",
                    record_type=record_type,
                    column=column.name,
                )
            seen.add(column.name)


_default_reflector = ColumnReflector()


def get_reflector() -> ColumnReflector:
    """Return the process-wide reflector used by RecordBase."""
    return _default_reflector


def columns_of(record_type: Type[Any]) -> ColumnTable:
    """Return the ordered column table of a record type from the default reflector."""
    return _default_reflector.columns_of(record_type)


def register_columns(record_type: Type[Any], descriptors: Iterable[ColumnDescriptor]) -> None:
    """Register an explicit column table with the default reflector."""
    _default_reflector.register(record_type, descriptors)
