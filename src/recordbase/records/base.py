"""Base class for in-memory records of persisted rows.

``RecordBase`` derives structural equality, total ordering, snapshot-based
change detection and conversion to a plain key/value dict from the column
table of the concrete record class. Every operation walks the columns in
the same reflector order.
"""

from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, TypeVar

from recordbase.columns.reflector import columns_of
from recordbase.common.exceptions import instantiation_error, unknown_column_error
from recordbase.logging import get_logger, operation_scope
from recordbase.records.values import (
    compare_values,
    format_value,
    freeze,
    to_sink_value,
    values_equal,
)
from recordbase.settings import get_settings


logger = get_logger(__name__)

R = TypeVar("R", bound="RecordBase")


def _new_instance(record_type: Type[R]) -> R:
    """Build a record through its no-argument constructor."""
    try:
        return record_type()
    except Exception as exc:
        raise instantiation_error(record_type, cause=exc) from exc


def _compare_types(left: type, right: type) -> int:
    left_key = (left.__name__, f"{left.__module__}.{left.__qualname__}")
    right_key = (right.__name__, f"{right.__module__}.{right.__qualname__}")
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


class RecordBase:
    """Root class of every record type.

    Subclasses declare their columns with ``Column`` descriptors and must be
    constructible without arguments so they can be cloned.

    A record owns at most one snapshot, captured by ``cache()`` and compared
    against by ``is_changed``. Records are meant for a single owner: the
    snapshot check is not atomic, so share a record across threads only
    under external locking.

    Hashing is identity based unless structural hashing is enabled with the
    ``__structural_hash__`` class attribute or the ``structural_hash``
    setting. Equal records therefore only hash equal when structural hashing
    is on.

    Example:
        >>> class Person(RecordBase):
        ...     id = Column(int)
        ...     name = Column(str)
        ...     tags = Column(list[str])
        >>> Person(id=1, name="a", tags=["x", "y"]).describe()
        'Person(id: 1, name: "a", tags: [x, y])'
    """

    __structural_hash__: ClassVar[Optional[bool]] = None

    _snapshot: Optional["RecordBase"] = None

    def __init__(self, **values: Any):
        for column in columns_of(type(self)):
            if column.attribute in values:
                column.set(self, values.pop(column.attribute))
            else:
                column.set(self, column.default_factory())
        if values:
            raise TypeError(
                f"{type(self).__name__}() got unexpected column argument(s): "
                f"{', '.join(sorted(values))}"
            )

    # Representation

    def describe(self) -> str:
        """Return ``TypeName(column: value, ...)`` for every column in order.

        None renders as the configured null token, values of textual columns
        are double-quoted, arrays render as ``[a, b]``.
        """
        null_token = get_settings().null_token
        pairs = (
            f"{column.name}: {format_value(column.get(self), column.is_textual, null_token)}"
            for column in columns_of(type(self))
        )
        return f"{type(self).__name__}({', '.join(pairs)})"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return self.describe()

    # Equality and hashing

    def equals(self, other: Any) -> bool:
        """Whether ``other`` is this record or a record of the exact same type with equal column values."""
        if other is self:
            return True
        if other is None or type(other) is not type(self):
            return False
        return all(
            values_equal(column.get(self), column.get(other))
            for column in columns_of(type(self))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordBase):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, RecordBase):
            return NotImplemented
        return not self.equals(other)

    def __hash__(self) -> int:
        structural = type(self).__structural_hash__
        if structural is None:
            structural = get_settings().structural_hash
        if not structural:
            return object.__hash__(self)
        return hash((type(self), tuple(freeze(column.get(self)) for column in columns_of(type(self)))))

    # Ordering

    def compare_to(self, other: Optional[Any]) -> int:
        """Order this record against another, returning -1, 0 or 1.

        None sorts below every record. Records of different types are ordered
        by type name. Records of the same type are ordered by the first
        column whose values compare unequal; values that cannot be ordered
        never break the tie.
        """
        if other is None:
            return 1
        if other is self:
            return 0
        record_type = type(self)
        if type(other) is not record_type:
            return _compare_types(record_type, type(other))
        for column in columns_of(record_type):
            result = compare_values(column.get(self), column.get(other))
            if result != 0:
                return result
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RecordBase):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RecordBase):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RecordBase):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RecordBase):
            return NotImplemented
        return self.compare_to(other) >= 0

    # Cloning and change tracking

    def clone(self: R) -> R:
        """Return a new record of the same type with the same column values.

        Raises:
            InstantiationError: If the type cannot be constructed without arguments
        """
        record_type = type(self)
        with operation_scope("clone", record_type):
            clone = _new_instance(record_type)
            for column in columns_of(record_type):
                column.set(clone, column.get(self))
        return clone

    def cache(self) -> None:
        """Replace the snapshot with a fresh clone of this record.

        The clone is shallow: in-place changes to a mutable column value also
        reach the snapshot and are not reported by ``is_changed``.
        """
        with operation_scope("cache", type(self)):
            self._snapshot = self.clone()
            logger.debug(f"Cached snapshot of {type(self).__name__}")

    @property
    def snapshot(self) -> Optional["RecordBase"]:
        """The clone captured by the last ``cache()`` call, or None."""
        return self._snapshot

    @property
    def is_changed(self) -> bool:
        """Whether the columns differ from the cached snapshot; False without one."""
        if self._snapshot is None:
            return False
        return not self.equals(self._snapshot)

    def changed_columns(self) -> Dict[str, Tuple[Any, Any]]:
        """Map each column that differs from the snapshot to ``(old, new)``."""
        snapshot = self._snapshot
        if snapshot is None:
            return {}
        changes: Dict[str, Tuple[Any, Any]] = {}
        for column in columns_of(type(self)):
            old, new = column.get(snapshot), column.get(self)
            if not values_equal(old, new):
                changes[column.name] = (old, new)
        return changes

    # Value sink conversion

    def to_value_sink(self) -> Dict[str, Any]:
        """Return one ``column name -> value`` entry per column, in column order."""
        return {
            column.name: to_sink_value(column.get(self))
            for column in columns_of(type(self))
        }

    @classmethod
    def from_value_sink(cls: Type[R], data: Optional[Mapping[str, Any]]) -> Optional[R]:
        """Build a record from a mapping keyed by column name.

        Columns missing from ``data`` keep their default. None yields None.

        Raises:
            InstantiationError: If the type cannot be constructed without arguments
            RecordError: If a key does not name a column (UNKNOWN_COLUMN)
        """
        if data is None:
            return None
        with operation_scope("from_value_sink", cls):
            record = _new_instance(cls)
            by_name = {column.name: column for column in columns_of(cls)}
            for key, value in data.items():
                column = by_name.get(key)
                if column is None:
                    raise unknown_column_error(key, cls)
                column.set(record, value)
        return record


def to_value_sink(record: Optional[RecordBase]) -> Optional[Dict[str, Any]]:
    """Convert a record to its value sink; None stays None."""
    if record is None:
        return None
    return record.to_value_sink()


def records_equal(left: Optional[RecordBase], right: Optional[RecordBase]) -> bool:
    """Null-safe record equality: two Nones are equal, None and a record are not."""
    if left is None:
        return right is None
    return left.equals(right)


def records_not_equal(left: Optional[RecordBase], right: Optional[RecordBase]) -> bool:
    return not records_equal(left, right)
