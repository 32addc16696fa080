"""Column value rules shared by the record operations.

Arrays are ``list`` and ``tuple`` values. Strings and bytes are scalars.
"""

from typing import Any, Hashable

_ARRAY_TYPES = (list, tuple)


def is_array(value: Any) -> bool:
    return isinstance(value, _ARRAY_TYPES)


def values_equal(a: Any, b: Any) -> bool:
    """Compare two column values.

    Two arrays are equal when they have the same length and their elements
    are pairwise equal under this same rule, whatever the array types. Two
    None values are equal; None never equals a non-None value.
    """
    if is_array(a) and is_array(b):
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    if a is None or b is None:
        return a is None and b is None
    return bool(a == b)


def compare_values(a: Any, b: Any) -> int:
    """Order two column values, returning -1, 0 or 1.

    None sorts before any other value. Values that cannot be ordered against
    each other (``TypeError`` from ``<``) compare as equal.
    """
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return -1 if a is None else 1
    try:
        if a < b:
            return -1
        if b < a:
            return 1
    except TypeError:
        return 0
    return 0


def format_value(value: Any, textual: bool = False, null_token: str = "NULL") -> str:
    """Render a column value for ``RecordBase.describe()``."""
    if value is None:
        return null_token
    if is_array(value):
        return "[" + ", ".join(format_value(item, null_token=null_token) for item in value) + "]"
    if textual:
        return f'"{value}"'
    return str(value)


def to_sink_value(value: Any) -> Any:
    """Convert a column value for the value sink: arrays become lists."""
    if is_array(value):
        return [to_sink_value(item) for item in value]
    return value


def freeze(value: Any) -> Hashable:
    """Hashable form of a column value, consistent with ``values_equal``.

    Arrays become tuples, dicts and sets become frozensets. Other unhashable
    values collapse to their type name, which equal values share.
    """
    if is_array(value):
        return tuple(freeze(item) for item in value)
    if isinstance(value, dict):
        return frozenset((key, freeze(item)) for key, item in value.items())
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)
    try:
        hash(value)
    except TypeError:
        return type(value).__name__
    return value
