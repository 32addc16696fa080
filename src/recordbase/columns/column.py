"""Column descriptor declared in the body of a record class.

A ``Column`` is a plain data descriptor: it stores the value of one column in
the instance ``__dict__`` under the attribute name it was assigned to, and it
carries the declaration (declared type, column name, default) the reflector
turns into a ``ColumnDescriptor``.
"""

from typing import Any, Callable, Optional


class Column:
    """Declare a column on a record class.

    Attributes:
        declared_type: Declared value type (``str``, ``int``, ``list[str]``...)
        name: Column name; defaults to the attribute name
        attribute: The attribute name this descriptor is assigned to
        default: Value of the column on a freshly constructed record
        default_factory: Callable producing the initial value, for mutable defaults

    Example:
        >>> class Person(RecordBase):
        >>>     id = Column(int)
        >>>     name = Column(str, name="full_name")
        >>>     tags = Column(list[str], default_factory=list)
    """

    def __init__(
        self,
        declared_type: Any = object,
        *,
        name: Optional[str] = None,
        default: Any = None,
        default_factory: Optional[Callable[[], Any]] = None,
    ):
        if default is not None and default_factory is not None:
            raise ValueError("Column accepts either default or default_factory, not both")
        if isinstance(default, (list, dict, set)):
            raise ValueError(
                f"Mutable default {type(default).__name__} is shared between records; "
                "use default_factory instead"
            )
        self.declared_type = declared_type
        self.name = name
        self.attribute: Optional[str] = None
        self.default = default
        self.default_factory = default_factory

    def __set_name__(self, owner: type, name: str) -> None:
        self.attribute = name
        if self.name is None:
            self.name = name

    def __get__(self, obj: Optional[Any], objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self  # Accessing via class
        return obj.__dict__.get(self.attribute)

    def __set__(self, obj: Any, value: Any) -> None:
        obj.__dict__[self.attribute] = value

    def make_default(self) -> Any:
        """Return the initial value for a new record."""
        if self.default_factory is not None:
            return self.default_factory()
        return self.default

    def __repr__(self) -> str:
        type_name = getattr(self.declared_type, "__name__", repr(self.declared_type))
        return f"Column({type_name}, name={self.name!r})"
