"""Class decorators attaching table metadata to record types."""

from typing import Any, Callable, List, Optional, Type

from pydantic import Field, field_validator

from recordbase.types.base import MetadataModel


class TableMetadata(MetadataModel):
    """Metadata describing the table a record type is persisted in.

    Attributes:
        name: Table name used by the persistence layer.
        description: Human-readable description of the table.
        tags: Free-form tags for grouping record types.
    """
    name: str
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Table name must not be empty")
        return v


def table(
    name: str,
    description: Optional[str] = None,
    tags: Optional[List[str]] = None,
) -> Callable[[Type], Type]:
    """Decorator naming the table a record class maps to.

    Record classes without the decorator use their class name as table
    name. The metadata belongs to the decorated class only; subclasses do
    not inherit it.

    Args:
        name: Table name.
        description: Optional description of the table.
        tags: Optional list of tags.

    Returns:
        Decorated class with TableMetadata attached as ``__table_metadata__``.

    Example:
        >>> @table("people", description="Registered people")
        ... class Person(RecordBase):
        ...     id = Column(int)
    """
    def decorator(cls: Type) -> Type:
        cls.__table_metadata__ = TableMetadata(
            name=name,
            description=description,
            tags=tags or [],
        )
        return cls

    return decorator


def table_metadata_of(record_type: Type[Any]) -> Optional[TableMetadata]:
    """Return the TableMetadata declared on the class itself, if any."""
    return vars(record_type).get("__table_metadata__")


def table_name_of(record_type: Type[Any]) -> str:
    """Return the declared table name of a record class, or its class name."""
    metadata = table_metadata_of(record_type)
    return metadata.name if metadata is not None else record_type.__name__
