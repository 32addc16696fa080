"""Base model class for recordbase metadata models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class MetadataModel(BaseModel):
    """Base model for all recordbase metadata models.

    Provides common functionality for the models that describe record
    types (column descriptors, table metadata):
    - Serialization to dictionary via to_dict()
    - Consistent configuration
    - Proper handling of nested models
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        use_enum_values=True,
        validate_assignment=True
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for serialization.

        Recursively converts nested MetadataModel instances to dictionaries.
        Fields declared with ``exclude=True`` (accessor callables) are left out.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        data = self.model_dump(by_alias=False, exclude_none=True)

        def convert_nested(obj):
            if isinstance(obj, MetadataModel):
                return obj.to_dict()
            elif isinstance(obj, dict):
                return {k: convert_nested(v) for k, v in obj.items()}
            elif isinstance(obj, (list, tuple)):
                return [convert_nested(item) for item in obj]
            elif hasattr(obj, 'value') and not isinstance(obj, type):  # Handle enums
                return obj.value
            return obj

        return convert_nested(data)
