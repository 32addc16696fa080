"""Base types for recordbase.

This module provides the pydantic base model shared by the metadata classes
that describe record types.
"""

from .base import MetadataModel

__all__ = [
    'MetadataModel',
]
