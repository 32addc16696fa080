"""Settings for recordbase, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority), prefixed ``RECORDBASE_``
    2. ``.env`` file in the working directory
    3. Default Values in code (lowest priority)

Quick Start:
    >>> from recordbase.settings import get_settings
    >>> settings = get_settings()
    >>> settings.null_token
    'NULL'
"""

from .base import RecordSettings
from .main import get_settings, reload_settings

__all__ = [
    "RecordSettings",
    "get_settings",
    "reload_settings",
]
