from typing import Optional

from pydantic import ValidationError

from recordbase.common.exceptions import configuration_error

from .base import RecordSettings


_settings: Optional[RecordSettings] = None


def get_settings(force_reload: bool = False) -> RecordSettings:
    """Get the singleton settings instance for the process.

    Settings are read from ``RECORDBASE_*`` environment variables (and an
    optional ``.env`` file) on first access and reused afterwards.

    Args:
        force_reload: If True, creates a new settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        RecordSettings: The singleton settings instance

    Raises:
        RecordError: CONFIG_ERROR when the environment holds invalid values

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```
    """
    global _settings

    if _settings is None or force_reload:
        try:
            _settings = RecordSettings()
        except ValidationError as e:
            raise configuration_error(
                "Invalid recordbase settings",
                config_key=", ".join(str(error["loc"][0]) for error in e.errors() if error["loc"]),
                cause=e,
            ) from e

    return _settings


def reload_settings() -> RecordSettings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh RecordSettings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
