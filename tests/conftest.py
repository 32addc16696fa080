"""Shared pytest configuration for recordbase tests."""

import pytest

from recordbase.logging.filters import set_logging_context
from recordbase.settings import reload_settings

_SETTINGS_ENV = (
    "RECORDBASE_APP_ENV",
    "RECORDBASE_LOG_LEVEL",
    "RECORDBASE_NULL_TOKEN",
    "RECORDBASE_STRUCTURAL_HASH",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings and an empty logging context."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()
    set_logging_context(environment=None, extra=None)
