"""Shared pytest fixtures for the safe-divide tests."""

import os

import pytest

from app.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep SAFEDIV_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith("SAFEDIV_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, default_numeric_type="float")
