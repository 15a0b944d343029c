"""Global pytest fixtures."""

from __future__ import annotations

import pytest

from classmock.config import Settings, get_settings

pytest_plugins = ["classmock.pytest_plugin"]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached Settings so env overrides in one test never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)
