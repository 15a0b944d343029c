"""Tests for library configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from classmock.config import Settings, get_settings


def test_default_settings():
    """Settings should have sensible defaults."""
    settings = Settings(_env_file=None)

    assert settings.log_level == "WARNING"
    assert settings.log_json is False
    assert settings.construction_key == "constructor"
    assert settings.class_definition_key == "class_definition"
    assert settings.include_protected is True
    assert settings.mirror_async is True
    assert settings.reserved_keys == {"constructor", "class_definition"}


def test_env_overrides(monkeypatch):
    """CLASSMOCK_* environment variables override defaults."""
    monkeypatch.setenv("CLASSMOCK_CONSTRUCTION_KEY", "ctor")
    monkeypatch.setenv("CLASSMOCK_INCLUDE_PROTECTED", "false")

    settings = Settings(_env_file=None)

    assert settings.construction_key == "ctor"
    assert settings.include_protected is False


def test_keys_must_differ():
    with pytest.raises(ValidationError, match="must differ"):
        Settings(_env_file=None, construction_key="same", class_definition_key="same")


def test_keys_must_be_identifiers():
    with pytest.raises(ValidationError, match="identifier"):
        Settings(_env_file=None, construction_key="not a name")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
