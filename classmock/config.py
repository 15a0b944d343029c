"""Library settings via pydantic-settings.

Every knob can be set from the environment with the ``CLASSMOCK_`` prefix
(or from a ``.env`` file in the working directory):

    CLASSMOCK_CONFIGURE_LOGGING     → let the pytest plugin set up structlog
    CLASSMOCK_LOG_LEVEL             → structlog filtering level (default WARNING)
    CLASSMOCK_LOG_JSON              → render log events as JSON lines
    CLASSMOCK_CONSTRUCTION_KEY      → bundle key of the construction double
    CLASSMOCK_CLASS_DEFINITION_KEY  → bundle key of the synthesized class
    CLASSMOCK_INCLUDE_PROTECTED     → also mock ``_single_underscore`` methods
    CLASSMOCK_MIRROR_ASYNC          → mirror ``async def`` methods as coroutines
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration loaded from environment variables.

    Called by: generator.py, logging_config.py, pytest_plugin.py
    (via ``get_settings()``), or passed explicitly to a generator.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLASSMOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ─── Logging ──────────────────────────────────────────────────────────────
    # Read by the pytest plugin only; the generator never configures logging.
    configure_logging: bool = False
    log_level: str = "WARNING"
    log_json: bool = False

    # ─── Bundle Keys ──────────────────────────────────────────────────────────
    # Reserved keys of the mapping returned by get_mock(). A mocked class may
    # not declare a method with either name.
    construction_key: str = "constructor"
    class_definition_key: str = "class_definition"

    # ─── Introspection ────────────────────────────────────────────────────────
    include_protected: bool = True
    mirror_async: bool = True

    @field_validator("construction_key", "class_definition_key")
    @classmethod
    def _key_is_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"bundle key must be a Python identifier, got {value!r}")
        return value

    @model_validator(mode="after")
    def _keys_are_distinct(self) -> Settings:
        if self.construction_key == self.class_definition_key:
            raise ValueError("construction_key and class_definition_key must differ")
        return self

    @property
    def reserved_keys(self) -> frozenset[str]:
        """Keys of the bundle that never name a mocked method."""
        return frozenset({self.construction_key, self.class_definition_key})


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
