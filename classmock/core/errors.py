"""errors.py — Error taxonomy for mock class generation.

Two failure families:
    ConfigurationError → the input (or the settings) cannot produce a mock.
    UsageError         → test code looked up a method the original never had.

Called by: introspection.py, generator.py, bundle.py
Depends on: Nothing
"""

from __future__ import annotations


class ClassMockError(Exception):
    """Base error for mock class generation failures."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ClassMockError, TypeError):
    """The input is not introspectable as a constructible type."""


class UsageError(ClassMockError, AttributeError, KeyError):
    """A lookup named a method that the mocked class does not declare.

    Subclasses both AttributeError and KeyError so ``getattr(bundle, name,
    default)`` and ``bundle.get(name)`` keep their usual fallbacks.
    """
