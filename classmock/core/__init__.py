"""Core mock class machinery: introspection, doubles, bundles, generator."""

from classmock.core.bundle import MockBundle
from classmock.core.doubles import AsyncDouble, Double, new_double
from classmock.core.errors import ClassMockError, ConfigurationError, UsageError
from classmock.core.generator import MockClassGenerator, get_mock
from classmock.core.introspection import DeclaredMethod, declared_method_names, declared_methods

__all__ = [
    "AsyncDouble",
    "ClassMockError",
    "ConfigurationError",
    "DeclaredMethod",
    "Double",
    "MockBundle",
    "MockClassGenerator",
    "UsageError",
    "declared_method_names",
    "declared_methods",
    "get_mock",
    "new_double",
]
