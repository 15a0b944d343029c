"""classmock — drop-in mock classes for tests.

Give it a class, get back a look-alike class whose methods are recording
doubles, plus the doubles themselves to program and assert on.

Contents:
    core/generator.py      — MockClassGenerator / get_mock()
    core/bundle.py         — MockBundle, the mapping get_mock() returns
    core/doubles.py        — Double / AsyncDouble (unittest.mock based)
    core/introspection.py  — which methods a class declares itself
    config.py              — CLASSMOCK_* settings
    pytest_plugin.py       — the ``mock_class`` fixture
"""

from classmock.core import (
    AsyncDouble,
    ClassMockError,
    ConfigurationError,
    Double,
    MockBundle,
    MockClassGenerator,
    UsageError,
    get_mock,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncDouble",
    "ClassMockError",
    "ConfigurationError",
    "Double",
    "MockBundle",
    "MockClassGenerator",
    "UsageError",
    "get_mock",
]
