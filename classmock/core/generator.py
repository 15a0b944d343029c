"""generator.py — Synthesizes drop-in mock classes from real ones.

Given a class, ``MockClassGenerator.get_mock()`` builds a brand-new type with
the same method names. Every method forwards its positional arguments, as
ONE list, to a dedicated double and returns whatever that double returns.
The mock's ``__init__`` does the same with the construction double and
nothing else::

    bundle = MockClassGenerator(SimplePrint).get_mock()
    bundle.print.returns(42)

    printer = bundle.class_definition(console)
    printer.print("something")                      # → 42
    bundle.constructor.assert_called_once_with([console])
    bundle.print.assert_called_once_with(["something"])

Keyword arguments ride along as keywords of the same recorded call.

Called by: test code, pytest_plugin.py
Depends on: config.py, introspection.py, doubles.py, bundle.py
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from classmock.config import Settings, get_settings
from classmock.core.bundle import MockBundle
from classmock.core.doubles import AsyncDouble, Double, new_double
from classmock.core.errors import ConfigurationError
from classmock.core.introspection import DeclaredMethod, declared_methods

logger = structlog.get_logger()


def _forwarding_method(double: Double) -> Callable[..., Any]:
    def method(self: Any, *args: Any, **kwargs: Any) -> Any:
        return double(list(args), **kwargs)

    return method


def _async_forwarding_method(double: AsyncDouble) -> Callable[..., Any]:
    async def method(self: Any, *args: Any, **kwargs: Any) -> Any:
        return await double(list(args), **kwargs)

    return method


def _construction_path(double: Double) -> Callable[..., None]:
    def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
        double(list(args), **kwargs)

    return __init__


class MockClassGenerator:
    """Builds (recorders, mock class) pairs for one source class.

    The generator only stores the class; introspection happens on every
    ``get_mock()`` call, and every call returns an independent bundle.
    """

    def __init__(self, class_definition: type, settings: Settings | None = None) -> None:
        """Remember the class to mock.

        Args:
            class_definition: The real class the system under test constructs.
            settings: Optional explicit settings; defaults to ``get_settings()``.
        """
        self._class_definition = class_definition
        self._settings = settings or get_settings()

    @property
    def class_definition(self) -> type:
        return self._class_definition

    def get_mock(self) -> MockBundle:
        """Synthesize a fresh mock class and its doubles.

        Returns:
            MockBundle keyed by method name, the construction key and the
            class-definition key.

        Raises:
            ConfigurationError: If the stored object is not a class, or one of
                its methods is named like a reserved bundle key.
        """
        settings = self._settings
        methods = declared_methods(
            self._class_definition,
            include_protected=settings.include_protected,
        )
        source: type = self._class_definition
        self._check_reserved_keys(source, methods)

        mock_name = f"Mock{source.__name__}"
        construction = new_double(f"{mock_name}.{settings.construction_key}")
        init = _construction_path(construction)
        init.__qualname__ = f"{mock_name}.__init__"

        namespace: dict[str, Any] = {
            "__init__": init,
            "__doc__": source.__doc__,
            "__module__": source.__module__,
            "__qualname__": mock_name,
        }
        doubles: dict[str, Double | AsyncDouble] = {}
        for declared in methods:
            is_async = declared.is_async and settings.mirror_async
            double = new_double(f"{mock_name}.{declared.name}", is_async=is_async)
            if is_async:
                method = _async_forwarding_method(double)
            else:
                method = _forwarding_method(double)
            method.__name__ = declared.name
            method.__qualname__ = f"{mock_name}.{declared.name}"
            method.__doc__ = declared.doc
            namespace[declared.name] = method
            doubles[declared.name] = double

        mock_class = type(mock_name, (), namespace)

        logger.debug(
            "mock_class_generated",
            source=source.__qualname__,
            mock=mock_name,
            methods=list(doubles),
        )
        return MockBundle(
            source=source,
            class_definition=mock_class,
            construction=construction,
            methods=doubles,
            construction_key=settings.construction_key,
            class_definition_key=settings.class_definition_key,
        )

    def _check_reserved_keys(self, source: type, methods: list[DeclaredMethod]) -> None:
        clashes = [m.name for m in methods if m.name in self._settings.reserved_keys]
        if clashes:
            raise ConfigurationError(
                "RESERVED_KEY",
                f"{source.__qualname__} declares {clashes}, which clash with the "
                f"reserved bundle keys {sorted(self._settings.reserved_keys)}. "
                "Set CLASSMOCK_CONSTRUCTION_KEY / CLASSMOCK_CLASS_DEFINITION_KEY "
                "to other names.",
            )


def get_mock(class_definition: type, settings: Settings | None = None) -> MockBundle:
    """One-shot shortcut for ``MockClassGenerator(class_definition).get_mock()``."""
    return MockClassGenerator(class_definition, settings).get_mock()
