"""bundle.py — The recorder mapping returned by ``get_mock()``.

A MockBundle maps every mocked method name and the construction key to its
double, and the class-definition key to the synthesized class::

    bundle = MockClassGenerator(SimplePrint).get_mock()
    bundle["print"] is bundle.print          # the print double
    bundle.constructor                       # the construction double
    bundle.class_definition                  # drop-in replacement class

Attribute access is a shortcut only; a method named like one of the
bundle's own members (``get``, ``items``, ``reset``...) is reached with
``bundle["reset"]``.

Called by: generator.py, pytest_plugin.py
Depends on: errors.py, doubles.py
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any
from unittest import mock

from classmock.core.doubles import AsyncDouble, Double
from classmock.core.errors import UsageError


class MockBundle(Mapping[str, Any]):
    """Read-only mapping of doubles plus the synthesized mock class.

    Lookups of names the original class never declared raise UsageError
    instead of silently creating a new mock.
    """

    def __init__(
        self,
        *,
        source: type,
        class_definition: type,
        construction: Double,
        methods: dict[str, Double | AsyncDouble],
        construction_key: str,
        class_definition_key: str,
    ) -> None:
        self._source = source
        self._class_definition = class_definition
        self._construction_key = construction_key
        self._class_definition_key = class_definition_key
        self._recorders: dict[str, Double | AsyncDouble] = {**methods, construction_key: construction}
        self._method_names = tuple(methods)

    # ─── Mapping protocol ─────────────────────────────────────────────────────

    def __getitem__(self, key: str) -> Any:
        if key == self._class_definition_key:
            return self._class_definition
        try:
            return self._recorders[key]
        except KeyError:
            raise UsageError(
                "UNKNOWN_METHOD",
                f"{self._source.__qualname__} declares no method {key!r}. "
                f"Mocked methods: {list(self._method_names)}",
            ) from None

    def __iter__(self) -> Iterator[str]:
        yield from self._recorders
        yield self._class_definition_key

    def __len__(self) -> int:
        return len(self._recorders) + 1

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __repr__(self) -> str:
        return (
            f"MockBundle(source={self._source.__qualname__}, "
            f"methods={list(self._method_names)})"
        )

    # ─── Accessors ────────────────────────────────────────────────────────────

    @property
    def source(self) -> type:
        """The class this bundle mocks."""
        return self._source

    @property
    def class_definition(self) -> type:
        return self._class_definition

    @property
    def construction(self) -> Double:
        """The double recording every instantiation of the mock class."""
        return self._recorders[self._construction_key]

    @property
    def method_names(self) -> tuple[str, ...]:
        return self._method_names

    @property
    def recorders(self) -> dict[str, Double | AsyncDouble]:
        """Copy of the doubles only, keyed like the bundle itself."""
        return dict(self._recorders)

    # ─── Test-case helpers ────────────────────────────────────────────────────

    def reset(self) -> None:
        """Reset every double; call between test cases."""
        for double in self._recorders.values():
            double.reset()

    def patch(self, target: str, **kwargs: Any) -> Any:
        """Replace ``target`` with the mock class for the duration of a with-block.

        Thin wrapper over ``unittest.mock.patch`` for code that imports the
        real class by name instead of accepting it as a parameter::

            with bundle.patch("app.printing.SimplePrint"):
                run_report()
        """
        return mock.patch(target, self._class_definition, **kwargs)
