"""pytest integration — registered through the ``pytest11`` entry point.

Provides the ``mock_class`` fixture, a factory that mocks a class for the
current test and resets every double it handed out at teardown::

    def test_report(mock_class):
        printer = mock_class(SimplePrint)
        printer.print.returns(42)

        assert run_report(printer_cls=printer.class_definition) == 42
        printer.constructor.assert_called_once()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from classmock.config import Settings, get_settings
from classmock.core.bundle import MockBundle
from classmock.core.generator import MockClassGenerator
from classmock.logging_config import configure_logging


def pytest_configure(config: pytest.Config) -> None:
    settings = get_settings()
    if settings.configure_logging:
        configure_logging(settings)


@pytest.fixture
def classmock_settings() -> Settings:
    """Settings used by ``mock_class``; override to change bundle keys per test module."""
    return get_settings()


@pytest.fixture
def mock_class(classmock_settings: Settings) -> Iterator[Callable[[type], MockBundle]]:
    """Factory fixture: ``mock_class(SomeClass) → MockBundle``."""
    bundles: list[MockBundle] = []

    def make(class_definition: type) -> MockBundle:
        bundle = MockClassGenerator(class_definition, classmock_settings).get_mock()
        bundles.append(bundle)
        return bundle

    yield make

    for bundle in bundles:
        bundle.reset()
