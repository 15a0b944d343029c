"""doubles.py — Call-recording test doubles backed by unittest.mock.

A double is a MagicMock (or AsyncMock for coroutine methods) with:
    - ``None`` as the default result instead of a child mock
    - ``set_behavior(fn)`` / ``returns(value)`` to install a result
    - ``was_called_with(...)`` / ``calls`` to read the call history
    - ``reset()`` to forget history and behaviors between test cases

Everything unittest.mock offers (``assert_called_once_with``,
``call_args_list``, ``side_effect``...) keeps working unchanged.

Called by: generator.py
Depends on: Nothing outside the standard library
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock, call


class _RecorderMixin:
    """Behavior and history helpers shared by sync and async doubles."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("return_value", None)
        super().__init__(*args, **kwargs)

    def set_behavior(self, behavior: Callable[..., Any]) -> _RecorderMixin:
        """Compute each result by calling ``behavior`` with the recorded arguments.

        Mock methods record their positional arguments as one list, so the
        behavior receives that list first::

            bundle.print.set_behavior(lambda args: args[0].upper())
        """
        self.side_effect = behavior
        return self

    def returns(self, value: Any) -> _RecorderMixin:
        """Return ``value`` from every subsequent call."""
        self.side_effect = None
        self.return_value = value
        return self

    def was_called_with(self, *args: Any, **kwargs: Any) -> bool:
        """True when any recorded call matches exactly."""
        return call(*args, **kwargs) in self.call_args_list

    @property
    def calls(self) -> list[Any]:
        """Recorded positional argument sequences, oldest first."""
        return [recorded.args[0] if recorded.args else [] for recorded in self.call_args_list]

    def reset(self) -> None:
        """Forget recorded calls and installed behaviors."""
        self.reset_mock(return_value=True, side_effect=True)
        self.return_value = None


class Double(_RecorderMixin, MagicMock):
    """Recorder for a plain method or a construction path."""


class AsyncDouble(_RecorderMixin, AsyncMock):
    """Recorder for an ``async def`` method; awaiting it yields the result."""


def new_double(name: str, *, is_async: bool = False) -> Double | AsyncDouble:
    """Create a fresh double named after the member it records."""
    if is_async:
        return AsyncDouble(name=name)
    return Double(name=name)
