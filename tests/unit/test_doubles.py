"""Tests for the recording doubles (core/doubles.py)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from classmock.core.doubles import AsyncDouble, Double, new_double


class TestDouble:
    """Tests for the synchronous double."""

    def test_default_result_is_none(self):
        assert Double()([1]) is None

    def test_is_a_magic_mock(self):
        assert isinstance(Double(), MagicMock)

    def test_set_behavior_receives_recorded_arguments(self):
        double = Double()
        double.set_behavior(lambda args, **kwargs: (args, kwargs))

        assert double([1, 2], flag=True) == ([1, 2], {"flag": True})

    def test_returns_overrides_behavior(self):
        double = Double().set_behavior(lambda args: "behavior")

        double.returns("fixed")

        assert double([]) == "fixed"

    def test_was_called_with_checks_any_call(self):
        double = Double()
        double(["a"])
        double(["b"], key=1)

        assert double.was_called_with(["a"])
        assert double.was_called_with(["b"], key=1)
        assert not double.was_called_with(["b"])
        assert not double.was_called_with("a")

    def test_calls_lists_sequences_in_order(self):
        double = Double()
        double([1])
        double([2, 3])

        assert double.calls == [[1], [2, 3]]

    def test_reset_clears_history_and_behavior(self):
        double = Double().returns(5)
        double([1])

        double.reset()

        assert double.calls == []
        assert double.call_count == 0
        assert double([1]) is None

    def test_side_effect_exception_propagates(self):
        double = Double()
        double.side_effect = ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            double([])


class TestAsyncDouble:
    """Tests for the awaitable double."""

    def test_is_an_async_mock(self):
        assert isinstance(AsyncDouble(), AsyncMock)

    @pytest.mark.anyio
    async def test_default_awaited_result_is_none(self):
        assert await AsyncDouble()([]) is None

    @pytest.mark.anyio
    async def test_sync_behavior_result_is_awaited_value(self):
        double = AsyncDouble().set_behavior(lambda args: len(args))

        assert await double([1, 2, 3]) == 3

    @pytest.mark.anyio
    async def test_reset_restores_none(self):
        double = AsyncDouble().returns("x")
        await double([])

        double.reset()

        assert double.await_count == 0
        assert await double([]) is None


def test_new_double_picks_kind_and_name():
    sync_double = new_double("MockThing.run")
    async_double = new_double("MockThing.fetch", is_async=True)

    assert isinstance(sync_double, Double)
    assert isinstance(async_double, AsyncDouble)
    assert "MockThing.run" in repr(sync_double)
