"""Unit tests for the kernel clocks."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from teamsync.kernel.time import Clock, FrozenClock, SystemClock


class TestSystemClock:
    def test_now_is_utc_aware(self) -> None:
        now = SystemClock().now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_satisfies_clock_protocol(self) -> None:
        clock: Clock = SystemClock()
        assert isinstance(clock.now(), datetime)


class TestFrozenClock:
    def test_returns_fixed_instant(self) -> None:
        fixed = datetime(2024, 5, 1, 9, 30, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == fixed
        assert clock.now() == fixed

    def test_naive_value_is_taken_as_utc(self) -> None:
        clock = FrozenClock(datetime(2024, 5, 1, 9, 30))
        assert clock.now() == datetime(2024, 5, 1, 9, 30, tzinfo=UTC)

    def test_advance(self) -> None:
        clock = FrozenClock(datetime(2024, 5, 1, tzinfo=UTC))
        clock.advance(hours=2, minutes=5)
        assert clock.now() == datetime(2024, 5, 1, 2, 5, tzinfo=UTC)
