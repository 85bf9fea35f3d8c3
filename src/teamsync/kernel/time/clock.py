"""Kernel time – Clock port used for relative timestamps."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of "now" so relative-time labels are reproducible."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock pinned to *fixed*; naive values are taken as UTC."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed if fixed.tzinfo is not None else fixed.replace(tzinfo=UTC)

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Move the pinned instant forward by ``timedelta(**kwargs)``."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
