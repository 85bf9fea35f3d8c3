"""Activity – "3m ago" style timestamps for notification rows."""
from __future__ import annotations

import math
from typing import Any

from teamsync.kernel.time import Clock, SystemClock
from teamsync.kernel.types import is_timestamp_like, to_datetime


def format_relative_time(timestamp: Any, *, clock: Clock | None = None) -> str:
    """Label *timestamp* relative to ``clock.now()``.

    Returns ``""`` for anything that is not a timestamp (e.g. a server-side
    timestamp placeholder that has not resolved yet).  Timestamps in the
    future read as ``just now``.  Past one week the UTC date is shown in ISO
    form.
    """
    if not is_timestamp_like(timestamp):
        return ""
    when = to_datetime(timestamp)
    if when is None:
        return ""
    now = (clock or SystemClock()).now()
    seconds = math.floor((now - when).total_seconds())
    if seconds < 5:
        return "just now"
    if seconds < 60:
        return f"{seconds}s ago"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days == 1:
        return "yesterday"
    if days < 7:
        return f"{days}d ago"
    return when.date().isoformat()


__all__ = ["format_relative_time"]
