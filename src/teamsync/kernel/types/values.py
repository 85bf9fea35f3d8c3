"""Kernel types – ValueKind tag, MISSING sentinel and value coercions.

Every field value the engine touches is classified once into a
:class:`ValueKind`.  Matching, filtering and ordering dispatch on that tag
instead of probing Python types at each call site.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Final


class ValueKind(str, Enum):
    """Tagged variant over the value shapes a record field may hold."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    ARRAY = "array"
    BOOLEAN = "boolean"
    MISSING = "missing"
    OTHER = "other"


class _Missing:
    """Sentinel for an absent field (distinct from an explicit ``None``)."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()

ARRAY_TYPES: Final = (list, tuple, set, frozenset)


def _numeric_attr(value: Any, *names: str) -> float | None:
    for name in names:
        if isinstance(value, Mapping):
            raw = value.get(name)
        else:
            raw = getattr(value, name, None)
        if isinstance(raw, Real) and not isinstance(raw, bool):
            return float(raw)
    return None


def is_timestamp_like(value: Any) -> bool:
    """True for dates, datetimes and document-store timestamp objects.

    Document-store timestamps are recognised either by a ``seconds`` plus
    ``nanoseconds`` (or ``nanos``) pair, as attributes or mapping keys, or by
    a ``to_datetime()`` method.
    """
    if isinstance(value, (datetime, date)):
        return True
    if _numeric_attr(value, "seconds") is not None and _numeric_attr(value, "nanoseconds", "nanos") is not None:
        return True
    if isinstance(value, Mapping):
        return False
    return callable(getattr(value, "to_datetime", None))


def kind_of(value: Any) -> ValueKind:
    """Classify *value* into its :class:`ValueKind`."""
    if value is MISSING or value is None:
        return ValueKind.MISSING
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (Real, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, ARRAY_TYPES):
        return ValueKind.ARRAY
    if is_timestamp_like(value):
        return ValueKind.DATE
    return ValueKind.OTHER


def to_epoch_millis(value: Any) -> float:
    """Return the instant of a DATE-kind *value* in milliseconds since the epoch.

    Naive datetimes are read as UTC; a bare ``date`` is midnight UTC.

    Raises:
        TypeError: *value* is not timestamp-like.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.timestamp() * 1000.0
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC).timestamp() * 1000.0
    seconds = _numeric_attr(value, "seconds")
    nanos = _numeric_attr(value, "nanoseconds", "nanos")
    if seconds is not None and nanos is not None:
        return seconds * 1000.0 + nanos / 1_000_000.0
    to_datetime = getattr(value, "to_datetime", None)
    if callable(to_datetime):
        return to_epoch_millis(to_datetime())
    raise TypeError(f"{type(value).__name__} is not a timestamp-like value")


def to_datetime(value: Any) -> datetime | None:
    """Aware UTC ``datetime`` for a timestamp-like *value*, else ``None``."""
    if not is_timestamp_like(value):
        return None
    return datetime.fromtimestamp(to_epoch_millis(value) / 1000.0, tz=UTC)


def filter_token(value: Any) -> str | None:
    """Coerce a scalar to the string form used in filter value sets.

    ``None`` and :data:`MISSING` yield ``None``, which never matches a set.
    """
    if value is MISSING or value is None:
        return None
    if isinstance(value, Enum):
        return filter_token(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (float, Decimal)):
        if math.isfinite(value) and value == int(value):
            return str(int(value))
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


__all__ = [
    "ARRAY_TYPES",
    "MISSING",
    "ValueKind",
    "filter_token",
    "is_timestamp_like",
    "kind_of",
    "to_datetime",
    "to_epoch_millis",
]
