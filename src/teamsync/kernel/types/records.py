"""Kernel types – uniform field access over mappings, dataclasses and objects."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from typing import Any

from teamsync.kernel.types.values import MISSING

Record = Any


def field_items(record: Record) -> Iterator[tuple[str, Any]]:
    """Iterate ``(name, value)`` pairs of a record's top-level fields."""
    if isinstance(record, Mapping):
        yield from record.items()
    elif dataclasses.is_dataclass(record) and not isinstance(record, type):
        for f in dataclasses.fields(record):
            yield f.name, getattr(record, f.name)
    elif hasattr(record, "__dict__"):
        yield from vars(record).items()


def _get_one(container: Any, name: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(name, MISSING)
    if container is None or container is MISSING or isinstance(container, (str, bytes)):
        return MISSING
    return getattr(container, name, MISSING)


def get_field(record: Record, name: str) -> Any:
    """Read *name* from *record*, returning :data:`MISSING` when absent.

    A literal key always wins.  Otherwise a dotted name such as
    ``"details.message"`` walks nested mappings/objects.
    """
    value = _get_one(record, name)
    if value is not MISSING or "." not in name:
        return value
    current: Any = record
    for part in name.split("."):
        current = _get_one(current, part)
        if current is MISSING:
            return MISSING
    return current


__all__ = ["Record", "field_items", "get_field"]
