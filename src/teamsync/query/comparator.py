"""Query – type-aware record comparator and stable sort.

Two values are ordered only when they share a :class:`ValueKind`:

* STRING – locale-style comparison: accents and case are ignored at the
  primary level, then lower-case sorts before upper-case on a tie
  (``"Alice" < "bob" < "Carol"``).  ``case_sensitive=True`` falls back to
  code-point order.
* NUMBER – numeric order; NaN compares equal to everything.
* DATE – order of the underlying instant (epoch milliseconds).

Any other pairing (mixed kinds, booleans, arrays, absent fields) compares
equal.  That is a defined degeneracy, not an error.  :func:`sort_records`
keeps such values out of the way of the ordered ones: it groups values by
kind and places the unorderable ones last.
"""
from __future__ import annotations

import unicodedata
from collections.abc import Callable, Sequence
from functools import cmp_to_key, lru_cache
from typing import Any, TypeVar

from teamsync.kernel.types import Record, ValueKind, get_field, kind_of, to_epoch_millis
from teamsync.query.state import SortDirection

R = TypeVar("R")

Accessor = Callable[[Record], Any]


def _sign(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


@lru_cache(maxsize=4096)
def _primary_key(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def compare_strings(a: str, b: str, *, case_sensitive: bool = False) -> int:
    if case_sensitive:
        return _sign(a, b)
    primary = _sign(_primary_key(a), _primary_key(b))
    if primary:
        return primary
    return _sign(a.swapcase(), b.swapcase())


def compare_values(x: Any, y: Any, *, case_sensitive: bool = False) -> int:
    """Ascending three-way comparison of two field values (-1, 0 or 1)."""
    kind = kind_of(x)
    if kind is not kind_of(y):
        return 0
    match kind:
        case ValueKind.STRING:
            return compare_strings(x, y, case_sensitive=case_sensitive)
        case ValueKind.NUMBER:
            return _sign(x, y)
        case ValueKind.DATE:
            return _sign(to_epoch_millis(x), to_epoch_millis(y))
        case _:
            return 0


def _accessor_for(field: str, accessor: Accessor | None) -> Accessor:
    if accessor is not None:
        return accessor
    return lambda record: get_field(record, field)


def compare(
    a: Record,
    b: Record,
    field: str,
    direction: SortDirection | str = SortDirection.ASCENDING,
    *,
    accessor: Accessor | None = None,
    case_sensitive: bool = False,
) -> int:
    """Order *a* and *b* by *field* in *direction*.

    *accessor* replaces the plain field read, e.g. to sort priorities by rank.
    """
    sign = SortDirection.parse(direction).sign
    read = _accessor_for(field, accessor)
    return compare_values(read(a), read(b), case_sensitive=case_sensitive) * sign


def _orderable_kind(value: Any) -> ValueKind | None:
    """Kind of *value* when it can be ordered against its own kind, else ``None``."""
    kind = kind_of(value)
    if kind is ValueKind.NUMBER:
        return None if value != value else kind
    if kind in (ValueKind.STRING, ValueKind.DATE):
        return kind
    return None


def sort_records(
    records: Sequence[R],
    field: str,
    direction: SortDirection | str = SortDirection.ASCENDING,
    *,
    accessor: Accessor | None = None,
    case_sensitive: bool = False,
) -> list[R]:
    """Stable sort of *records* by :func:`compare`; returns a new list.

    Each sort value is read once.  Orderable values are grouped by kind,
    groups in order of first appearance, and sorted within their group.
    Unorderable values (absent, NaN, booleans, arrays, other objects) follow
    in input order, last in both directions.  So every adjacent pair in the
    result satisfies ``compare(a, b, ...) <= 0``, and records holding equal
    values keep their relative input order.
    """
    sign = SortDirection.parse(direction).sign
    read = _accessor_for(field, accessor)
    values = [read(record) for record in records]

    groups: dict[ValueKind, list[int]] = {}
    trailing: list[int] = []
    for index, value in enumerate(values):
        kind = _orderable_kind(value)
        if kind is None:
            trailing.append(index)
        else:
            groups.setdefault(kind, []).append(index)

    def _by_index(i: int, j: int) -> int:
        return compare_values(values[i], values[j], case_sensitive=case_sensitive) * sign

    order: list[int] = []
    for indices in groups.values():
        order.extend(sorted(indices, key=cmp_to_key(_by_index)))
    order.extend(trailing)
    return [records[i] for i in order]


__all__ = ["Accessor", "compare", "compare_strings", "compare_values", "sort_records"]
