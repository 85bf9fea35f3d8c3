"""Query – free-text field matcher.

Only STRING-kind values are searched.  Numbers, dates, booleans and arrays
are skipped; a caller that wants them searchable projects them into a
string field first.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from teamsync.kernel.specification import BaseSpecification
from teamsync.kernel.types import Record, ValueKind, field_items, get_field, kind_of


def _candidate_values(record: Record, fields: Sequence[str] | None) -> Iterator[Any]:
    if fields is None:
        for _, value in field_items(record):
            yield value
    else:
        for name in fields:
            yield get_field(record, name)


def matches(record: Record, search_term: str, fields: Sequence[str] | None = None) -> bool:
    """True if any string field of *record* contains *search_term*, ignoring case.

    An empty term matches every record.  *fields* restricts the scan to the
    named (possibly dotted) fields.
    """
    if not search_term:
        return True
    needle = search_term.casefold()
    return any(
        kind_of(value) is ValueKind.STRING and needle in value.casefold()
        for value in _candidate_values(record, fields)
    )


class SearchSpecification(BaseSpecification[Record]):
    """:func:`matches` bound to one term, for composition with filter specs."""

    def __init__(self, search_term: str, fields: Iterable[str] | None = None) -> None:
        self.search_term = search_term
        self.fields: tuple[str, ...] | None = tuple(fields) if fields is not None else None

    def is_satisfied_by(self, candidate: Record) -> bool:
        return matches(candidate, self.search_term, self.fields)

    def __repr__(self) -> str:
        return f"SearchSpecification({self.search_term!r}, fields={self.fields!r})"


__all__ = ["SearchSpecification", "matches"]
