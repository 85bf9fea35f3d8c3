"""Query – category filter predicate set.

``filters`` maps a category name to the set of accepted values.  Semantics:

* OR within a category: the record's value must be one of the accepted values.
* AND across categories: every non-empty category must pass.
* An empty (or absent) category imposes no constraint.

A category's record value is read from the field of the same name unless a
projection is supplied for it, which is how computed buckets (team size,
progress bands) are filtered without special cases.
"""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from teamsync.kernel.specification import AllOf, BaseSpecification
from teamsync.kernel.types import MISSING, Record, ValueKind, filter_token, get_field, kind_of
from teamsync.observability import get_logger

_log = get_logger(__name__)

Projection = Callable[[Record], Any]


def _accepted_tokens(category: str, accepted: Any) -> frozenset[str]:
    """Accepted-value set for *category*; malformed sets are no-op'd (empty)."""
    if accepted is None:
        return frozenset()
    if isinstance(accepted, (str, bytes)) or not isinstance(accepted, Iterable):
        _log.warning(
            "query.filter.malformed_category",
            category=category,
            value_type=type(accepted).__name__,
        )
        return frozenset()
    return frozenset(token for token in map(filter_token, accepted) if token is not None)


def category_value(record: Record, category: str, projection: Projection | None = None) -> Any:
    """The value a category filter inspects on *record*."""
    if projection is not None:
        return projection(record)
    return get_field(record, category)


def _value_accepted(value: Any, accepted: frozenset[str]) -> bool:
    if kind_of(value) is ValueKind.ARRAY:
        return any(filter_token(item) in accepted for item in value)
    token = filter_token(value)
    return token is not None and token in accepted


class CategorySpecification(BaseSpecification[Record]):
    """One category of the predicate set as a composable specification."""

    def __init__(self, category: str, accepted: Iterable[Any], projection: Projection | None = None) -> None:
        self.category = category
        self.accepted = _accepted_tokens(category, accepted)
        self.projection = projection

    def is_satisfied_by(self, candidate: Record) -> bool:
        if not self.accepted:
            return True
        return _value_accepted(category_value(candidate, self.category, self.projection), self.accepted)

    def __repr__(self) -> str:
        return f"CategorySpecification({self.category!r}, {sorted(self.accepted, key=str)!r})"


def filters_specification(
    filters: Mapping[str, Any] | None,
    projections: Mapping[str, Projection] | None = None,
) -> AllOf[Record]:
    """Compile *filters* into the conjunction of its active categories."""
    projections = projections or {}
    specs: list[BaseSpecification[Record]] = []
    for category, accepted in (filters or {}).items():
        spec = CategorySpecification(category, accepted, projections.get(category))
        if spec.accepted:
            specs.append(spec)
    return AllOf(specs)


def passes_filters(
    record: Record,
    filters: Mapping[str, Any] | None,
    projections: Mapping[str, Projection] | None = None,
) -> bool:
    """True if *record* satisfies every non-empty category of *filters*."""
    if not filters:
        return True
    return filters_specification(filters, projections).is_satisfied_by(record)


def _facet_order(token: str) -> tuple[str, str]:
    return token.casefold(), token


def facet_values(
    records: Iterable[Record],
    category: str,
    projection: Projection | None = None,
) -> list[str]:
    """Distinct filter tokens present for *category* across *records*.

    Array values contribute each element.  Used to build filter options
    from the data itself (e.g. the roles present in a member list).
    """
    seen: set[str] = set()
    for record in records:
        value = category_value(record, category, projection)
        items = value if kind_of(value) is ValueKind.ARRAY else (value,)
        for item in items:
            token = filter_token(item)
            if token:
                seen.add(token)
    return sorted(seen, key=_facet_order)


@dataclasses.dataclass(frozen=True)
class Bucket:
    """Named half-open numeric range ``[lower, upper)``; ``None`` is unbounded."""

    name: str
    lower: float | None = None
    upper: float | None = None

    def contains(self, number: float) -> bool:
        if self.lower is not None and number < self.lower:
            return False
        if self.upper is not None and number >= self.upper:
            return False
        return True


def bucket(source: str | Projection, buckets: Sequence[Bucket]) -> Projection:
    """Projection that maps a numeric field into the first matching bucket name.

    *source* is a field name or a projection.  Array values are bucketed by
    their length (member lists bucket into team sizes).  Values that are not
    numeric, or fall outside every bucket, project to :data:`MISSING` and so
    never match a category set.
    """

    def _project(record: Record) -> Any:
        raw = source(record) if callable(source) else get_field(record, source)
        kind = kind_of(raw)
        if kind is ValueKind.ARRAY:
            number = float(len(raw))
        elif kind is ValueKind.NUMBER:
            number = float(raw)
        else:
            return MISSING
        if math.isnan(number):
            return MISSING
        for candidate in buckets:
            if candidate.contains(number):
                return candidate.name
        return MISSING

    _project.__name__ = f"bucket_{source if isinstance(source, str) else getattr(source, '__name__', 'value')}"
    return _project


__all__ = [
    "Bucket",
    "CategorySpecification",
    "Projection",
    "bucket",
    "category_value",
    "facet_values",
    "filters_specification",
    "passes_filters",
]
