"""Query – QueryState value object and SortDirection.

A ``QueryState`` describes one list view's current query: free-text search,
per-category accepted values and a single sort criterion.  It is immutable;
every transition returns a new instance, so a caller holding the latest
state gets last-write-wins semantics for free.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from teamsync.kernel.errors import InvalidQueryStateError

FilterMap = Mapping[str, frozenset[str]]


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def parse(cls, value: "SortDirection | str") -> "SortDirection":
        """Accept the enum itself or ``asc``/``ascending``/``desc``/``descending``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("asc", "ascending"):
                return cls.ASCENDING
            if lowered in ("desc", "descending"):
                return cls.DESCENDING
        raise InvalidQueryStateError("sort_direction", value, "must be 'asc' or 'desc'")

    def flipped(self) -> "SortDirection":
        return SortDirection.DESCENDING if self is SortDirection.ASCENDING else SortDirection.ASCENDING

    @property
    def sign(self) -> int:
        return 1 if self is SortDirection.ASCENDING else -1


def _normalise_filters(filters: Mapping[str, Iterable[str] | None] | None) -> dict[str, frozenset[str]]:
    if filters is None:
        return {}
    if not isinstance(filters, Mapping):
        raise InvalidQueryStateError("filters", filters, "must be a mapping of category to values")
    normalised: dict[str, frozenset[str]] = {}
    for category, values in filters.items():
        if values is None:
            normalised[category] = frozenset()
            continue
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise InvalidQueryStateError(
                "filters",
                values,
                f"category '{category}' must hold a collection of values",
            )
        normalised[category] = frozenset(values)
    return normalised


@dataclasses.dataclass(frozen=True)
class QueryState:
    """Immutable query description for one list view.

    ``filters`` maps a category to its accepted values.  An empty set means
    "no constraint"; a ``None`` set is normalised to empty on construction,
    so no category is ever undefined.
    """

    sort_field: str
    sort_direction: SortDirection = SortDirection.ASCENDING
    search_term: str = ""
    filters: FilterMap = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.search_term, str):
            raise InvalidQueryStateError("search_term", self.search_term, "must be a string")
        if not isinstance(self.sort_field, str):
            raise InvalidQueryStateError("sort_field", self.sort_field, "must be a string")
        object.__setattr__(self, "sort_direction", SortDirection.parse(self.sort_direction))
        object.__setattr__(self, "filters", MappingProxyType(_normalise_filters(self.filters)))

    def __hash__(self) -> int:
        return hash((self.sort_field, self.sort_direction, self.search_term, frozenset(self.filters.items())))

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def with_search_term(self, term: str) -> "QueryState":
        return dataclasses.replace(self, search_term=term)

    def with_toggled_filter(self, category: str, value: str) -> "QueryState":
        """Add *value* to the category's set, or remove it if present.

        A category whose set becomes empty is dropped from the mapping.
        """
        current = self.filters.get(category, frozenset())
        toggled = current - {value} if value in current else current | {value}
        filters = dict(self.filters)
        if toggled:
            filters[category] = toggled
        else:
            filters.pop(category, None)
        return dataclasses.replace(self, filters=filters)

    def with_sort_field(self, field: str) -> "QueryState":
        """Re-selecting the current field flips direction; a new field starts ascending."""
        if field == self.sort_field:
            return dataclasses.replace(self, sort_direction=self.sort_direction.flipped())
        return dataclasses.replace(self, sort_field=field, sort_direction=SortDirection.ASCENDING)

    def with_sort_direction(self, direction: SortDirection | str) -> "QueryState":
        return dataclasses.replace(self, sort_direction=SortDirection.parse(direction))

    def cleared(self) -> "QueryState":
        """Drop search and filters; the sort is a view preference and is kept."""
        return dataclasses.replace(self, search_term="", filters={})

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def active_filters(self) -> dict[str, frozenset[str]]:
        return {category: values for category, values in self.filters.items() if values}

    @property
    def active_filter_count(self) -> int:
        """Number of categories currently constraining the list."""
        return len(self.active_filters)

    @property
    def is_empty(self) -> bool:
        """True when neither search nor any category narrows the list."""
        return not self.search_term and not self.active_filters

    def summary(self) -> str:
        """Human-readable summary of what narrows the list."""
        parts: list[str] = []
        if self.search_term:
            parts.append(f"Search: '{self.search_term}'")
        for category, values in sorted(self.active_filters.items()):
            if len(values) <= 3:
                parts.append(f"{category}: {', '.join(sorted(map(str, values)))}")
            else:
                parts.append(f"{category}: {len(values)} selected")
        return " | ".join(parts) if parts else "All records (no filters)"

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly form, used in structured log events."""
        return {
            "search_term": self.search_term,
            "filters": {category: sorted(values, key=str) for category, values in self.filters.items()},
            "sort_field": self.sort_field,
            "sort_direction": self.sort_direction.value,
        }


__all__ = ["FilterMap", "QueryState", "SortDirection"]
