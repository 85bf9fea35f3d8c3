"""Query – per-screen list view configuration.

A ``ListViewConfig`` declares, for one screen, which fields free-text search
scans, which filter categories exist (and how each reads its value), which
sort options are offered and what the default sort is.  The engine itself
is screen-agnostic; everything screen-specific lives here.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

from teamsync.query.comparator import Accessor
from teamsync.query.filters import Projection
from teamsync.query.state import QueryState, SortDirection


@dataclasses.dataclass(frozen=True)
class FilterOption:
    """One selectable value of a filter category."""
    id: str
    label: str
    description: str | None = None
    disabled: bool = False


@dataclasses.dataclass(frozen=True)
class SortOption:
    """One entry of a sort dropdown."""
    id: str
    label: str
    description: str | None = None


@dataclasses.dataclass(frozen=True)
class CategoryConfig:
    """A filter category; ``projection`` computes its value from a record."""
    name: str
    label: str
    options: tuple[FilterOption, ...] = ()
    projection: Projection | None = None
    default_values: frozenset[str] = frozenset()
    multiple: bool = True

    def option_ids(self) -> frozenset[str]:
        return frozenset(option.id for option in self.options)


@dataclasses.dataclass(frozen=True)
class ListViewConfig:
    name: str
    default_sort_field: str
    default_sort_direction: SortDirection = SortDirection.ASCENDING
    search_fields: tuple[str, ...] | None = None
    categories: tuple[CategoryConfig, ...] = ()
    sort_options: tuple[SortOption, ...] = ()
    sort_accessors: Mapping[str, Accessor] = dataclasses.field(default_factory=dict)
    case_sensitive_sort: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_sort_direction", SortDirection.parse(self.default_sort_direction))
        if self.search_fields is not None:
            object.__setattr__(self, "search_fields", tuple(self.search_fields))
        object.__setattr__(self, "categories", tuple(self.categories))
        object.__setattr__(self, "sort_options", tuple(self.sort_options))

    @property
    def projections(self) -> dict[str, Projection]:
        return {c.name: c.projection for c in self.categories if c.projection is not None}

    def category(self, name: str) -> CategoryConfig | None:
        for candidate in self.categories:
            if candidate.name == name:
                return candidate
        return None

    def accessor_for(self, field: str) -> Accessor | None:
        return self.sort_accessors.get(field)

    def initial_state(self, **overrides: Any) -> QueryState:
        """Default ``QueryState`` for a freshly mounted view."""
        values: dict[str, Any] = {
            "sort_field": self.default_sort_field,
            "sort_direction": self.default_sort_direction,
            "filters": {c.name: c.default_values for c in self.categories if c.default_values},
        }
        values.update(overrides)
        return QueryState(**values)

    def validate_state(self, state: QueryState) -> list[str]:
        """Describe the parts of *state* this view does not know about.

        Never raises: an unknown column or category degrades to "no effect"
        in the engine, so these are warnings for the caller to surface.
        """
        warnings: list[str] = []
        known_sorts = {option.id for option in self.sort_options} | set(self.sort_accessors)
        if known_sorts and state.sort_field not in known_sorts:
            warnings.append(f"unknown sort field '{state.sort_field}'")
        for category, values in state.active_filters.items():
            config = self.category(category)
            if config is None:
                warnings.append(f"unknown filter category '{category}'")
                continue
            if not config.multiple and len(values) > 1:
                warnings.append(f"category '{category}' accepts a single value, got {len(values)}")
            unknown = values - config.option_ids() if config.options else frozenset()
            for value in sorted(unknown, key=str):
                warnings.append(f"unknown value '{value}' for category '{category}'")
        return warnings


def options(*pairs: tuple[str, str]) -> tuple[FilterOption, ...]:
    """Shorthand: ``options(("high", "High"), ...)``."""
    return tuple(FilterOption(id=option_id, label=label) for option_id, label in pairs)


def sort_options(*pairs: tuple[str, str]) -> tuple[SortOption, ...]:
    return tuple(SortOption(id=option_id, label=label) for option_id, label in pairs)


def labelled(values: Iterable[str]) -> tuple[FilterOption, ...]:
    """Options whose label is the value itself, e.g. from :func:`facet_values`."""
    return tuple(FilterOption(id=value, label=value) for value in values)


__all__ = [
    "CategoryConfig",
    "FilterOption",
    "ListViewConfig",
    "SortOption",
    "labelled",
    "options",
    "sort_options",
]
