"""Query – derivation pipeline and the ListQuery state holder.

``derive`` is the whole engine: search, then category filters, then a stable
sort.  It is a pure function of its inputs and may be called once per
keystroke; nothing is cached between calls.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import Generic, TypeVar

from teamsync.config.settings import EngineSettings
from teamsync.query.comparator import sort_records
from teamsync.query.filters import facet_values, filters_specification
from teamsync.query.matcher import SearchSpecification
from teamsync.query.state import QueryState, SortDirection
from teamsync.query.view import FilterOption, ListViewConfig, labelled
from teamsync.observability import get_logger

_log = get_logger(__name__)

R = TypeVar("R")


def derive(
    records: Iterable[R],
    state: QueryState,
    config: ListViewConfig | None = None,
    *,
    case_sensitive: bool | None = None,
) -> list[R]:
    """Filter and order *records* according to *state*.

    The input is never mutated and the result is a new list no longer than
    the input.  *config* supplies search fields, category projections and
    sort accessors; *case_sensitive* overrides the config's string ordering.
    """
    items = list(records)
    if case_sensitive is None:
        case_sensitive = config.case_sensitive_sort if config is not None else False
    search_fields = config.search_fields if config is not None else None
    projections = config.projections if config is not None else {}
    accessor = config.accessor_for(state.sort_field) if config is not None else None

    spec = SearchSpecification(state.search_term, search_fields) & filters_specification(state.filters, projections)
    kept = [item for item in items if spec.is_satisfied_by(item)]
    ordered = sort_records(
        kept,
        state.sort_field,
        state.sort_direction,
        accessor=accessor,
        case_sensitive=case_sensitive,
    )
    _log.debug(
        "query.derived",
        view=config.name if config is not None else None,
        total=len(items),
        filtered=len(ordered),
        sort_field=state.sort_field,
        sort_direction=state.sort_direction.value,
    )
    return ordered


@dataclasses.dataclass(frozen=True)
class QueryResult(Generic[R]):
    """Derived items plus the counts a list header shows ("3 of 12")."""

    items: list[R]
    total_count: int
    applied: QueryState

    @property
    def filtered_count(self) -> int:
        return len(self.items)

    @property
    def hidden_count(self) -> int:
        return self.total_count - self.filtered_count


class ListQuery(Generic[R]):
    """Holds one list view's ``QueryState`` and derives views from it.

    The actions are the only way the held state changes; each replaces it
    with a new immutable ``QueryState`` and returns that state.

    Example::

        tasks = ListQuery(config=screens.TASKS)
        tasks.set_search_term("deploy")
        tasks.toggle_filter_value("priority", "High")
        visible = tasks.derive(all_tasks)
    """

    def __init__(
        self,
        initial: QueryState | None = None,
        *,
        config: ListViewConfig | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        if initial is None:
            if config is None:
                raise ValueError("ListQuery needs an initial QueryState or a ListViewConfig")
            initial = config.initial_state()
        self._state = initial
        self._config = config
        self._case_sensitive = settings.case_sensitive_sort if settings is not None else None

    @classmethod
    def for_field(cls, sort_field: str, settings: EngineSettings | None = None) -> "ListQuery[R]":
        """Unconfigured view sorted by *sort_field* in the settings' default direction."""
        direction = settings.default_sort_direction if settings is not None else SortDirection.ASCENDING
        return cls(QueryState(sort_field=sort_field, sort_direction=direction), settings=settings)

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def config(self) -> ListViewConfig | None:
        return self._config

    def _replace(self, action: str, state: QueryState) -> QueryState:
        self._state = state
        _log.debug(
            "query.state.changed",
            view=self._config.name if self._config is not None else None,
            action=action,
            state=state.to_dict(),
        )
        return state

    # Actions ------------------------------------------------------------

    def set_search_term(self, term: str) -> QueryState:
        return self._replace("set_search_term", self._state.with_search_term(term))

    def toggle_filter_value(self, category: str, value: str) -> QueryState:
        return self._replace("toggle_filter_value", self._state.with_toggled_filter(category, value))

    def change_sort_field(self, field: str) -> QueryState:
        return self._replace("change_sort_field", self._state.with_sort_field(field))

    def set_sort_direction(self, direction: SortDirection | str) -> QueryState:
        return self._replace("set_sort_direction", self._state.with_sort_direction(direction))

    def clear_filters(self) -> QueryState:
        return self._replace("clear_filters", self._state.cleared())

    # Derivation ---------------------------------------------------------

    def derive(self, records: Iterable[R]) -> list[R]:
        return derive(records, self._state, self._config, case_sensitive=self._case_sensitive)

    def result(self, records: Iterable[R]) -> QueryResult[R]:
        items = list(records)
        return QueryResult(items=self.derive(items), total_count=len(items), applied=self._state)

    def filter_options(self, records: Iterable[R], category: str) -> tuple[FilterOption, ...]:
        """Options for *category*: the configured ones, else those present in *records*."""
        config = self._config.category(category) if self._config is not None else None
        if config is not None and config.options:
            return config.options
        projection = config.projection if config is not None else None
        return labelled(facet_values(records, category, projection))


__all__ = ["ListQuery", "QueryResult", "derive"]
