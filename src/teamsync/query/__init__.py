"""List query engine – public re-export surface.

Screen configurations live in :mod:`teamsync.query.screens` and are not
re-exported here.
"""

from teamsync.query.comparator import (
    Accessor,
    compare,
    compare_strings,
    compare_values,
    sort_records,
)
from teamsync.query.filters import (
    Bucket,
    CategorySpecification,
    Projection,
    bucket,
    category_value,
    facet_values,
    filters_specification,
    passes_filters,
)
from teamsync.query.matcher import SearchSpecification, matches
from teamsync.query.pipeline import ListQuery, QueryResult, derive
from teamsync.query.state import FilterMap, QueryState, SortDirection
from teamsync.query.view import (
    CategoryConfig,
    FilterOption,
    ListViewConfig,
    SortOption,
    labelled,
    options,
    sort_options,
)

__all__ = [
    "Accessor",
    "Bucket",
    "CategoryConfig",
    "CategorySpecification",
    "FilterMap",
    "FilterOption",
    "ListQuery",
    "ListViewConfig",
    "Projection",
    "QueryResult",
    "QueryState",
    "SearchSpecification",
    "SortDirection",
    "SortOption",
    "bucket",
    "category_value",
    "compare",
    "compare_strings",
    "compare_values",
    "derive",
    "facet_values",
    "filters_specification",
    "labelled",
    "matches",
    "options",
    "passes_filters",
    "sort_records",
]
