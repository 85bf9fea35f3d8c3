"""Unit tests for the type-aware comparator and stable sort."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from teamsync.kernel.types import MISSING
from teamsync.query.comparator import compare, compare_strings, compare_values, sort_records
from teamsync.query.state import SortDirection


class TestCompareStrings:
    def test_case_insensitive_primary_order(self) -> None:
        assert compare_strings("Alice", "bob") == -1
        assert compare_strings("bob", "Carol") == -1
        assert compare_strings("Carol", "alice") == 1

    def test_lower_case_first_on_tie(self) -> None:
        assert compare_strings("a", "A") == -1
        assert compare_strings("A", "a") == 1

    def test_identical(self) -> None:
        assert compare_strings("same", "same") == 0

    def test_accents_ignored_at_primary_level(self) -> None:
        assert compare_strings("Émile", "Eric") == -1
        assert compare_strings("élan", "ezra") == -1

    def test_case_sensitive_uses_code_points(self) -> None:
        assert compare_strings("Carol", "bob", case_sensitive=True) == -1
        assert compare_strings("bob", "Carol", case_sensitive=True) == 1


class TestCompareValues:
    def test_numbers(self) -> None:
        assert compare_values(1, 2) == -1
        assert compare_values(2.5, 2) == 1
        assert compare_values(Decimal("1.5"), 1.5) == 0

    def test_nan_compares_equal(self) -> None:
        assert compare_values(math.nan, 1) == 0
        assert compare_values(1, math.nan) == 0

    def test_dates_by_instant(self) -> None:
        early = datetime(2024, 1, 1, tzinfo=UTC)
        late = {"seconds": early.timestamp() + 60, "nanoseconds": 0}
        assert compare_values(early, late) == -1
        assert compare_values(date(2024, 1, 2), early) == 1

    @pytest.mark.parametrize(
        ("x", "y"),
        [
            (1, "1"),
            ("a", None),
            (MISSING, 3),
            (True, False),
            ([1], [2]),
            ({"a": 1}, {"a": 2}),
            (datetime(2024, 1, 1), 5),
        ],
    )
    def test_unordered_pairs_compare_equal(self, x: object, y: object) -> None:
        assert compare_values(x, y) == 0
        assert compare_values(y, x) == 0


class TestCompare:
    def test_ascending_and_descending(self) -> None:
        a, b = {"age": 25}, {"age": 40}
        assert compare(a, b, "age") == -1
        assert compare(a, b, "age", SortDirection.DESCENDING) == 1
        assert compare(a, b, "age", "desc") == 1

    def test_missing_field_is_equal(self) -> None:
        assert compare({"age": 1}, {}, "age") == 0

    def test_accessor(self) -> None:
        rank = {"High": 3, "Low": 1}
        assert compare({"p": "High"}, {"p": "Low"}, "p", accessor=lambda r: rank[r["p"]]) == 1


class TestSortRecords:
    def test_returns_new_list(self) -> None:
        records = [{"n": 2}, {"n": 1}]
        result = sort_records(records, "n")
        assert result == [{"n": 1}, {"n": 2}]
        assert records == [{"n": 2}, {"n": 1}]

    def test_names_in_locale_order(self) -> None:
        records = [{"name": "Carol"}, {"name": "bob"}, {"name": "Alice"}]
        assert [r["name"] for r in sort_records(records, "name")] == ["Alice", "bob", "Carol"]

    def test_descending(self) -> None:
        records = [{"name": "Carol"}, {"name": "bob"}, {"name": "Alice"}]
        result = sort_records(records, "name", SortDirection.DESCENDING)
        assert [r["name"] for r in result] == ["Carol", "bob", "Alice"]

    def test_ties_keep_input_order_both_directions(self) -> None:
        records = [{"id": 1, "age": 30}, {"id": 2, "age": 25}, {"id": 3, "age": 30}, {"id": 4, "age": 25}]
        asc = [r["id"] for r in sort_records(records, "age")]
        desc = [r["id"] for r in sort_records(records, "age", "desc")]
        assert asc == [2, 4, 1, 3]
        assert desc == [1, 3, 2, 4]

    def test_unknown_field_keeps_input_order(self) -> None:
        records = [{"id": 3}, {"id": 1}, {"id": 2}]
        assert sort_records(records, "colour") == records

    def test_accessor_is_called_once_per_record(self) -> None:
        calls: list[int] = []

        def read(record: dict) -> int:
            calls.append(record["n"])
            return record["n"]

        sort_records([{"n": 3}, {"n": 1}, {"n": 2}], "n", accessor=read)
        assert sorted(calls) == [1, 2, 3]

    @given(
        st.lists(
            st.tuples(st.integers(min_value=0, max_value=3), st.integers()),
            max_size=30,
        ),
        st.sampled_from(list(SortDirection)),
    )
    def test_stable_for_equal_keys(self, pairs: list[tuple[int, int]], direction: SortDirection) -> None:
        records = [{"key": key, "pos": pos} for pos, (key, _) in enumerate(pairs)]
        result = sort_records(records, "key", direction)
        for key in {r["key"] for r in records}:
            positions = [r["pos"] for r in result if r["key"] == key]
            assert positions == sorted(positions)
        keys = [r["key"] for r in result]
        assert keys == sorted(keys, reverse=direction is SortDirection.DESCENDING)

    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_absent_values_go_last(self, direction: SortDirection) -> None:
        records = [{"id": 1, "age": 30}, {"id": 2}, {"id": 3, "age": 25}, {"id": 4, "age": None}]
        ids = [r["id"] for r in sort_records(records, "age", direction)]
        expected = [3, 1] if direction is SortDirection.ASCENDING else [1, 3]
        assert ids == expected + [2, 4]

    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_nan_goes_last(self, direction: SortDirection) -> None:
        records = [{"n": 3.0}, {"n": math.nan}, {"n": 1.0}]
        result = [r["n"] for r in sort_records(records, "n", direction)]
        numbers = [1.0, 3.0] if direction is SortDirection.ASCENDING else [3.0, 1.0]
        assert result[:2] == numbers
        assert math.isnan(result[2])

    def test_kinds_are_grouped_in_order_of_first_appearance(self) -> None:
        records = [{"v": "b"}, {"v": 2}, {"v": [1]}, {"v": "a"}, {"v": 1}]
        assert [r["v"] for r in sort_records(records, "v")] == ["a", "b", 1, 2, [1]]

    @given(
        st.lists(
            st.one_of(st.none(), st.integers(-50, 50), st.floats(allow_nan=True, allow_infinity=False)),
            max_size=30,
        ),
        st.sampled_from(list(SortDirection)),
    )
    def test_adjacent_records_are_in_order(self, values: list, direction: SortDirection) -> None:
        records = [{"v": v} if v is not None else {} for v in values]
        result = sort_records(records, "v", direction)
        for a, b in zip(result, result[1:]):
            assert compare(a, b, "v", direction) <= 0
