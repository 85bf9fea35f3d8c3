"""Unit tests for the free-text field matcher."""

from __future__ import annotations

import dataclasses
from datetime import datetime

from teamsync.query.matcher import SearchSpecification, matches


@dataclasses.dataclass
class _Project:
    name: str
    description: str | None = None


class TestMatches:
    def test_empty_term_matches_everything(self) -> None:
        assert matches({}, "")
        assert matches({"name": "Alice"}, "")

    def test_case_insensitive_substring(self) -> None:
        assert matches({"name": "bob"}, "BO")
        assert matches({"name": "Bobby"}, "obb")

    def test_no_match(self) -> None:
        assert not matches({"name": "Alice"}, "bo")

    def test_any_string_field_matches(self) -> None:
        assert matches({"name": "Alice", "role": "employee"}, "ploy")

    def test_non_string_values_are_skipped(self) -> None:
        record = {"age": 25, "active": True, "tags": ["bo"], "joined": datetime(2025, 1, 1)}
        assert not matches(record, "25")
        assert not matches(record, "true")
        assert not matches(record, "bo")
        assert not matches(record, "2025")

    def test_unicode_casefold(self) -> None:
        assert matches({"name": "Straße"}, "STRASSE")

    def test_restricted_fields(self) -> None:
        record = {"name": "Alice", "role": "employee"}
        assert not matches(record, "employee", fields=("name",))
        assert matches(record, "ali", fields=("name",))

    def test_dotted_fields(self) -> None:
        record = {"action": "x", "details": {"message": "Deadline moved"}}
        assert matches(record, "deadline", fields=("action", "details.message"))

    def test_missing_field_does_not_match(self) -> None:
        assert not matches({"name": "Alice"}, "a", fields=("description",))

    def test_dataclass_record(self) -> None:
        assert matches(_Project("Website", "Marketing relaunch"), "relaunch")
        assert not matches(_Project("Website"), "relaunch")


class TestSearchSpecification:
    def test_delegates_to_matches(self) -> None:
        spec = SearchSpecification("bo")
        assert spec.is_satisfied_by({"name": "bob"})
        assert not spec({"name": "Alice"})

    def test_fields_are_tupled(self) -> None:
        assert SearchSpecification("x", ["name"]).fields == ("name",)
        assert SearchSpecification("x").fields is None
