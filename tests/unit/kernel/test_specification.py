"""Unit tests for the specification base and conjunction."""

from __future__ import annotations

import pytest

from teamsync.kernel.specification import AllOf, BaseSpecification
from teamsync.query.filters import CategorySpecification
from teamsync.query.matcher import SearchSpecification


class _IsAdmin(BaseSpecification[dict]):
    def is_satisfied_by(self, candidate: dict) -> bool:
        return candidate.get("role") == "admin"


class _IsAdult(BaseSpecification[dict]):
    def is_satisfied_by(self, candidate: dict) -> bool:
        return candidate.get("age", 0) >= 18


class TestConjunction:
    def test_and(self) -> None:
        spec = _IsAdmin() & _IsAdult()
        assert isinstance(spec, AllOf)
        assert spec({"role": "admin", "age": 30})
        assert not spec({"role": "admin", "age": 10})

    def test_nested_conjunctions_are_flattened(self) -> None:
        spec = (_IsAdmin() & _IsAdult()) & _IsAdult()
        assert len(spec.specs) == 3

    def test_empty_all_of_accepts_everything(self) -> None:
        assert AllOf([]).is_satisfied_by({})

    def test_screen_predicate_combines_with_engine_specs(self) -> None:
        spec = SearchSpecification("ada") & CategorySpecification("role", frozenset({"admin"})) & _IsAdult()
        assert spec({"name": "Ada", "role": "admin", "age": 36})
        assert not spec({"name": "Ada", "role": "admin", "age": 12})
        assert not spec({"name": "Ada", "role": "employee", "age": 36})


class TestBaseSpecification:
    def test_cannot_instantiate_without_predicate(self) -> None:
        with pytest.raises(TypeError):
            BaseSpecification()  # type: ignore[abstract]
