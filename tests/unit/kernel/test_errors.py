"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest

from teamsync.kernel.errors import (
    DomainError,
    InvalidQueryStateError,
    TeamSyncError,
    UnknownActivityActionError,
    ValidationError,
)


class TestTeamSyncError:
    def test_default_code(self) -> None:
        assert TeamSyncError("boom").code == "teamsync_error"

    def test_keywords_become_context(self) -> None:
        err = TeamSyncError("boom", code="custom", view="tasks")
        assert err.code == "custom"
        assert err.context == {"view": "tasks"}

    def test_str_carries_code(self) -> None:
        assert str(DomainError("bad")) == "[domain_error] bad"

    def test_repr(self) -> None:
        assert repr(DomainError("bad")) == "DomainError(code='domain_error', message='bad')"

    def test_log_fields(self) -> None:
        err = TeamSyncError("boom", view="tasks", limit=3, values=frozenset({"a"}))
        assert err.log_fields() == {
            "view": "tasks",
            "limit": 3,
            "values": "frozenset({'a'})",
            "error_code": "teamsync_error",
            "error": "boom",
        }

    def test_log_fields_include_chained_cause(self) -> None:
        try:
            try:
                raise KeyError("x")
            except KeyError as exc:
                raise TeamSyncError("wrapped") from exc
        except TeamSyncError as err:
            assert err.log_fields()["cause"] == "KeyError('x')"


class TestValidationError:
    def test_errors_default_empty(self) -> None:
        err = ValidationError("bad")
        assert err.errors == []
        assert "errors" not in err.log_fields()

    def test_errors_are_logged(self) -> None:
        err = ValidationError("bad", errors=[{"field": "x"}])
        assert err.log_fields()["errors"] == [{"field": "x"}]


class TestInvalidQueryStateError:
    def test_is_validation_error(self) -> None:
        err = InvalidQueryStateError("sort_direction", "up", "must be 'asc' or 'desc'")
        assert isinstance(err, ValidationError)
        assert isinstance(err, DomainError)
        assert err.code == "invalid_query_state"
        assert err.field == "sort_direction"
        assert err.value == "up"
        assert err.errors[0]["field"] == "sort_direction"
        assert err.log_fields()["field"] == "sort_direction"

    def test_can_be_caught_as_domain_error(self) -> None:
        with pytest.raises(DomainError):
            raise InvalidQueryStateError("filters", "x", "nope")


class TestUnknownActivityActionError:
    def test_carries_action(self) -> None:
        err = UnknownActivityActionError("launched_rocket")
        assert err.action == "launched_rocket"
        assert err.code == "unknown_activity_action"
        assert "launched_rocket" in err.message
        assert err.log_fields()["action"] == "launched_rocket"
