"""Domain errors – caller contract violations of the query and activity models."""

from __future__ import annotations

from typing import Any

from teamsync.kernel.errors.base import TeamSyncError


class DomainError(TeamSyncError):
    """A value handed to the engine breaks one of its contracts."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def log_fields(self) -> dict[str, Any]:
        fields = super().log_fields()
        if self.errors:
            fields["errors"] = self.errors
        return fields


class InvalidQueryStateError(ValidationError):
    """A ``QueryState`` field was given a value outside its domain."""

    default_code = "invalid_query_state"

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid query state field '{field}': {reason}",
            errors=[{"field": field, "value": repr(value), "reason": reason}],
            field=field,
        )
        self.field = field
        self.value = value


class UnknownActivityActionError(DomainError):
    """Strict parsing met an action that is not a known action type."""

    default_code = "unknown_activity_action"

    def __init__(self, action: str) -> None:
        super().__init__(f"Unknown activity action '{action}'", action=action)
        self.action = action


__all__ = [
    "DomainError",
    "InvalidQueryStateError",
    "UnknownActivityActionError",
    "ValidationError",
]
