"""Root of the teamsync error hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar


def _loggable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)


class TeamSyncError(Exception):
    """Base for every error the engine raises on purpose.

    ``code`` is a stable slug callers can branch on without matching message
    text.  Keyword arguments become ``context``: the field, setting or action
    the failure is about.  :meth:`log_fields` flattens both into structlog
    keyword arguments::

        except TeamSyncError as exc:
            log.warning("feed.skipped", **exc.log_fields())
    """

    default_code: ClassVar[str] = "teamsync_error"

    def __init__(self, message: str, *, code: str | None = None, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.context: dict[str, Any] = context

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def log_fields(self) -> dict[str, Any]:
        fields = {key: _loggable(value) for key, value in self.context.items()}
        fields["error_code"] = self.code
        fields["error"] = self.message
        if self.__cause__ is not None:
            fields["cause"] = repr(self.__cause__)
        return fields


__all__ = ["TeamSyncError"]
