"""Config settings – EngineSettings for the query engine and activity formatter."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from teamsync.config.settings.base import Settings
from teamsync.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from teamsync.config.validation import ConfigError, InvalidSettingValueError
from teamsync.observability import get_logger

_log = get_logger(__name__)

_DIRECTIONS = frozenset({"asc", "ascending", "desc", "descending"})


@dataclasses.dataclass
class EngineSettings(Settings):
    """Process-wide defaults, read from ``TEAMSYNC_*`` variables."""

    _prefix: ClassVar[str] = "TEAMSYNC"

    log_level: str = "INFO"
    log_json: bool = False
    case_sensitive_sort: bool = False
    id_preview_length: int = 6
    default_sort_direction: str = "asc"

    def _validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        if self.id_preview_length < 1:
            raise InvalidSettingValueError("id_preview_length", self.id_preview_length, "must be >= 1")
        if self.default_sort_direction.lower() not in _DIRECTIONS:
            raise InvalidSettingValueError(
                "default_sort_direction", self.default_sort_direction, "must be 'asc' or 'desc'"
            )


def load_settings(env_file: str | None = None) -> EngineSettings:
    """Load :class:`EngineSettings` from the environment (and *env_file*, if given)."""
    loader: SettingsLoader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
    try:
        return loader.load(EngineSettings)
    except ConfigError as exc:
        _log.error("settings.load_failed", env_file=env_file, **exc.log_fields())
        raise


__all__ = ["EngineSettings", "load_settings"]
