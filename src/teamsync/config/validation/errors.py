"""Settings errors raised while loading :class:`~teamsync.config.settings.EngineSettings`."""
from __future__ import annotations

from teamsync.kernel.errors import TeamSyncError


class ConfigError(TeamSyncError):
    """Settings could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable {env_key} is required", setting=env_key)
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting is present but outside what the engine accepts."""
    default_code = "invalid_setting_value"

    def __init__(self, setting: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting}={value!r} rejected: {reason}",
            setting=setting,
            value=value,
            reason=reason,
        )
        self.setting = setting
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
