"""Config – 12-factor settings and their validation errors."""

from teamsync.config.settings import (
    DotenvSettingsLoader,
    EngineSettings,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    load_settings,
)
from teamsync.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EngineSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
