"""Config settings – 12-factor env-based configuration."""
from teamsync.config.settings.base import Settings
from teamsync.config.settings.engine import EngineSettings, load_settings
from teamsync.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EngineSettings",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
