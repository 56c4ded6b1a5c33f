"""Config – 12-factor settings and loaders."""

from kvlog.config.settings import EnvSettingsLoader, LoggingSettings, Settings, SettingsFactory, SettingsLoader
from kvlog.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
