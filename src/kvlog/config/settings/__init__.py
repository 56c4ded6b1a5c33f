"""Config settings – 12-factor env-based configuration."""
from kvlog.config.settings.base import Settings
from kvlog.config.settings.factory import SettingsFactory
from kvlog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from kvlog.config.settings.logging_settings import LoggingSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggingSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
