"""Config settings – 12-factor env-based configuration."""
from logtree.config.settings.base import Settings
from logtree.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from logtree.config.settings.logging_settings import LoggingSettings, coerce_level

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
    "coerce_level",
]
