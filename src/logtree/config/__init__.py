"""Config – environment settings and validation errors."""

from logtree.config.settings import (
    EnvSettingsLoader,
    LoggingSettings,
    Settings,
    SettingsLoader,
)
from logtree.config.validation import (
    ConfigError,
    ConflictingConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConflictingConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
