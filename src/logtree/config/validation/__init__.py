"""Config validation – error types."""
from logtree.config.validation.errors import (
    ConfigError,
    ConflictingConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConflictingConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
