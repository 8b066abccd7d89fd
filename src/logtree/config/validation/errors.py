"""Config validation errors."""
from logtree.errors import LogtreeError


class ConfigError(LogtreeError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class ConflictingConfigError(ConfigError, ValueError):
    """Mutually exclusive configuration options were combined."""
    default_code = "conflicting_config"

    def __init__(self, options: tuple[str, ...], message: str | None = None) -> None:
        joined = " and ".join(repr(o) for o in options)
        super().__init__(message or f"{joined} should not be specified together")
        self.options = options


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "ConfigError",
    "ConflictingConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
