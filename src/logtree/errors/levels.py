"""Level registry errors."""

from __future__ import annotations

from typing import Any

from logtree.errors.base import LogtreeError


class LevelError(LogtreeError):
    """A level could not be resolved."""

    default_code = "level_error"


class UnknownLevelError(LevelError, ValueError):
    """A level name is not present in the registry."""

    default_code = "unknown_level"

    def __init__(self, level: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown level: {level!r}", **kwargs)
        self.level = level

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["level"] = self.level
        return base


class InvalidLevelTypeError(LevelError, TypeError):
    """A level is neither an ``int`` nor a ``str``."""

    default_code = "invalid_level_type"

    def __init__(self, level: object, **kwargs: Any) -> None:
        super().__init__(
            f"Level not an integer or a valid string: {level!r}", **kwargs
        )
        self.level = level


__all__ = ["InvalidLevelTypeError", "LevelError", "UnknownLevelError"]
