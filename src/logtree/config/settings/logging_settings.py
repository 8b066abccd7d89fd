"""Config settings – LoggingSettings.

Environment-driven defaults for a :class:`~logtree.context.LoggingContext`::

    LOGTREE_ROOT_LEVEL=INFO
    LOGTREE_DISABLE=NOTSET
    LOGTREE_RAISE_EXCEPTIONS=false
    LOGTREE_WARN_NO_HANDLERS=true
    LOGTREE_LAST_RESORT=true
    LOGTREE_LAST_RESORT_LEVEL=WARNING
"""
from __future__ import annotations

import dataclasses

from logtree.config.settings.base import Settings
from logtree.config.validation import InvalidSettingValueError
from logtree.levels import CANONICAL_LEVELS

_CANONICAL_NAMES = frozenset(CANONICAL_LEVELS.values())


def coerce_level(value: str | int) -> str | int:
    """Turn ``"25"`` into ``25``; leave names (and ints) as they are."""
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    if isinstance(value, str):
        return value.strip().upper()
    return value


@dataclasses.dataclass
class LoggingSettings(Settings):
    _prefix: dataclasses.ClassVar[str] = "LOGTREE"

    root_level: str = "WARNING"
    disable: str = "NOTSET"
    raise_exceptions: bool = False
    warn_no_handlers: bool = True
    last_resort: bool = True
    last_resort_level: str = "WARNING"

    def _validate(self) -> None:
        # Only canonical names exist before any custom level is registered.
        for field in ("root_level", "disable", "last_resort_level"):
            value = coerce_level(getattr(self, field))
            if isinstance(value, int):
                if value < 0:
                    raise InvalidSettingValueError(field, value, "levels are non-negative")
            elif value not in _CANONICAL_NAMES:
                raise InvalidSettingValueError(
                    field, value, f"expected one of {sorted(_CANONICAL_NAMES)} or an integer"
                )


__all__ = ["LoggingSettings", "coerce_level"]
