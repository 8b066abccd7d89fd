"""Levels – LevelRegistry.

A bidirectional mapping between numeric severities and their display names.
Both directions are updated on :meth:`LevelRegistry.register` with
last-write-wins semantics; superseded reverse entries are deliberately left in
place, so re-binding ``40`` to ``"BAD"`` keeps ``"ERROR"`` resolving to ``40``.
"""
from __future__ import annotations

import threading

from logtree.errors import InvalidLevelTypeError, UnknownLevelError
from logtree.levels.constants import CANONICAL_LEVELS


class LevelRegistry:
    """Thread-safe level name ↔ number registry.

    Example
    -------
    ::

        registry = LevelRegistry()
        registry.register(25, "NOTICE")
        registry.name_of(25)        # "NOTICE"
        registry.number_of("NOTICE")  # 25
        registry.name_of(26)        # "Level 26"
    """

    def __init__(self) -> None:
        self._level_to_name: dict[int, str] = dict(CANONICAL_LEVELS)
        self._name_to_level: dict[str, int] = {v: k for k, v in CANONICAL_LEVELS.items()}
        self._lock = threading.RLock()

    def name_of(self, level: int) -> str:
        """Return the name bound to *level*, or ``"Level <level>"``."""
        name = self._level_to_name.get(level)
        if name is not None:
            return name
        return f"Level {level}"

    def number_of(self, name: str) -> int | str:
        """Return the number bound to *name*, or ``"Level <name>"``."""
        level = self._name_to_level.get(name)
        if level is not None:
            return level
        return f"Level {name}"

    def get_level_name(self, level: int | str) -> str | int:
        """Polymorphic lookup: number → name, or name → number.

        Unknown values of either kind produce a descriptive ``"Level …"``
        string rather than an error.
        """
        if isinstance(level, int) and level in self._level_to_name:
            return self._level_to_name[level]
        if isinstance(level, str) and level in self._name_to_level:
            return self._name_to_level[level]
        return f"Level {level}"

    def register(self, level: int, name: str) -> None:
        """Bind *name* to *level* in both directions (last write wins)."""
        with self._lock:
            self._level_to_name[level] = name
            self._name_to_level[name] = level

    def validate(self, level: int | str) -> int:
        """Return the numeric value of *level*.

        Raises
        ------
        UnknownLevelError
            *level* is a string that was never registered.
        InvalidLevelTypeError
            *level* is neither an ``int`` nor a ``str``.
        """
        if isinstance(level, int):
            return level
        if isinstance(level, str):
            try:
                return self._name_to_level[level]
            except KeyError:
                raise UnknownLevelError(level) from None
        raise InvalidLevelTypeError(level)

    def names_mapping(self) -> dict[str, int]:
        """Return a copy of the name → number mapping."""
        with self._lock:
            return dict(self._name_to_level)

    def __contains__(self, item: object) -> bool:
        return item in self._level_to_name or item in self._name_to_level


__all__ = ["LevelRegistry"]
