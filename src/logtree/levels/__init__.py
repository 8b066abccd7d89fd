"""Levels – severity constants and the name ↔ number registry."""
from logtree.levels.constants import (
    CANONICAL_LEVELS,
    CRITICAL,
    DEBUG,
    ERROR,
    FATAL,
    INFO,
    NOTSET,
    WARN,
    WARNING,
)
from logtree.levels.registry import LevelRegistry

__all__ = [
    "CANONICAL_LEVELS",
    "CRITICAL",
    "DEBUG",
    "ERROR",
    "FATAL",
    "INFO",
    "LevelRegistry",
    "NOTSET",
    "WARN",
    "WARNING",
]
