"""Levels – reserved severity values.

These can be extended with any non-negative values registered through
:meth:`~logtree.levels.registry.LevelRegistry.register`. ``NOTSET`` is only a
lower limit: loggers created with it inherit their ancestors' level, and
destinations created with it handle every record.
"""
from __future__ import annotations

#: Serious error; the program itself may be unable to continue.
CRITICAL = 50
FATAL = CRITICAL

#: A more serious problem; some function could not be performed.
ERROR = 40

#: Something unexpected happened, or a problem is near (e.g. "disk space low").
WARNING = 30
WARN = WARNING

#: Confirmation that things are working as expected.
INFO = 20

#: Detailed information, typically of interest only when diagnosing problems.
DEBUG = 10

#: Consult ancestors for the effective level; log everything if none is set.
NOTSET = 0

# Only the canonical names are registered; FATAL and WARN stay constants.
CANONICAL_LEVELS: dict[int, str] = {
    CRITICAL: "CRITICAL",
    ERROR: "ERROR",
    WARNING: "WARNING",
    INFO: "INFO",
    DEBUG: "DEBUG",
    NOTSET: "NOTSET",
}


__all__ = [
    "CANONICAL_LEVELS",
    "CRITICAL",
    "DEBUG",
    "ERROR",
    "FATAL",
    "INFO",
    "NOTSET",
    "WARN",
    "WARNING",
]
