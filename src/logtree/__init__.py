"""
logtree – hierarchical, level-filtered event logging.

Loggers are named by dotted scopes (``"orders.api"``) and form a tree under a
single root. A record logged on one logger is handed to its destinations and
to those of every ancestor until a logger with ``propagate=False`` is reached.

Import path convention::

    import logtree

    log = logtree.get_logger(__name__)
    logtree.configure_root(level=logtree.INFO)
    log.info("started %s", "worker")

The functions below operate on the process-wide
:class:`~logtree.context.LoggingContext`; build your own context for isolated
hierarchies.
"""
from __future__ import annotations

from typing import Any

from logtree.bootstrap import RootConfig, basic_config, configure_root
from logtree.config import (
    ConfigError,
    ConflictingConfigError,
    InvalidSettingValueError,
    LoggingSettings,
    MissingRequiredSettingError,
)
from logtree.context import LoggingContext, get_default_context, set_default_context
from logtree.destinations import (
    Destination,
    FileDestination,
    NullDestination,
    StderrDestination,
    StreamDestination,
    StructlogDestination,
)
from logtree.errors import (
    AttributeCollisionError,
    InvalidFormatError,
    InvalidLevelTypeError,
    LevelError,
    LogtreeError,
    TypeConstraintError,
    UnknownLevelError,
)
from logtree.filters import Filter, Filterer, PredicateFilter, RedactingFilter, SamplingFilter
from logtree.formatting import BASIC_FORMAT, Formatter
from logtree.hierarchy import Logger, Manager, Placeholder, RootLogger
from logtree.levels import CRITICAL, DEBUG, ERROR, FATAL, INFO, NOTSET, WARN, WARNING, LevelRegistry
from logtree.records import Record, RecordFactory

__version__ = "0.1.0"


# ---------------------------------------------------------------------------
# Levels
# ---------------------------------------------------------------------------


def name_of(level: int) -> str:
    return get_default_context().registry.name_of(level)


def number_of(name: str) -> int | str:
    return get_default_context().registry.number_of(name)


def get_level_name(level: int | str) -> str | int:
    return get_default_context().registry.get_level_name(level)


def register_level(level: int, name: str) -> None:
    get_default_context().registry.register(level, name)


add_level_name = register_level


def validate_level(level: int | str) -> int:
    return get_default_context().registry.validate(level)


check_level = validate_level


def get_level_names_mapping() -> dict[str, int]:
    return get_default_context().registry.names_mapping()


# ---------------------------------------------------------------------------
# Loggers
# ---------------------------------------------------------------------------


def get_logger(scope: str | None = None) -> Logger:
    """Return the logger for *scope*; the root logger when *scope* is empty."""
    return get_default_context().get_logger(scope)


def get_root_logger() -> RootLogger:
    return get_default_context().root


def set_logger_class(logger_class: type[Logger]) -> None:
    get_default_context().manager.set_logger_factory(logger_class)


def set_record_factory(factory: RecordFactory) -> None:
    get_default_context().manager.set_record_factory(factory)


def get_record_factory() -> RecordFactory:
    return get_default_context().manager.record_factory


def disable(level: int | str = CRITICAL) -> None:
    """Suppress every record at or below *level* on every logger."""
    get_default_context().manager.set_disable_threshold(level)


# ---------------------------------------------------------------------------
# Destinations and lifecycle
# ---------------------------------------------------------------------------


def get_destination_by_name(name: str) -> Destination | None:
    return get_default_context().destinations.get(name)


def get_destination_names() -> frozenset[str]:
    return get_default_context().destinations.names()


def shutdown() -> None:
    get_default_context().shutdown()


def __getattr__(name: str) -> Any:
    # ``logtree.root`` / ``logtree.last_resort`` always reflect the current default context.
    if name == "root":
        return get_default_context().root
    if name == "last_resort":
        return get_default_context().last_resort
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "AttributeCollisionError",
    "BASIC_FORMAT",
    "CRITICAL",
    "ConfigError",
    "ConflictingConfigError",
    "DEBUG",
    "Destination",
    "ERROR",
    "FATAL",
    "FileDestination",
    "Filter",
    "Filterer",
    "Formatter",
    "INFO",
    "InvalidFormatError",
    "InvalidLevelTypeError",
    "InvalidSettingValueError",
    "LevelError",
    "LevelRegistry",
    "Logger",
    "LoggingContext",
    "LoggingSettings",
    "LogtreeError",
    "Manager",
    "MissingRequiredSettingError",
    "NOTSET",
    "NullDestination",
    "Placeholder",
    "PredicateFilter",
    "Record",
    "RecordFactory",
    "RedactingFilter",
    "RootConfig",
    "RootLogger",
    "SamplingFilter",
    "StderrDestination",
    "StreamDestination",
    "StructlogDestination",
    "TypeConstraintError",
    "UnknownLevelError",
    "WARN",
    "WARNING",
    "__version__",
    "add_level_name",
    "basic_config",
    "check_level",
    "configure_root",
    "disable",
    "get_default_context",
    "get_destination_by_name",
    "get_destination_names",
    "get_level_name",
    "get_level_names_mapping",
    "get_logger",
    "get_record_factory",
    "get_root_logger",
    "name_of",
    "number_of",
    "register_level",
    "set_default_context",
    "set_logger_class",
    "set_record_factory",
    "shutdown",
    "validate_level",
]
