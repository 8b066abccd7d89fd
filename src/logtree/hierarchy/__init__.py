"""Hierarchy – loggers, the root logger, placeholders and the manager."""
from logtree.hierarchy.logger import Logger, RootLogger
from logtree.hierarchy.manager import (
    LOGGER_CAPABILITIES,
    Manager,
    Placeholder,
    conforms_to_logger,
)

__all__ = [
    "LOGGER_CAPABILITIES",
    "Logger",
    "Manager",
    "Placeholder",
    "RootLogger",
    "conforms_to_logger",
]
