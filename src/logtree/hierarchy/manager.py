"""Hierarchy – Manager and Placeholder.

The manager owns one logger tree. Loggers are keyed by their dotted scope;
an ancestor scope that has no logger yet is held by a :class:`Placeholder`
listing the descendants waiting on it. When that ancestor is finally
created, the placeholder's loggers are re-linked to it.
"""
from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from logtree.errors import TypeConstraintError
from logtree.hierarchy.logger import Logger, RootLogger
from logtree.levels import NOTSET
from logtree.records import RecordFactory, default_record_factory

if TYPE_CHECKING:
    from logtree.context import LoggingContext

# What a pluggable logger class has to provide.
LOGGER_CAPABILITIES: tuple[str, ...] = (
    "set_level",
    "get_effective_level",
    "is_enabled_for",
    "clear_cache",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "log",
    "make_record",
    "handle",
    "dispatch",
    "add_destination",
    "remove_destination",
    "add_filter",
    "remove_filter",
    "apply_filters",
)


def conforms_to_logger(candidate: object) -> bool:
    """Structural check: is *candidate* a class exposing every logger capability?"""
    if not isinstance(candidate, type):
        return False
    return all(callable(getattr(candidate, attr, None)) for attr in LOGGER_CAPABILITIES)


class Placeholder:
    """Stands in for a scope whose logger does not exist yet."""

    def __init__(self, logger: Logger) -> None:
        # dict keeps insertion order and gives O(1) membership
        self.loggers: dict[Logger, None] = {logger: None}

    def append(self, logger: Logger) -> None:
        self.loggers.setdefault(logger, None)


class Manager:
    """Holds the logger hierarchy of one :class:`~logtree.context.LoggingContext`."""

    def __init__(self, root: RootLogger, *, context: LoggingContext | None = None) -> None:
        self.root = root
        self._context = context
        self._disable = NOTSET
        self.emitted_no_handler_warning = False
        self.logger_dict: dict[str, Logger | Placeholder] = {}
        self.logger_class: type[Logger] | None = None
        self.record_factory: RecordFactory = default_record_factory
        self.lock = threading.RLock()
        root.manager = self

    @property
    def context(self) -> LoggingContext:
        if self._context is None:
            from logtree.context import get_default_context

            self._context = get_default_context()
        return self._context

    # ------------------------------------------------------------------
    # Global disable threshold
    # ------------------------------------------------------------------

    @property
    def disable(self) -> int:
        return self._disable

    @disable.setter
    def disable(self, level: int | str) -> None:
        self._disable = self.context.registry.validate(level)
        self.clear_level_caches()

    def set_disable_threshold(self, level: int | str) -> None:
        """Suppress every record at or below *level*, regardless of logger levels."""
        self.disable = level

    def clear_level_caches(self) -> None:
        """Drop every cached enablement result in the tree."""
        with self.lock:
            for logger in self.logger_dict.values():
                if not isinstance(logger, Placeholder):
                    logger.clear_cache()
            self.root.clear_cache()

    # ------------------------------------------------------------------
    # Pluggable classes
    # ------------------------------------------------------------------

    def set_logger_factory(self, logger_class: type[Logger]) -> None:
        """Use *logger_class* for loggers created from now on."""
        if not conforms_to_logger(logger_class):
            raise TypeConstraintError(
                f"Logger class does not provide the logger capabilities: {logger_class!r}",
                candidate=logger_class,
            )
        self.logger_class = logger_class

    def set_record_factory(self, factory: RecordFactory) -> None:
        if not callable(factory):
            raise TypeConstraintError(
                f"Record factory is not callable: {factory!r}", candidate=factory
            )
        self.record_factory = factory

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    def get_logger(self, scope: str | None = None) -> Logger:
        """Return the logger for *scope*, creating it (and placeholders) if needed.

        ``None`` and ``""`` return the root. Repeated calls with the same scope
        return the same instance.
        """
        if scope is None or scope == "":
            return self.root
        if not isinstance(scope, str):
            raise TypeError("A logger scope must be a string")
        with self.lock:
            existing = self.logger_dict.get(scope)
            if existing is None:
                rv = self._new_logger(scope)
                self.logger_dict[scope] = rv
                self._fixup_parents(rv)
            elif isinstance(existing, Placeholder):
                rv = self._new_logger(scope)
                self.logger_dict[scope] = rv
                self._fixup_children(existing, rv)
                self._fixup_parents(rv)
                if rv.level != NOTSET:
                    self.clear_level_caches()
            else:
                rv = existing
        return rv

    def loggers(self) -> list[Logger]:
        """Snapshot of every concrete (non-placeholder) logger, root excluded."""
        with self.lock:
            return [lg for lg in self.logger_dict.values() if not isinstance(lg, Placeholder)]

    def _new_logger(self, scope: str) -> Logger:
        rv = (self.logger_class or Logger)(scope)
        rv.manager = self
        return rv

    def _fixup_parents(self, logger: Logger) -> None:
        """Point *logger* at its nearest existing ancestor, reserving the scopes in between."""
        scope = logger.scope
        parent: Logger | None = None
        i = scope.rfind(".")
        while i > 0 and parent is None:
            prefix = scope[:i]
            obj = self.logger_dict.get(prefix)
            if obj is None:
                self.logger_dict[prefix] = Placeholder(logger)
            elif isinstance(obj, Placeholder):
                obj.append(logger)
            else:
                parent = obj
            i = scope.rfind(".", 0, i - 1)
        logger.parent = parent if parent is not None else self.root

    def _fixup_children(self, placeholder: Placeholder, logger: Logger) -> None:
        """Splice *logger* between the placeholder's loggers and their old parents."""
        prefix = logger.scope + "."
        for child in placeholder.loggers:
            old_parent = child.parent
            if old_parent is not None and not old_parent.scope.startswith(prefix):
                logger.parent = old_parent
                child.parent = logger


__all__ = ["LOGGER_CAPABILITIES", "Manager", "Placeholder", "conforms_to_logger"]
