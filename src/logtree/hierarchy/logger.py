"""Hierarchy – Logger and RootLogger.

A logger is one node of the dotted-scope tree owned by a
:class:`~logtree.hierarchy.manager.Manager`. It resolves its effective level
by walking its ancestors, and dispatches each record to its own destinations
and then to those of every ancestor until a node with ``propagate=False`` has
been processed.
"""
from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from logtree.filters import Filterer
from logtree.levels import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from logtree.observability import get_diagnostics_logger
from logtree.records import (
    Record,
    capture_stack,
    default_record_factory,
    resolve_exc_info,
)

if TYPE_CHECKING:
    from logtree.context import LoggingContext
    from logtree.destinations import Destination
    from logtree.hierarchy.manager import Manager


class Logger(Filterer):
    """A named logging channel.

    Loggers are normally obtained through
    :meth:`~logtree.hierarchy.manager.Manager.get_logger`; constructing one
    directly yields a detached node with no parent and no manager.
    """

    def __init__(self, scope: str, level: int | str = NOTSET) -> None:
        super().__init__()
        self.scope = scope
        self.parent: Logger | None = None
        self.manager: Manager | None = None
        self.propagate = True
        self.disabled = False
        self.destinations: list[Destination] = []
        self._cache: dict[int, bool] = {}
        self._lock = threading.RLock()
        # Numeric levels skip the registry: the root is built while its context is.
        self.level = level if isinstance(level, int) else self.context.registry.validate(level)

    @property
    def name(self) -> str:
        return self.scope or "root"

    @property
    def context(self) -> LoggingContext:
        if self.manager is not None:
            return self.manager.context
        from logtree.context import get_default_context

        return get_default_context()

    # ------------------------------------------------------------------
    # Levels
    # ------------------------------------------------------------------

    def set_level(self, level: int | str) -> None:
        """Set the explicit level and invalidate enablement caches tree-wide."""
        with self._lock:
            self.level = self.context.registry.validate(level)
        if self.manager is not None:
            self.manager.clear_level_caches()
        else:
            self.clear_cache()

    def get_effective_level(self) -> int:
        """Return the first non-NOTSET level found walking self → root, else NOTSET."""
        logger: Logger | None = self
        while logger is not None:
            if logger.level:
                return logger.level
            logger = logger.parent
        return NOTSET

    def is_enabled_for(self, level: int) -> bool:
        if self.disabled:
            return False
        try:
            return self._cache[level]
        except KeyError:
            pass
        manager = self.manager
        # Filled under the lock that clear_level_caches() holds, so a level
        # change cannot slip in between computing a result and storing it.
        with manager.lock if manager is not None else self._lock:
            try:
                return self._cache[level]
            except KeyError:
                pass
            if manager is not None and manager.disable >= level:
                enabled = False
            else:
                enabled = level >= self.get_effective_level()
            self._cache[level] = enabled
        return enabled

    def clear_cache(self) -> None:
        self._cache.clear()

    # ------------------------------------------------------------------
    # Logging calls
    # ------------------------------------------------------------------

    def debug(self, msg: Any, *args: Any, **options: Any) -> None:
        if self.is_enabled_for(DEBUG):
            self._log(DEBUG, msg, args, **options)

    def info(self, msg: Any, *args: Any, **options: Any) -> None:
        if self.is_enabled_for(INFO):
            self._log(INFO, msg, args, **options)

    def warning(self, msg: Any, *args: Any, **options: Any) -> None:
        if self.is_enabled_for(WARNING):
            self._log(WARNING, msg, args, **options)

    # common alias
    warn = warning

    def error(self, msg: Any, *args: Any, **options: Any) -> None:
        if self.is_enabled_for(ERROR):
            self._log(ERROR, msg, args, **options)

    def exception(self, msg: Any, *args: Any, exc_info: Any = True, **options: Any) -> None:
        """Log at ERROR with the exception currently being handled attached."""
        self.error(msg, *args, exc_info=exc_info, **options)

    def critical(self, msg: Any, *args: Any, **options: Any) -> None:
        if self.is_enabled_for(CRITICAL):
            self._log(CRITICAL, msg, args, **options)

    fatal = critical

    def log(self, level: int | str, msg: Any, *args: Any, **options: Any) -> None:
        """Log ``msg % args`` at *level* (a number or a registered name)."""
        level = self.context.registry.validate(level)
        if self.is_enabled_for(level):
            self._log(level, msg, args, **options)

    def _log(
        self,
        level: int,
        msg: Any,
        args: tuple[Any, ...],
        *,
        exc_info: Any = None,
        extra: Mapping[str, Any] | None = None,
        stack_info: bool = False,
    ) -> None:
        record = self.make_record(
            level,
            msg,
            args,
            exc_info=resolve_exc_info(exc_info),
            extra=extra,
            stack_info=capture_stack(skip=2) if stack_info else None,
        )
        self.handle(record)

    def make_record(
        self,
        level: int,
        msg: Any,
        args: tuple[Any, ...] = (),
        **options: Any,
    ) -> Record:
        """Build a record through the manager's record factory."""
        factory = self.manager.record_factory if self.manager is not None else default_record_factory
        return factory(
            self.scope,
            level,
            self.context.registry.name_of(level),
            msg,
            args,
            **options,
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def handle(self, record: Record) -> None:
        """Apply this logger's filters, then dispatch the surviving record."""
        if self.disabled:
            return
        rv = self.apply_filters(record)
        if rv is None:
            return
        self.dispatch(rv)

    def dispatch(self, record: Record) -> int:
        """Hand *record* to every eligible destination from self up to the root.

        Each destination met on the walk counts as found, whether or not its
        threshold let the record through. The walk ends after the first node
        with ``propagate=False``. Returns the number of destinations found.
        """
        found = 0
        logger: Logger | None = self
        while logger is not None:
            for destination in list(logger.destinations):
                found += 1
                if record.level_number >= destination.level:
                    destination.handle(record)
            logger = logger.parent if logger.propagate else None
        if not found:
            self._handle_unrouted(record)
        return found

    def _handle_unrouted(self, record: Record) -> None:
        context = self.context
        last_resort = context.last_resort
        if last_resort is not None and record.level_number >= last_resort.level:
            last_resort.handle(record)
            return
        manager = self.manager
        if context.warn_no_handlers and manager is not None and not manager.emitted_no_handler_warning:
            manager.emitted_no_handler_warning = True
            get_diagnostics_logger(__name__).warning("no_handlers_found", scope=self.name)

    # ------------------------------------------------------------------
    # Destinations and children
    # ------------------------------------------------------------------

    def add_destination(self, destination: Destination) -> None:
        with self._lock:
            if not any(d is destination for d in self.destinations):
                self.destinations.append(destination)

    def remove_destination(self, destination: Destination) -> None:
        with self._lock:
            for i, d in enumerate(self.destinations):
                if d is destination:
                    del self.destinations[i]
                    break

    def has_destinations(self) -> bool:
        """True if any destination would be met by :meth:`dispatch`."""
        logger: Logger | None = self
        while logger is not None:
            if logger.destinations:
                return True
            logger = logger.parent if logger.propagate else None
        return False

    def get_child(self, suffix: str) -> Logger:
        """``get_logger("a.b").get_child("c")`` is ``get_logger("a.b.c")``."""
        if self.manager is None:
            raise ValueError(f"Logger {self.name!r} is not attached to a manager")
        scope = f"{self.scope}.{suffix}" if self.scope else suffix
        return self.manager.get_logger(scope)

    def __repr__(self) -> str:
        level = self.context.registry.name_of(self.get_effective_level())
        return f"<{type(self).__name__} {self.name} ({level})>"


class RootLogger(Logger):
    """The single top node of a hierarchy: empty scope, no parent, WARNING by default."""

    def __init__(self, level: int | str = WARNING) -> None:
        super().__init__("", level)

    @property  # type: ignore[override]
    def parent(self) -> None:
        return None

    @parent.setter
    def parent(self, value: Logger | None) -> None:
        if value is not None:
            raise ValueError("The root logger cannot have a parent")


__all__ = ["Logger", "RootLogger"]
