"""LoggingContext – the process-scoped state of one logger hierarchy.

Everything that would otherwise be a module-level singleton lives here: the
level registry, the manager (and so the root logger), the last-resort
destination, the destination directory, the default formatter and the
raise/warn policy flags. The module-level API in :mod:`logtree` works on a
lazily created default context; tests build their own isolated ones::

    ctx = LoggingContext(LoggingSettings(root_level="DEBUG"))
    ctx.get_logger("orders.api").info("ready")
"""
from __future__ import annotations

import threading

from logtree.config.settings import EnvSettingsLoader, LoggingSettings, coerce_level
from logtree.destinations import Destination, DestinationDirectory, StderrDestination
from logtree.formatting import Formatter
from logtree.hierarchy import Logger, Manager, RootLogger
from logtree.levels import WARNING, LevelRegistry


class LoggingContext:
    """One registry, one logger tree and the policies applied to them."""

    def __init__(self, settings: LoggingSettings | None = None) -> None:
        self.settings = settings or LoggingSettings()
        self.registry = LevelRegistry()
        self.destinations = DestinationDirectory()
        self.default_formatter = Formatter()
        self.raise_exceptions = self.settings.raise_exceptions
        self.warn_no_handlers = self.settings.warn_no_handlers
        self.manager = Manager(RootLogger(WARNING), context=self)
        self.manager.root.set_level(coerce_level(self.settings.root_level))
        self.manager.disable = coerce_level(self.settings.disable)
        self.last_resort: Destination | None = None
        if self.settings.last_resort:
            self.last_resort = StderrDestination(
                coerce_level(self.settings.last_resort_level), context=self
            )

    @classmethod
    def from_settings(cls, settings: LoggingSettings) -> LoggingContext:
        return cls(settings)

    @classmethod
    def from_env(cls, loader: EnvSettingsLoader | None = None) -> LoggingContext:
        """Build a context from ``LOGTREE_*`` environment variables."""
        return cls((loader or EnvSettingsLoader()).load(LoggingSettings))

    @property
    def root(self) -> RootLogger:
        return self.manager.root

    def get_logger(self, scope: str | None = None) -> Logger:
        return self.manager.get_logger(scope)

    def shutdown(self) -> None:
        """Flush and close every live destination, newest first."""
        self.destinations.close_all(raise_errors=self.raise_exceptions)


_default_context: LoggingContext | None = None
_default_lock = threading.Lock()


def get_default_context() -> LoggingContext:
    """Return the process-wide context, creating it from the environment on first use."""
    global _default_context
    if _default_context is None:
        with _default_lock:
            if _default_context is None:
                _default_context = LoggingContext.from_env()
    return _default_context


def set_default_context(context: LoggingContext | None) -> LoggingContext | None:
    """Install *context* as the process-wide context; returns the previous one.

    Passing ``None`` makes the next :func:`get_default_context` call build a
    fresh context.
    """
    global _default_context
    with _default_lock:
        previous, _default_context = _default_context, context
    return previous


__all__ = ["LoggingContext", "get_default_context", "set_default_context"]
