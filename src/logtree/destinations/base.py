"""Destinations – the Destination base class (a.k.a. handler).

A destination has its own threshold, filter chain and optional formatter.
Concrete sinks override :meth:`Destination.emit`; everything else (filtering,
locking, error routing, name registration) lives here.
"""
from __future__ import annotations

import sys
import threading
from typing import TYPE_CHECKING

from logtree.filters import Filterer
from logtree.levels import NOTSET
from logtree.records import Record

if TYPE_CHECKING:
    from logtree.context import LoggingContext
    from logtree.formatting import Formatter


class Destination(Filterer):
    """Base destination; acts as the contract concrete sinks implement.

    Parameters
    ----------
    level:
        Records below this threshold are not handed to the destination.
        Accepts a number or a registered level name.
    name:
        Optional name under which the destination can be looked up with
        :meth:`~logtree.destinations.directory.DestinationDirectory.get`.
    context:
        The :class:`~logtree.context.LoggingContext` this destination belongs
        to. Defaults to the process-wide context.
    """

    def __init__(
        self,
        level: int | str = NOTSET,
        *,
        name: str | None = None,
        context: LoggingContext | None = None,
    ) -> None:
        super().__init__()
        self._context = context
        self._name: str | None = None
        self.formatter: Formatter | None = None
        self._closed = False
        self.lock = threading.RLock()
        self.level = self.context.registry.validate(level)
        self.context.destinations.track(self)
        if name is not None:
            self.name = name

    @property
    def context(self) -> LoggingContext:
        if self._context is None:
            from logtree.context import get_default_context

            self._context = get_default_context()
        return self._context

    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, name: str | None) -> None:
        self.context.destinations.rename(self, self._name, name)
        self._name = name

    @property
    def closed(self) -> bool:
        return self._closed

    def set_level(self, level: int | str) -> None:
        self.level = self.context.registry.validate(level)

    def set_formatter(self, formatter: Formatter | None) -> None:
        self.formatter = formatter

    def format(self, record: Record) -> str:
        """Render *record* with this destination's formatter, or the context default."""
        formatter = self.formatter or self.context.default_formatter
        return formatter.format(record)

    def emit(self, record: Record) -> None:
        """Do whatever it takes to actually deliver *record*."""
        raise NotImplementedError(
            f"emit must be implemented by {type(self).__name__}"
        )

    def handle(self, record: Record) -> Record | None:
        """Filter, then emit *record* under the destination lock.

        Returns the record that was emitted (a filter may have replaced it),
        or ``None`` when the filter chain dropped it. Failures inside
        :meth:`emit` go to :meth:`handle_error` instead of the caller.
        """
        rv = self.apply_filters(record)
        if rv is None:
            return None
        with self.lock:
            try:
                self.emit(rv)
            except (NotImplementedError, RecursionError):
                raise
            except Exception:
                self.handle_error(rv)
        return rv

    def handle_error(self, record: Record) -> None:  # noqa: ARG002
        """Called with the active exception when :meth:`emit` fails.

        Silent unless ``context.raise_exceptions`` is set, in which case the
        exception propagates.
        """
        if self.context.raise_exceptions:
            exc = sys.exc_info()[1]
            if exc is not None:
                raise exc

    def flush(self) -> None:
        """Ensure all output has been delivered; the base version does nothing."""

    def close(self) -> None:
        """Release resources and drop the name registration.

        Subclasses overriding this must call ``super().close()``.
        """
        with self.lock:
            self._closed = True
            self.context.destinations.forget(self)

    def __repr__(self) -> str:
        level = self.context.registry.name_of(self.level)
        return f"<{type(self).__name__} ({level})>"


__all__ = ["Destination"]
