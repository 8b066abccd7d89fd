"""Destinations – StructlogDestination.

Forwards records to a structlog logger, so applications that already render
through structlog processors get logtree records in the same stream.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from logtree.destinations.base import Destination
from logtree.levels import CRITICAL, ERROR, INFO, NOTSET, WARNING
from logtree.records import Record

if TYPE_CHECKING:
    from logtree.context import LoggingContext

# structlog only knows the canonical levels; custom ones map to the nearest below.
_METHOD_BY_FLOOR: tuple[tuple[int, str], ...] = (
    (CRITICAL, "critical"),
    (ERROR, "error"),
    (WARNING, "warning"),
    (INFO, "info"),
)

# Keyword names a structlog logging method binds itself.
_EVENT_ARGUMENTS = frozenset({"event"})
EXTRA_PREFIX = "extra_"


def method_for_level(level: int) -> str:
    for floor, method in _METHOD_BY_FLOOR:
        if level >= floor:
            return method
    return "debug"


class StructlogDestination(Destination):
    """Emit each record as a structlog event.

    The event name is the interpolated message; ``scope``, ``level_name``
    and every ``extra`` key are passed as event keys. An ``extra`` key that
    would clash with one of those (``event`` for instance) is passed as
    ``extra_<key>``.

    Usage::

        import structlog
        from logtree import get_logger
        from logtree.destinations import StructlogDestination

        get_logger("orders").add_destination(
            StructlogDestination(structlog.get_logger("orders"))
        )
    """

    def __init__(
        self,
        logger: Any = None,
        level: int | str = NOTSET,
        *,
        name: str | None = None,
        context: LoggingContext | None = None,
    ) -> None:
        super().__init__(level, name=name, context=context)
        self._logger = logger

    @property
    def logger(self) -> Any:
        # Resolved per call so structlog configuration changes are honoured.
        return self._logger if self._logger is not None else structlog.get_logger("logtree")

    def emit(self, record: Record) -> None:
        payload: dict[str, Any] = {
            "scope": record.name,
            "level_name": record.level_name,
        }
        for key, value in record.extra.items():
            while key in _EVENT_ARGUMENTS or key in payload:
                key = f"{EXTRA_PREFIX}{key}"
            payload[key] = value
        if record.exc_info is not None:
            payload["exc_info"] = record.exc_info
        if record.stack_info is not None:
            payload["stack_info"] = record.stack_info
        method = getattr(self.logger, method_for_level(record.level_number))
        method(record.get_message(), **payload)


__all__ = ["EXTRA_PREFIX", "StructlogDestination", "method_for_level"]
