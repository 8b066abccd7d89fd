"""Records – RecordFactory port and the default factory."""
from __future__ import annotations

import sys
import traceback
from collections.abc import Mapping
from typing import Any, Protocol

from logtree.records.record import ExcInfo, Record


class RecordFactory(Protocol):
    """Callable that builds a :class:`Record` for one logging call."""

    def __call__(
        self,
        scope: str,
        level: int,
        level_name: str,
        msg: Any,
        args: tuple[Any, ...],
        *,
        exc_info: ExcInfo | None = None,
        extra: Mapping[str, Any] | None = None,
        stack_info: str | None = None,
    ) -> Record: ...


def default_record_factory(
    scope: str,
    level: int,
    level_name: str,
    msg: Any,
    args: tuple[Any, ...],
    *,
    exc_info: ExcInfo | None = None,
    extra: Mapping[str, Any] | None = None,
    stack_info: str | None = None,
) -> Record:
    return Record(
        scope=scope,
        level_number=level,
        level_name=level_name,
        msg=msg,
        args=args,
        exc_info=exc_info,
        stack_info=stack_info,
        extra=extra or {},
    )


def resolve_exc_info(exc_info: Any) -> ExcInfo | None:
    """Normalise the ``exc_info`` logging option.

    Accepts ``None``/``False``, ``True`` (use the exception being handled),
    an exception instance, or a ready ``(type, value, traceback)`` tuple.
    """
    if not exc_info:
        return None
    if isinstance(exc_info, BaseException):
        return (type(exc_info), exc_info, exc_info.__traceback__)
    if isinstance(exc_info, tuple):
        return exc_info  # type: ignore[return-value]
    current = sys.exc_info()
    if current[0] is None:
        return None
    return current  # type: ignore[return-value]


def capture_stack(skip: int = 1) -> str:
    """Render the caller's stack, dropping the innermost *skip* frames."""
    frames = traceback.format_stack()[: -(skip + 1)]
    return "Stack (most recent call last):\n" + "".join(frames).rstrip("\n")


__all__ = ["RecordFactory", "capture_stack", "default_record_factory", "resolve_exc_info"]
