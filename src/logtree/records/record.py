"""Records – the immutable Record snapshot built once per logging call."""
from __future__ import annotations

import dataclasses
import time
from collections.abc import Mapping
from datetime import UTC, datetime
from types import MappingProxyType, TracebackType
from typing import Any

from logtree.errors import AttributeCollisionError

ExcInfo = tuple[type[BaseException], BaseException, TracebackType | None]

# Keys computed by formatters at render time.
RESERVED_ATTRIBUTES: frozenset[str] = frozenset({"message", "asctime"})


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclasses.dataclass(frozen=True, eq=False)
class Record:
    """Everything pertinent to one logged event.

    ``msg`` and ``args`` are combined lazily by :meth:`get_message` using
    ``%``-interpolation. Each ``extra`` key becomes an attribute of the
    record; keys that would shadow an existing attribute (or one of
    ``message``/``asctime``) raise :class:`AttributeCollisionError`.
    """

    scope: str
    level_number: int
    level_name: str
    msg: Any
    args: tuple[Any, ...] = ()
    created: int = dataclasses.field(default_factory=_now_ms)
    exc_info: ExcInfo | None = None
    stack_info: str | None = None
    extra: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        extra = MappingProxyType(dict(self.extra))
        object.__setattr__(self, "extra", extra)
        for key, value in extra.items():
            if key in RESERVED_ATTRIBUTES or hasattr(self, key):
                raise AttributeCollisionError(key)
            object.__setattr__(self, key, value)

    @property
    def name(self) -> str:
        return self.scope or "root"

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.created / 1000, tz=UTC)

    def get_message(self) -> str:
        """Return ``str(msg) % args``, or ``str(msg)`` when there are no args.

        A single non-empty mapping argument is used for ``%(key)s`` lookups.
        """
        msg = str(self.msg)
        if self.args:
            args: Any = self.args
            if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
                args = args[0]
            msg = msg % args
        return msg

    def as_dict(self) -> dict[str, Any]:
        """Flat view of the record for formatters (extras included)."""
        payload: dict[str, Any] = {
            "name": self.name,
            "scope": self.scope,
            "levelno": self.level_number,
            "levelname": self.level_name,
            "level_number": self.level_number,
            "level_name": self.level_name,
            "msg": self.msg,
            "args": self.args,
            "created": self.created,
            "msecs": self.created % 1000,
            "exc_info": self.exc_info,
            "stack_info": self.stack_info,
        }
        payload.update(self.extra)
        return payload


__all__ = ["ExcInfo", "RESERVED_ATTRIBUTES", "Record"]
