"""Formatting – Formatter.

Converts a :class:`~logtree.records.Record` to text. Useful fields, beyond any
``extra`` keys::

    name / scope        Logger scope ("root" for the root logger)
    levelno / levelname Numeric and textual level
    created             Milliseconds since the epoch
    msecs               Millisecond portion of ``created``
    asctime             Textual creation time
    message             The result of ``record.get_message()``
"""
from __future__ import annotations

import io
import time
import traceback
from typing import Any

from logtree.errors import InvalidFormatError
from logtree.formatting.styles import STYLES
from logtree.records import ExcInfo, Record


class Formatter:
    default_time_format = "%Y-%m-%d %H:%M:%S"
    default_msec_format = "%s,%03d"
    converter = staticmethod(time.localtime)

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        validate: bool = True,
        *,
        defaults: dict[str, Any] | None = None,
    ) -> None:
        if style not in STYLES:
            raise InvalidFormatError(f"Style must be one of: {', '.join(STYLES)}")
        self._style = STYLES[style][0](fmt, defaults=defaults)
        if validate:
            self._style.validate()
        self.fmt = self._style.fmt
        self.datefmt = datefmt

    def uses_time(self) -> bool:
        return self._style.uses_time()

    def format_time(self, record: Record, datefmt: str | None = None) -> str:
        ct = self.converter(record.created / 1000)
        if datefmt:
            return time.strftime(datefmt, ct)
        s = time.strftime(self.default_time_format, ct)
        return self.default_msec_format % (s, record.created % 1000)

    def format_exception(self, exc_info: ExcInfo) -> str:
        sio = io.StringIO()
        traceback.print_exception(exc_info[0], exc_info[1], exc_info[2], file=sio)
        return sio.getvalue().rstrip("\n")

    def format_stack(self, stack_info: str) -> str:
        return stack_info

    def format(self, record: Record) -> str:
        values = record.as_dict()
        values["message"] = record.get_message()
        if self.uses_time():
            values["asctime"] = self.format_time(record, self.datefmt)
        s = self._style.format(values)
        if record.exc_info:
            s = f"{s}\n{self.format_exception(record.exc_info)}"
        if record.stack_info:
            s = f"{s}\n{self.format_stack(record.stack_info)}"
        return s


__all__ = ["Formatter"]
