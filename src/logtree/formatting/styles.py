"""Formatting – interpolation styles (``%``, ``{`` and ``$``)."""
from __future__ import annotations

import re
from string import Formatter as _StrFormatter
from string import Template
from typing import Any

from logtree.errors import InvalidFormatError


class PercentStyle:
    default_format = "%(message)s"
    asctime_format = "%(asctime)s"
    asctime_search = "%(asctime)"
    validation_pattern = re.compile(r"%\(\w+\)[#0+ -]*(\*|\d+)?(\.(\*|\d+))?[diouxefgcrsa%]", re.I)

    def __init__(self, fmt: str | None = None, *, defaults: dict[str, Any] | None = None) -> None:
        self.fmt = fmt or self.default_format
        self.defaults = defaults or {}

    def uses_time(self) -> bool:
        return self.asctime_search in self.fmt

    def validate(self) -> None:
        if not self.validation_pattern.search(self.fmt):
            raise InvalidFormatError(
                f"Invalid format {self.fmt!r} for {self.default_format[0]!r} style",
                fmt=self.fmt,
            )

    def _format(self, values: dict[str, Any]) -> str:
        return self.fmt % values

    def format(self, values: dict[str, Any]) -> str:
        try:
            return self._format({**self.defaults, **values})
        except KeyError as exc:
            raise InvalidFormatError(f"Formatting field not found in record: {exc}", fmt=self.fmt) from exc


class BraceStyle(PercentStyle):
    default_format = "{message}"
    asctime_format = "{asctime}"
    asctime_search = "{asctime"

    def validate(self) -> None:
        try:
            fields = [f for _, f, _, _ in _StrFormatter().parse(self.fmt) if f]
        except ValueError as exc:
            raise InvalidFormatError(f"Invalid format {self.fmt!r}: {exc}", fmt=self.fmt) from exc
        if not fields:
            raise InvalidFormatError(f"Invalid format {self.fmt!r} for '{{' style", fmt=self.fmt)

    def _format(self, values: dict[str, Any]) -> str:
        return self.fmt.format(**values)


class DollarStyle(PercentStyle):
    default_format = "${message}"
    asctime_format = "${asctime}"
    asctime_search = "${asctime}"

    def __init__(self, fmt: str | None = None, *, defaults: dict[str, Any] | None = None) -> None:
        super().__init__(fmt, defaults=defaults)
        self._template = Template(self.fmt)

    def uses_time(self) -> bool:
        return "$asctime" in self.fmt or self.asctime_search in self.fmt

    def validate(self) -> None:
        if not self._template.get_identifiers():
            raise InvalidFormatError(f"Invalid format {self.fmt!r} for '$' style", fmt=self.fmt)

    def _format(self, values: dict[str, Any]) -> str:
        return self._template.substitute(values)


BASIC_FORMAT = "%(levelname)s:%(name)s:%(message)s"

STYLES: dict[str, tuple[type[PercentStyle], str]] = {
    "%": (PercentStyle, BASIC_FORMAT),
    "{": (BraceStyle, "{levelname}:{name}:{message}"),
    "$": (DollarStyle, "${levelname}:${name}:${message}"),
}


__all__ = ["BASIC_FORMAT", "BraceStyle", "DollarStyle", "PercentStyle", "STYLES"]
