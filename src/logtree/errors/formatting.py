"""Formatter construction errors."""

from __future__ import annotations

from typing import Any

from logtree.errors.base import LogtreeError


class InvalidFormatError(LogtreeError, ValueError):
    """Unknown formatting style, or a format string that does not fit its style."""

    default_code = "invalid_format"

    def __init__(self, message: str, *, fmt: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.fmt = fmt


__all__ = ["InvalidFormatError"]
