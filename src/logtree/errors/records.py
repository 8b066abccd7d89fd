"""Record construction errors."""

from __future__ import annotations

from typing import Any

from logtree.errors.base import LogtreeError


class AttributeCollisionError(LogtreeError, KeyError):
    """An ``extra`` key would overwrite a reserved record attribute."""

    default_code = "attribute_collision"

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(f"Attempt to overwrite {key!r} in Record", **kwargs)
        self.key = key

    # KeyError quotes its argument; keep the JSON rendering of the base class.
    __str__ = LogtreeError.__str__


__all__ = ["AttributeCollisionError"]
