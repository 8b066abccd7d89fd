"""Logger hierarchy errors."""

from __future__ import annotations

from typing import Any

from logtree.errors.base import LogtreeError


class TypeConstraintError(LogtreeError, TypeError):
    """A pluggable logger class or record factory lacks the required capability."""

    default_code = "type_constraint"

    def __init__(self, message: str, *, candidate: object = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.candidate = candidate


__all__ = ["TypeConstraintError"]
