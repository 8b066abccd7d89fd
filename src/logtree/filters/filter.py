"""Filters – scope-prefix Filter, the SupportsFilter capability and PredicateFilter."""
from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from logtree.records import Record

FilterResult = bool | Record


@runtime_checkable
class SupportsFilter(Protocol):
    """Anything exposing ``filter(record)``.

    A falsy result drops the record; a :class:`Record` result replaces it for
    every subsequent filter and for the caller; any other truthy value keeps
    the original record.
    """

    def filter(self, record: Record) -> FilterResult: ...


class Filter:
    """Allow records from one branch of the logger hierarchy.

    ``Filter("a.b")`` passes records scoped ``"a.b"`` and ``"a.b.c"`` but not
    ``"a.bc"`` or ``"a"``. ``Filter()`` (empty scope) passes everything.
    """

    def __init__(self, scope: str = "") -> None:
        self.scope = scope or ""

    def filter(self, record: Record) -> bool:
        if not self.scope or self.scope == record.scope:
            return True
        return record.scope.startswith(self.scope + ".")

    matches = filter

    def __repr__(self) -> str:
        return f"Filter(scope={self.scope!r})"


class PredicateFilter:
    """Adapt a plain ``record -> bool | Record`` callable to :class:`SupportsFilter`."""

    def __init__(self, predicate: Callable[[Record], FilterResult]) -> None:
        self.predicate = predicate

    def filter(self, record: Record) -> FilterResult:
        return self.predicate(record)

    def __repr__(self) -> str:
        return f"PredicateFilter({self.predicate!r})"


def as_filter(candidate: SupportsFilter | Callable[[Record], FilterResult]) -> SupportsFilter:
    """Return *candidate* unchanged if it has ``filter()``, else wrap it."""
    if isinstance(candidate, SupportsFilter):
        return candidate
    if callable(candidate):
        return PredicateFilter(candidate)
    raise TypeError(f"Not a filter or a predicate: {candidate!r}")


__all__ = ["Filter", "FilterResult", "PredicateFilter", "SupportsFilter", "as_filter"]
