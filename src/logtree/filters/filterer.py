"""Filters – Filterer, the ordered filter chain shared by loggers and destinations."""
from __future__ import annotations

from collections.abc import Callable

from logtree.filters.filter import FilterResult, PredicateFilter, SupportsFilter, as_filter
from logtree.records import Record

FilterLike = SupportsFilter | Callable[[Record], FilterResult]


class Filterer:
    """Base class for anything that carries a filter chain."""

    def __init__(self) -> None:
        self.filters: list[SupportsFilter] = []

    def _index_of(self, candidate: FilterLike) -> int:
        for i, existing in enumerate(self.filters):
            if existing is candidate:
                return i
            if isinstance(existing, PredicateFilter) and existing.predicate is candidate:
                return i
        return -1

    def add_filter(self, candidate: FilterLike) -> None:
        """Append *candidate* unless the same object is already attached."""
        if self._index_of(candidate) == -1:
            self.filters.append(as_filter(candidate))

    def remove_filter(self, candidate: FilterLike) -> None:
        i = self._index_of(candidate)
        if i != -1:
            del self.filters[i]

    def apply_filters(self, record: Record) -> Record | None:
        """Run the chain; return the (possibly replaced) record, or ``None`` to drop it."""
        for f in self.filters:
            result = f.filter(record)
            if not result:
                return None
            if isinstance(result, Record):
                record = result
        return record


__all__ = ["FilterLike", "Filterer"]
