"""Filters – scope filters, predicate adapter, filter chain and ready-made filters."""
from logtree.filters.filter import (
    Filter,
    FilterResult,
    PredicateFilter,
    SupportsFilter,
    as_filter,
)
from logtree.filters.filterer import FilterLike, Filterer
from logtree.filters.redact import DEFAULT_SENSITIVE_FIELDS, RedactingFilter
from logtree.filters.sampling import SamplingFilter

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "Filter",
    "FilterLike",
    "FilterResult",
    "Filterer",
    "PredicateFilter",
    "RedactingFilter",
    "SamplingFilter",
    "SupportsFilter",
    "as_filter",
]
