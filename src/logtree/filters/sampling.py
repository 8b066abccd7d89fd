"""Filters – SamplingFilter.

Passes only 1-in-N records per level name, for high-frequency events.
"""
from __future__ import annotations

import threading
from collections import defaultdict

from logtree.records import Record


class SamplingFilter:
    """Keep 1-in-N records per level name.

    Parameters
    ----------
    sample_rates:
        A mapping of level name → keep-1-in-N.
        Example: ``{"DEBUG": 100, "INFO": 10}`` keeps 1 % of DEBUG records
        and 10 % of INFO records.
    default_rate:
        Fallback rate for levels not listed in *sample_rates*.
        ``1`` means always keep (default).

    The first record of every level is always kept.
    """

    def __init__(
        self,
        sample_rates: dict[str, int] | None = None,
        default_rate: int = 1,
    ) -> None:
        self._rates: dict[str, int] = {k.upper(): v for k, v in (sample_rates or {}).items()}
        self._default_rate = max(1, default_rate)
        self._counters: dict[str, int] = defaultdict(int)
        self._lock = threading.Lock()

    def filter(self, record: Record) -> bool:
        level = record.level_name.upper()
        rate = self._rates.get(level, self._default_rate)
        if rate <= 1:
            return True
        with self._lock:
            self._counters[level] += 1
            return self._counters[level] % rate == 1

    def reset_counters(self) -> None:
        """Reset sampling counters (useful in tests)."""
        with self._lock:
            self._counters.clear()


__all__ = ["SamplingFilter"]
