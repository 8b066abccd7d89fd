"""Destinations – DestinationDirectory.

Name → destination lookup plus a weak-reference list of every live
destination, so :meth:`DestinationDirectory.close_all` can flush and close
them in reverse creation order without anyone having to keep them alive.
"""
from __future__ import annotations

import threading
import weakref
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logtree.destinations.base import Destination


class DestinationDirectory:
    def __init__(self) -> None:
        self._by_name: dict[str, Destination] = {}
        self._refs: list[weakref.ref[Destination]] = []
        self._lock = threading.RLock()

    def track(self, destination: Destination) -> None:
        with self._lock:
            self._refs.append(weakref.ref(destination, self._drop_ref))

    def _drop_ref(self, ref: weakref.ref[Destination]) -> None:
        with self._lock:
            try:
                self._refs.remove(ref)
            except ValueError:
                pass

    def rename(self, destination: Destination, old: str | None, new: str | None) -> None:
        with self._lock:
            if old is not None and self._by_name.get(old) is destination:
                del self._by_name[old]
            if new is not None:
                self._by_name[new] = destination

    def forget(self, destination: Destination) -> None:
        """Remove *destination*'s name binding (if it still owns it)."""
        with self._lock:
            name = destination.name
            if name is not None and self._by_name.get(name) is destination:
                del self._by_name[name]

    def get(self, name: str) -> Destination | None:
        return self._by_name.get(name)

    def names(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._by_name)

    def live(self) -> list[Destination]:
        """Live destinations, most recently created first."""
        with self._lock:
            refs = list(reversed(self._refs))
        return [d for d in (ref() for ref in refs) if d is not None]

    def close_all(self, *, raise_errors: bool = False) -> None:
        """Flush and close every live destination.

        ``OSError``/``ValueError`` (typically an already-closed stream) are
        ignored unless *raise_errors* is set.
        """
        for destination in self.live():
            try:
                with destination.lock:
                    destination.flush()
                    destination.close()
            except (OSError, ValueError):
                if raise_errors:
                    raise


__all__ = ["DestinationDirectory"]
