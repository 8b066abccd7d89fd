"""Testing support – in-memory destinations.

Fixtures live in :mod:`logtree.testing.fixtures` (requires pytest)::

    pytest_plugins = ["logtree.testing.fixtures"]
"""
from logtree.testing.fakes import FailingDestination, RecordingDestination

__all__ = ["FailingDestination", "RecordingDestination"]
