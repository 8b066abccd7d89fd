"""Testing fixtures – pytest fixtures for isolated hierarchies.

Enable in your ``conftest.py``::

    pytest_plugins = ["logtree.testing.fixtures"]
"""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from logtree.config.settings import LoggingSettings
from logtree.context import LoggingContext, set_default_context
from logtree.testing.fakes import RecordingDestination


@pytest.fixture
def isolated_context() -> Iterator[LoggingContext]:
    """A fresh context installed as the default for the duration of the test."""
    ctx = LoggingContext(LoggingSettings())
    previous = set_default_context(ctx)
    try:
        yield ctx
    finally:
        ctx.shutdown()
        set_default_context(previous)


@pytest.fixture
def recording_destination(isolated_context: LoggingContext) -> RecordingDestination:
    """A :class:`RecordingDestination` bound to ``isolated_context``."""
    return RecordingDestination(context=isolated_context)


__all__ = ["isolated_context", "recording_destination"]
