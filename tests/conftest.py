"""Shared fixtures for the logtree test-suite."""
from __future__ import annotations

import pytest

from logtree.config.settings import LoggingSettings
from logtree.context import LoggingContext
from logtree.testing import RecordingDestination

pytest_plugins = ["logtree.testing.fixtures"]


@pytest.fixture
def ctx(isolated_context: LoggingContext) -> LoggingContext:
    """Shorthand for ``isolated_context``."""
    return isolated_context


@pytest.fixture
def debug_ctx(isolated_context: LoggingContext) -> LoggingContext:
    """Isolated context whose root logger lets everything through."""
    isolated_context.root.set_level("DEBUG")
    return isolated_context


@pytest.fixture
def make_recorder(isolated_context: LoggingContext):
    """Factory fixture: ``make_recorder(level=NOTSET)`` → RecordingDestination."""

    def _make(level: int | str = 0) -> RecordingDestination:
        return RecordingDestination(level, context=isolated_context)

    return _make


@pytest.fixture
def quiet_settings() -> LoggingSettings:
    """Settings without a last-resort destination."""
    return LoggingSettings(last_resort=False)
