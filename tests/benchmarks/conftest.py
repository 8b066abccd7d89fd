"""conftest.py for benchmarks.

Every benchmark gets a quiet, isolated context: no last resort and no
``no_handlers_found`` diagnostic, so unrouted records cost nothing extra.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from logtree.config.settings import LoggingSettings
from logtree.context import LoggingContext, set_default_context


@pytest.fixture
def bench_ctx() -> Iterator[LoggingContext]:
    ctx = LoggingContext(
        LoggingSettings(root_level="DEBUG", last_resort=False, warn_no_handlers=False)
    )
    previous = set_default_context(ctx)
    yield ctx
    ctx.shutdown()
    set_default_context(previous)
