"""Observability – structlog logger for logtree's own diagnostics.

logtree never routes its own warnings through the hierarchy it manages;
they go to structlog so they show up even when nothing is configured.
"""
from __future__ import annotations

from typing import Any

import structlog


def get_diagnostics_logger(name: str = "logtree", **initial_values: Any) -> Any:
    """Return a structlog logger for internal diagnostics.

    Call it at the point of use rather than caching the result at import
    time; a bound logger freezes the structlog configuration it was created
    under.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_diagnostics_logger"]
