"""Observability – diagnostics for logtree itself."""
from logtree.observability.diagnostics import get_diagnostics_logger

__all__ = ["get_diagnostics_logger"]
