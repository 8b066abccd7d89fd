"""Formatting – record-to-text rendering."""
from logtree.formatting.formatter import Formatter
from logtree.formatting.styles import BASIC_FORMAT, STYLES

__all__ = ["BASIC_FORMAT", "Formatter", "STYLES"]
