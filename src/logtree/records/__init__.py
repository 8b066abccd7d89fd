"""Records – immutable log records and the pluggable factory."""
from logtree.records.factory import (
    RecordFactory,
    capture_stack,
    default_record_factory,
    resolve_exc_info,
)
from logtree.records.record import RESERVED_ATTRIBUTES, ExcInfo, Record

__all__ = [
    "ExcInfo",
    "RESERVED_ATTRIBUTES",
    "Record",
    "RecordFactory",
    "capture_stack",
    "default_record_factory",
    "resolve_exc_info",
]
