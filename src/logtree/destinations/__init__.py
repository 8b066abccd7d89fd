"""Destinations – the sink contract, name directory and minimal concrete sinks."""
from logtree.destinations.base import Destination
from logtree.destinations.directory import DestinationDirectory
from logtree.destinations.stream import (
    FileDestination,
    NullDestination,
    StderrDestination,
    StreamDestination,
)
from logtree.destinations.structlog_bridge import StructlogDestination

__all__ = [
    "Destination",
    "DestinationDirectory",
    "FileDestination",
    "NullDestination",
    "StderrDestination",
    "StreamDestination",
    "StructlogDestination",
]
