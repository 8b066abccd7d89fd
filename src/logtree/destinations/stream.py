"""Destinations – minimal text sinks: stream, file, stderr and null."""
from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, TextIO

from logtree.destinations.base import Destination
from logtree.levels import NOTSET
from logtree.records import Record

if TYPE_CHECKING:
    from logtree.context import LoggingContext


class StreamDestination(Destination):
    """Write formatted records to a text stream (``sys.stderr`` by default).

    The stream is never closed by this class, since it may be a standard
    stream owned by the process.
    """

    terminator = "\n"

    def __init__(
        self,
        stream: TextIO | None = None,
        level: int | str = NOTSET,
        *,
        name: str | None = None,
        context: LoggingContext | None = None,
    ) -> None:
        super().__init__(level, name=name, context=context)
        self._stream = stream if stream is not None else sys.stderr

    @property
    def stream(self) -> TextIO | None:
        return self._stream

    def set_stream(self, stream: TextIO) -> TextIO | None:
        """Swap the target stream; returns the previous one (or ``None`` if unchanged)."""
        if stream is self._stream:
            return None
        with self.lock:
            old = self._stream
            self.flush()
            self._stream = stream
        return old

    def flush(self) -> None:
        with self.lock:
            stream = self.stream
            if stream is not None and hasattr(stream, "flush"):
                stream.flush()

    def emit(self, record: Record) -> None:
        msg = self.format(record)
        stream = self.stream
        if stream is None:
            return
        stream.write(msg + self.terminator)
        self.flush()


class FileDestination(StreamDestination):
    """Append formatted records to a file, opened lazily when *delay* is set."""

    def __init__(
        self,
        filename: str | os.PathLike[str],
        mode: str = "a",
        encoding: str | None = None,
        errors: str | None = None,
        delay: bool = False,
        level: int | str = NOTSET,
        *,
        name: str | None = None,
        context: LoggingContext | None = None,
    ) -> None:
        self.base_filename = os.path.abspath(os.fspath(filename))
        self.mode = mode
        self.encoding = encoding
        self.errors = errors
        # Skip StreamDestination.__init__: a missing stream must not default to stderr.
        Destination.__init__(self, level, name=name, context=context)
        self._stream = None if delay else self._open()

    def _open(self) -> TextIO:
        return open(  # noqa: SIM115
            self.base_filename, self.mode, encoding=self.encoding, errors=self.errors
        )

    def emit(self, record: Record) -> None:
        if self._stream is None:
            # Reopening in "w" mode after close() would truncate the file.
            if self.mode == "w" and self.closed:
                return
            self._stream = self._open()
        super().emit(record)

    def close(self) -> None:
        with self.lock:
            try:
                stream = self._stream
                self._stream = None
                if stream is not None:
                    try:
                        stream.flush()
                    finally:
                        stream.close()
            finally:
                super().close()


class StderrDestination(StreamDestination):
    """Like :class:`StreamDestination`, but always writes to the *current* ``sys.stderr``.

    Used as the context's last-resort destination.
    """

    def __init__(
        self,
        level: int | str = NOTSET,
        *,
        name: str | None = None,
        context: LoggingContext | None = None,
    ) -> None:
        super().__init__(sys.stderr, level, name=name, context=context)

    @property
    def stream(self) -> TextIO:
        return sys.stderr


class NullDestination(Destination):
    """Accept records and do nothing; keeps libraries quiet without configuration."""

    def handle(self, record: Record) -> Record | None:  # noqa: ARG002
        return None

    def emit(self, record: Record) -> None:
        pass


__all__ = ["FileDestination", "NullDestination", "StderrDestination", "StreamDestination"]
