"""Bootstrap – one-shot configuration of the root logger.

``configure_root`` is a convenience composed from the core primitives: build
one destination (or take the ones given), give it a formatter, attach it to
the root and optionally set the root level.

Usage::

    from logtree import configure_root, INFO

    configure_root(filename="app.log", level=INFO)
    configure_root(stream=sys.stdout, format="%(asctime)s %(levelname)s %(message)s")
"""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Sequence
from typing import Any, TextIO

from logtree.config.settings import Settings
from logtree.config.validation import ConfigError, ConflictingConfigError
from logtree.context import LoggingContext, get_default_context
from logtree.destinations import Destination, FileDestination, StreamDestination
from logtree.errors import InvalidFormatError
from logtree.formatting import STYLES, Formatter
from logtree.hierarchy import RootLogger


@dataclasses.dataclass
class RootConfig(Settings):
    """Options accepted by :func:`configure_root`.

    At most one source of destinations may be given: ``destinations``,
    ``filename`` (with ``filemode``) or ``stream``. Combining them raises
    :class:`ConflictingConfigError` on construction.
    """

    destinations: Sequence[Destination] | None = None
    filename: str | os.PathLike[str] | None = None
    filemode: str = "a"
    stream: TextIO | None = None
    format: str | None = None
    datefmt: str | None = None
    style: str = "%"
    level: int | str | None = None
    force: bool = False
    encoding: str | None = None
    errors: str | None = "backslashreplace"

    def _validate(self) -> None:
        if self.destinations is not None:
            if self.stream is not None or self.filename is not None:
                clashing = "stream" if self.stream is not None else "filename"
                raise ConflictingConfigError((clashing, "destinations"))
        elif self.stream is not None and self.filename is not None:
            raise ConflictingConfigError(("stream", "filename"))
        if self.style not in STYLES:
            raise InvalidFormatError(f"Style must be one of: {', '.join(STYLES)}")


def _build_destination(config: RootConfig, context: LoggingContext) -> Destination:
    if config.filename is not None:
        if "b" in config.filemode:
            encoding, errors = None, None
        else:
            encoding, errors = config.encoding or "utf-8", config.errors
        return FileDestination(
            config.filename,
            config.filemode,
            encoding=encoding,
            errors=errors,
            context=context,
        )
    return StreamDestination(config.stream, context=context)


def configure_root(
    config: RootConfig | None = None,
    /,
    *,
    context: LoggingContext | None = None,
    **options: Any,
) -> RootLogger:
    """Do basic configuration of the root logger.

    Does nothing (beyond ``force``) when the root already has destinations.
    Pass either a :class:`RootConfig` or its fields as keyword options.

    Raises
    ------
    ConflictingConfigError
        Mutually exclusive options were combined.
    ConfigError
        Unknown options, or both a ``RootConfig`` and keyword options.
    UnknownLevelError
        ``level`` names a level that was never registered; the root is
        left exactly as it was.
    """
    if config is None:
        try:
            config = RootConfig(**options)
        except TypeError as exc:
            raise ConfigError(f"Unrecognised argument(s): {', '.join(options)}", cause=exc) from exc
    elif options:
        raise ConfigError("Pass either a RootConfig or keyword options, not both")

    ctx = context or get_default_context()
    root = ctx.root
    # Everything that can fail is resolved before the root is touched.
    formatter = Formatter(config.format or STYLES[config.style][1], config.datefmt, config.style)
    level = None if config.level is None else ctx.registry.validate(config.level)
    with ctx.manager.lock:
        if config.force:
            for destination in list(root.destinations):
                root.remove_destination(destination)
                destination.close()
        if not root.destinations:
            if config.destinations is None:
                destinations = [_build_destination(config, ctx)]
            else:
                destinations = list(config.destinations)
            for destination in destinations:
                if destination.formatter is None:
                    destination.set_formatter(formatter)
                root.add_destination(destination)
            if level is not None:
                root.set_level(level)
    return root


basic_config = configure_root


__all__ = ["RootConfig", "basic_config", "configure_root"]
