"""Exceptions raised by manhunt components."""

from __future__ import annotations

from pathlib import Path


class ManhuntError(Exception):
    """Base class for manhunt errors."""


class SkippableError(ManhuntError):
    """A per-file failure; the file is treated as having no match."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class OpenError(SkippableError):
    """The file could not be opened."""


class DecodeInitError(SkippableError):
    """The compressed stream header could not be read."""


class ReadError(SkippableError):
    """Reading failed part way through the stream."""


class MalformedNameError(ManhuntError):
    """A page name does not have both a command and a section segment."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Malformed page name: {name!r}")
        self.name = name


class ChannelClosed(ManhuntError):
    """Raised on put to a closed channel, or get from a closed, drained one."""
