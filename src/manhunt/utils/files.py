"""Utility helpers for working with manual page file names."""

from __future__ import annotations

from pathlib import Path

from manhunt.errors import MalformedNameError
from manhunt.models import ParsedMatch

COMPRESSED_SUFFIX = ".gz"


def is_compressed(path: Path) -> bool:
    """Return True when the file name marks a gzip-compressed page."""
    return path.suffix == COMPRESSED_SUFFIX


def page_identity(path: Path) -> str:
    """Logical page name: the base name with the compression suffix removed.

    ``ls.1`` and ``ls.1.gz`` share the identity ``ls.1``.
    """
    name = path.name
    if is_compressed(path):
        return name[: -len(COMPRESSED_SUFFIX)]
    return name


def parse_page_name(identity: str) -> ParsedMatch:
    """Split a page identity into command and section.

    Raises MalformedNameError unless the first two dot-separated segments
    are both present and non-empty.
    """
    parts = identity.split(".")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise MalformedNameError(identity)
    return ParsedMatch(command=parts[0], section=parts[1])
