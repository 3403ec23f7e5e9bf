"""Line-oriented access to manual page files.

Pages are stored either as plain files or gzip-compressed with a ``.gz``
suffix. ``open_lines`` hides the difference and yields raw byte lines.
"""

from __future__ import annotations

import gzip
import logging
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from manhunt.errors import DecodeInitError, OpenError, ReadError
from manhunt.utils.files import is_compressed

LOGGER = logging.getLogger(__name__)

_STREAM_ERRORS = (OSError, EOFError, zlib.error)


def iter_lines(path: Path, stream: BinaryIO) -> Iterator[bytes]:
    """Yield lines from ``stream`` in order, wrapping I/O failures in ReadError."""
    while True:
        try:
            line = stream.readline()
        except _STREAM_ERRORS as exc:
            raise ReadError(path, exc) from exc
        if not line:
            return
        yield line


@contextmanager
def open_lines(path: Path) -> Iterator[Iterator[bytes]]:
    """Open a page and yield an iterator over its decoded lines.

    The file handle and any decompression state are released when the
    ``with`` block exits, including when the caller stops iterating early.

    Raises:
        OpenError: the file cannot be opened.
        DecodeInitError: a ``.gz`` file has a missing or corrupt header.
        ReadError: raised lazily by the iterator on a mid-stream failure.
    """
    try:
        raw = open(path, "rb")
    except OSError as exc:
        raise OpenError(path, exc) from exc

    with raw:
        if not is_compressed(path):
            yield iter_lines(path, raw)
            return

        stream = gzip.GzipFile(fileobj=raw, mode="rb")
        try:
            # Reading one byte forces the gzip header to be parsed now.
            stream.peek(1)
        except _STREAM_ERRORS as exc:
            stream.close()
            raise DecodeInitError(path, exc) from exc

        LOGGER.debug("Decompressing %s", path)
        with stream:
            yield iter_lines(path, stream)
