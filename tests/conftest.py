"""Shared fixtures for building small manual page trees."""

from __future__ import annotations

import gzip
import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest


@pytest.fixture
def write_page() -> Callable[..., Path]:
    """Return a helper that writes a (optionally gzipped) page under a directory."""

    def _write(directory: Path, name: str, text: str, *, compress: bool | None = None) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        data = text.encode("utf-8")
        if compress is None:
            compress = name.endswith(".gz")
        path.write_bytes(gzip.compress(data) if compress else data)
        return path

    return _write


@pytest.fixture
def deep_tree(tmp_path: Path) -> Iterator[Path]:
    """Build a directory chain deeper than the default recursion limit.

    Yields the innermost directory. The chain is created and removed one
    level at a time, since recursive helpers such as ``shutil.rmtree`` may
    not cope with it.
    """
    levels = sys.getrecursionlimit() + 100
    chain = [tmp_path / "deep"]
    chain[0].mkdir()
    for _ in range(levels):
        chain.append(chain[-1] / "d")
        chain[-1].mkdir()
    yield chain[-1]
    for directory in reversed(chain):
        for child in directory.iterdir():
            if not child.is_dir():
                child.unlink()
        directory.rmdir()
