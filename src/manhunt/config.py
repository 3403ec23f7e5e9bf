"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from manhunt.pipeline.workers import default_worker_count

DEFAULT_MANPATH: tuple[Path, ...] = (
    Path("/usr/local/share/man"),
    Path("/usr/local/man"),
    Path("/usr/share/man"),
    Path("/usr/X11R6/man"),
    Path("/opt/man"),
)


def roots_from_environ(environ: Mapping[str, str] | None = None) -> tuple[Path, ...]:
    """Read roots from ``MANPATH``, falling back to the standard locations."""
    env = os.environ if environ is None else environ
    manpath = env.get("MANPATH", "")
    roots = tuple(Path(part) for part in manpath.split(os.pathsep) if part)
    return roots or DEFAULT_MANPATH


@dataclass(slots=True)
class AppConfig:
    roots: Sequence[Path] | None = None
    workers: int | None = None
    queue_size: int | None = None

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.queue_size is not None and self.queue_size < 1:
            raise ValueError("queue_size must be at least 1")
        if self.roots is not None:
            self.roots = tuple(Path(root) for root in self.roots)

    def resolve_roots(self, environ: Mapping[str, str] | None = None) -> tuple[Path, ...]:
        if self.roots:
            return tuple(self.roots)
        return roots_from_environ(environ)

    def resolve_workers(self) -> int:
        return self.workers if self.workers is not None else default_worker_count()

    def resolve_queue_size(self) -> int:
        if self.queue_size is not None:
            return self.queue_size
        return 2 * self.resolve_workers()
