"""Directory traversal that yields each logical manual page once."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator

from manhunt.models import FileCandidate
from manhunt.utils.files import page_identity

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class WalkStats:
    roots_walked: int = 0
    roots_missing: int = 0
    files_found: int = 0
    duplicates: int = 0
    emitted: int = 0
    errors: int = 0


class DeduplicatingWalker:
    """Walks root directories and emits the first file seen for each page identity.

    Traversal is depth-first with directory entries in name order, so which of
    two identically named pages survives depends only on root order and path.
    The seen set belongs to this instance and is only touched by the thread
    calling ``walk``.
    """

    def __init__(self) -> None:
        self.seen: set[str] = set()
        self.stats = WalkStats()

    def walk(self, roots: Iterable[Path], emit: Callable[[FileCandidate], None]) -> None:
        """Walk every root in order, calling ``emit`` for each unseen page.

        ``emit`` may block; the walk simply waits for it.
        """
        for candidate in self.iter_candidates(roots):
            emit(candidate)

    def iter_candidates(self, roots: Iterable[Path]) -> Iterator[FileCandidate]:
        """Lazily yield the first candidate for each page identity, in walk order."""
        for root in roots:
            root = Path(root)
            if not root.is_dir():
                self.stats.roots_missing += 1
                LOGGER.info("Skipping missing root directory: %s", root)
                continue

            LOGGER.debug("Walking %s", root)
            self.stats.roots_walked += 1
            for path in self._iter_regular_files(root):
                self.stats.files_found += 1
                identity = page_identity(path)
                if identity in self.seen:
                    self.stats.duplicates += 1
                    LOGGER.debug("Skipping duplicate page %s (%s)", path, identity)
                    continue
                self.seen.add(identity)
                self.stats.emitted += 1
                yield FileCandidate(path=path, identity=identity)

    def _scan_sorted(self, directory: Path) -> Iterator[os.DirEntry[str]]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            self.stats.errors += 1
            LOGGER.debug("Cannot read directory %s: %s", directory, exc)
            return iter(())
        return iter(entries)

    def _iter_regular_files(self, root: Path) -> Iterator[Path]:
        # One entry iterator per open directory, so nesting depth is unbounded.
        stack = [self._scan_sorted(root)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError as exc:
                self.stats.errors += 1
                LOGGER.debug("Cannot stat %s: %s", entry.path, exc)
                continue

            if is_dir:
                stack.append(self._scan_sorted(Path(entry.path)))
            elif is_file:
                yield Path(entry.path)
