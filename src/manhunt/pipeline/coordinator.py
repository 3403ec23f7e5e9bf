"""Wires the walker, search workers and printer into one run."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable

from manhunt.config import AppConfig
from manhunt.models import FileCandidate, MatchResult, SearchStatus
from manhunt.pipeline.channel import Channel
from manhunt.pipeline.printer import ResultPrinter
from manhunt.pipeline.workers import WorkerPool
from manhunt.search.searcher import PageSearcher
from manhunt.search.walker import DeduplicatingWalker, WalkStats

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RunStats:
    walk: WalkStats = field(default_factory=WalkStats)
    outcomes: Counter = field(default_factory=Counter)
    failed: int = 0
    printed: int = 0
    malformed: int = 0

    @property
    def searched(self) -> int:
        return sum(self.outcomes.values()) + self.failed

    @property
    def matches(self) -> int:
        return self.outcomes[SearchStatus.MATCH]

    @property
    def skipped(self) -> int:
        return (
            self.outcomes[SearchStatus.OPEN_ERROR]
            + self.outcomes[SearchStatus.DECODE_ERROR]
            + self.outcomes[SearchStatus.READ_ERROR]
        )


class Pipeline:
    """Coordinates one full search over the configured roots.

    Shutdown order: the path channel is closed once walking ends, the
    workers are joined, and only then is the result channel closed, so no
    worker can ever put to a closed result channel. The printer exits after
    draining everything that was put before that close.
    """

    def __init__(self, config: AppConfig, term: str, emit: Callable[[str], None]) -> None:
        self.config = config
        self.searcher = PageSearcher(term)
        self.emit = emit

    def run(self) -> RunStats:
        roots = self.config.resolve_roots()
        workers = self.config.resolve_workers()
        capacity = self.config.resolve_queue_size()

        paths: Channel[FileCandidate] = Channel(capacity)
        results: Channel[MatchResult] = Channel(capacity)
        walker = DeduplicatingWalker()
        pool = WorkerPool(self.searcher, paths, results, size=workers)
        printer = ResultPrinter(results, self.emit)

        LOGGER.debug(
            "Searching %d roots with %d workers (channel capacity %d)",
            len(roots),
            pool.size,
            paths.maxsize,
        )
        printer.start()
        pool.start()
        try:
            try:
                walker.walk(roots, paths.put)
            finally:
                paths.close()
                pool.join()
        finally:
            results.close()
            printer.join()

        stats = RunStats(
            walk=walker.stats,
            outcomes=Counter(pool.outcomes),
            failed=pool.failed,
            printed=printer.printed,
            malformed=printer.malformed,
        )
        LOGGER.info(
            "Searched %d pages (%d duplicates skipped, %d unreadable), %d matches",
            stats.searched,
            stats.walk.duplicates,
            stats.skipped,
            stats.matches,
        )
        return stats


def run_search(config: AppConfig, term: str, emit: Callable[[str], None]) -> RunStats:
    """Search every page under the configured roots for ``term``."""
    return Pipeline(config, term, emit).run()
