"""Pool of search workers sharing a single path channel."""

from __future__ import annotations

import logging
import os
import threading
from collections import Counter
from concurrent.futures import Future, ThreadPoolExecutor, wait

from manhunt.models import FileCandidate, MatchResult, SearchStatus
from manhunt.pipeline.channel import Channel
from manhunt.search.searcher import PageSearcher

LOGGER = logging.getLogger(__name__)


def default_worker_count() -> int:
    """Two workers per logical CPU; searching is mostly I/O and decompression."""
    return 2 * (os.cpu_count() or 1)


class WorkerPool:
    """Runs ``size`` workers that search pages taken from ``paths``.

    Workers share one path channel, so an idle worker always picks up the
    next page regardless of how long the others take. Each worker exits once
    ``paths`` is closed and drained. Matches go to ``results``.
    """

    def __init__(
        self,
        searcher: PageSearcher,
        paths: Channel[FileCandidate],
        results: Channel[MatchResult],
        *,
        size: int,
    ) -> None:
        if size < 1:
            raise ValueError("Worker pool size must be at least 1")
        self.searcher = searcher
        self.paths = paths
        self.results = results
        self.size = size
        self.outcomes: Counter[SearchStatus] = Counter()
        self.failed = 0
        self._lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None
        self._futures: list[Future[None]] = []

    def start(self) -> None:
        if self._executor is not None:
            raise RuntimeError("Worker pool already started")
        self._executor = ThreadPoolExecutor(
            max_workers=self.size, thread_name_prefix="manhunt-worker"
        )
        self._futures = [self._executor.submit(self._run) for _ in range(self.size)]
        LOGGER.debug("Started %d search workers", self.size)

    def join(self) -> None:
        """Block until every worker has exited.

        Any unexpected worker exception is re-raised, but only after all
        workers are done.
        """
        if self._executor is None:
            return
        wait(self._futures)
        self._executor.shutdown(wait=True)
        self._executor = None
        for future in self._futures:
            future.result()

    def _run(self) -> None:
        processed = 0
        for candidate in self.paths:
            try:
                outcome = self.searcher.search(candidate)
            except Exception:
                LOGGER.exception("Unexpected error searching %s", candidate.path)
                with self._lock:
                    self.failed += 1
                continue
            with self._lock:
                self.outcomes[outcome.status] += 1
            match = outcome.to_match()
            if match is not None:
                self.results.put(match)
            processed += 1
        LOGGER.debug("Worker %s finished after %d pages", threading.current_thread().name, processed)
