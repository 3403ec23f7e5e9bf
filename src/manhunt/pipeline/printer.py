"""Single consumer that turns matches into output lines."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from manhunt.errors import MalformedNameError
from manhunt.models import MatchResult
from manhunt.pipeline.channel import Channel
from manhunt.utils.files import parse_page_name

LOGGER = logging.getLogger(__name__)


def format_match(match: MatchResult) -> str:
    """Render a match as ``command (section)``."""
    return parse_page_name(match.candidate.identity).format()


class ResultPrinter:
    """Drains ``results`` on a dedicated thread and writes one line per match.

    Being the only writer keeps lines whole. Lines appear in arrival order.
    """

    def __init__(self, results: Channel[MatchResult], emit: Callable[[str], None]) -> None:
        self.results = results
        self.emit = emit
        self.printed = 0
        self.malformed = 0
        self._thread: threading.Thread | None = None
        self._error: BaseException | None = None

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("Result printer already started")
        self._thread = threading.Thread(target=self._run, name="manhunt-printer")
        self._thread.start()

    def join(self) -> None:
        """Wait for the printer to drain the closed result channel."""
        if self._thread is None:
            return
        self._thread.join()
        self._thread = None
        if self._error is not None:
            raise self._error

    def _run(self) -> None:
        try:
            for match in self.results:
                try:
                    line = format_match(match)
                except MalformedNameError as exc:
                    self.malformed += 1
                    LOGGER.debug("Not printing %s: %s", match.path, exc)
                    continue
                self.emit(line)
                self.printed += 1
        except Exception as exc:  # surfaced by join()
            self._error = exc
            # Keep draining so blocked workers are never stuck on a full channel.
            for _ in self.results:
                pass
