"""Literal substring search over a single manual page."""

from __future__ import annotations

import logging

from manhunt.errors import DecodeInitError, OpenError, ReadError
from manhunt.ingestion.decoder import open_lines
from manhunt.models import FileCandidate, SearchOutcome, SearchStatus

LOGGER = logging.getLogger(__name__)


class PageSearcher:
    """Searches pages for a literal, case-sensitive term.

    The term is compared against raw line bytes, so pages in any encoding
    can be scanned without decoding them.
    """

    def __init__(self, term: str) -> None:
        if not term:
            raise ValueError("Search term must not be empty")
        self.term = term
        self._needle = term.encode("utf-8")

    def search(self, candidate: FileCandidate) -> SearchOutcome:
        """Return MATCH on the first line containing the term, without reading further."""
        path = candidate.path
        try:
            with open_lines(path) as lines:
                for line in lines:
                    if self._needle in line:
                        return SearchOutcome(SearchStatus.MATCH, candidate)
        except OpenError as exc:
            LOGGER.debug("Skipping %s, cannot open: %s", path, exc.reason)
            return SearchOutcome(SearchStatus.OPEN_ERROR, candidate, exc)
        except DecodeInitError as exc:
            LOGGER.debug("Skipping %s, not a valid gzip stream: %s", path, exc.reason)
            return SearchOutcome(SearchStatus.DECODE_ERROR, candidate, exc)
        except ReadError as exc:
            LOGGER.debug("Stopped reading %s: %s", path, exc.reason)
            return SearchOutcome(SearchStatus.READ_ERROR, candidate, exc)

        return SearchOutcome(SearchStatus.NO_MATCH, candidate)
