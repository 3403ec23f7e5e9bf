"""Core manhunt data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileCandidate:
    """Regular file discovered by the walker, paired with its page identity."""

    path: Path
    identity: str


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Evidence that a candidate contains the search term."""

    candidate: FileCandidate

    @property
    def path(self) -> Path:
        return self.candidate.path


@dataclass(frozen=True, slots=True)
class ParsedMatch:
    command: str
    section: str

    def format(self) -> str:
        return f"{self.command} ({self.section})"


class SearchStatus(str, Enum):
    MATCH = "match"
    NO_MATCH = "no_match"
    OPEN_ERROR = "open_error"
    DECODE_ERROR = "decode_error"
    READ_ERROR = "read_error"


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """Typed result of searching a single page."""

    status: SearchStatus
    candidate: FileCandidate
    error: Exception | None = None

    @property
    def matched(self) -> bool:
        return self.status is SearchStatus.MATCH

    def to_match(self) -> MatchResult | None:
        if not self.matched:
            return None
        return MatchResult(candidate=self.candidate)
