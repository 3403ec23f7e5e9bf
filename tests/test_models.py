"""Tests for core data models."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from manhunt.models import FileCandidate, MatchResult, ParsedMatch, SearchOutcome, SearchStatus


class TestFileCandidate:
    """Test FileCandidate dataclass."""

    def test_equality_by_value(self) -> None:
        """Should compare candidates by value."""
        assert FileCandidate(Path("/a/ls.1"), "ls.1") == FileCandidate(Path("/a/ls.1"), "ls.1")

    def test_frozen(self) -> None:
        """Should reject attribute assignment."""
        candidate = FileCandidate(Path("/a/ls.1"), "ls.1")

        with pytest.raises(dataclasses.FrozenInstanceError):
            candidate.identity = "other"  # type: ignore[misc]


class TestMatchResult:
    """Test MatchResult."""

    def test_path_shortcut(self) -> None:
        """Should expose the candidate path."""
        match = MatchResult(FileCandidate(Path("/b/ls.1.gz"), "ls.1"))

        assert match.path == Path("/b/ls.1.gz")


class TestParsedMatch:
    """Test ParsedMatch."""

    def test_format(self) -> None:
        """Should render as command (section)."""
        assert ParsedMatch(command="grep", section="1").format() == "grep (1)"


class TestSearchOutcome:
    """Test SearchOutcome conversion."""

    def test_match_converts(self) -> None:
        """Should turn a match outcome into a MatchResult."""
        candidate = FileCandidate(Path("/a/grep.1"), "grep.1")
        outcome = SearchOutcome(SearchStatus.MATCH, candidate)

        assert outcome.matched
        assert outcome.to_match() == MatchResult(candidate)

    @pytest.mark.parametrize(
        "status",
        [SearchStatus.NO_MATCH, SearchStatus.OPEN_ERROR, SearchStatus.DECODE_ERROR, SearchStatus.READ_ERROR],
    )
    def test_other_statuses_do_not_convert(self, status: SearchStatus) -> None:
        """Should yield no MatchResult for any other status."""
        outcome = SearchOutcome(status, FileCandidate(Path("/a/x.1"), "x.1"))

        assert not outcome.matched
        assert outcome.to_match() is None

    def test_status_values(self) -> None:
        """Test SearchStatus string values."""
        assert SearchStatus("match") is SearchStatus.MATCH
        assert SearchStatus.READ_ERROR.value == "read_error"
