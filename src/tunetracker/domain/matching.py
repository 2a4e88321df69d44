"""Heuristic scorer deciding whether two track records denote the same recording.

Services disagree on release year (remaster vs. original), per-disc track numbering
and edition suffixes far more often than on artist name or rounded duration, so
artist and duration weigh most while album, title and year only corroborate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from tunetracker.domain.model import Track

MATCH_THRESHOLD: Final[int] = 70
DURATION_TOLERANCE_SECONDS: Final[int] = 3

EXACT_TEXT_POINTS: Final[int] = 20
PARTIAL_TEXT_POINTS: Final[int] = 10
YEAR_POINTS: Final[int] = 10
ARTIST_POINTS: Final[int] = 20
EXACT_DURATION_POINTS: Final[int] = 20
CLOSE_DURATION_POINTS: Final[int] = 10
TRACK_NUMBER_POINTS: Final[int] = 20


@dataclass(frozen=True, slots=True)
class MatchScore:
    """Per-signal breakdown of a source/target comparison."""

    album: int = 0
    title: int = 0
    year: int = 0
    artist: int = 0
    duration: int = 0
    track_number: int = 0
    isrc_match: bool = False

    @property
    def total(self) -> int:
        return self.album + self.title + self.year + self.artist + self.duration + self.track_number

    @property
    def accepted(self) -> bool:
        return self.isrc_match or self.total >= MATCH_THRESHOLD


def text_similarity(left: str, right: str) -> int:
    """Score two strings: 20 when equal ignoring case, 10 when one contains the other."""

    left, right = left.lower(), right.lower()
    if left == right:
        return EXACT_TEXT_POINTS
    # "Physical Graffiti (Remaster)" vs "Physical Graffiti"
    if left in right or right in left:
        return PARTIAL_TEXT_POINTS
    return 0


def duration_similarity(left: int, right: int) -> int:
    delta = abs(left - right)
    if delta == 0:
        return EXACT_DURATION_POINTS
    if delta <= DURATION_TOLERANCE_SECONDS:
        return CLOSE_DURATION_POINTS
    return 0


def score(source: Track, target: Track) -> MatchScore:
    """Compare ``source`` against ``target`` and return the score breakdown."""

    album = text_similarity(source.album, target.album)
    # ISRCs get reused on compilations, so the album has to agree at least partially.
    isrc_match = bool(source.isrc) and source.isrc == target.isrc and album > 0

    # The source catalog restarts numbering on every disc.
    track_number = 0
    if source.disc_number == 1 and source.track_number == target.track_number:
        track_number = TRACK_NUMBER_POINTS

    return MatchScore(
        album=album,
        title=text_similarity(source.title, target.title),
        year=YEAR_POINTS if source.year == target.year else 0,
        artist=ARTIST_POINTS if source.artist.lower() == target.artist.lower() else 0,
        duration=duration_similarity(source.duration, target.duration),
        track_number=track_number,
        isrc_match=isrc_match,
    )


def matches(source: Track, target: Track) -> bool:
    return score(source, target).accepted
