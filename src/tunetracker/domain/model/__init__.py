"""Domain model package."""

from __future__ import annotations

from .enums import EntryStatus, MatchStrategy, Origin
from .track import Isrc, Mbid, Track, TrackId

__all__ = [
    "EntryStatus",
    "Isrc",
    "MatchStrategy",
    "Mbid",
    "Origin",
    "Track",
    "TrackId",
]
