"""Canonical track record shared by every catalog."""

from __future__ import annotations

from dataclasses import dataclass

from tunetracker.domain.errors import InvalidTrackError

from .enums import Origin

type TrackId = str
type Isrc = str
type Mbid = str


@dataclass(frozen=True, slots=True)
class Track:
    """Immutable track record.

    ``id`` is only meaningful inside the catalog named by ``origin``; identity across
    catalogs is decided by the match scorer, never by comparing ids.
    """

    title: str
    artist: str
    album: str
    duration: int
    track_number: int
    disc_number: int
    year: int
    id: TrackId
    origin: Origin
    isrc: Isrc | None = None
    musicbrainz_id: Mbid | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidTrackError("Track id must not be empty")
        if self.duration < 0:
            raise InvalidTrackError(f"Negative duration for track {self.id}: {self.duration}")
        if self.track_number < 0 or self.disc_number < 0:
            raise InvalidTrackError(
                f"Negative track/disc number for track {self.id}: "
                f"{self.track_number}/{self.disc_number}"
            )

    @property
    def label(self) -> str:
        return f"{self.artist} - {self.title} ({self.album})"
