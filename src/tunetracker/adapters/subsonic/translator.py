"""Translate Subsonic song payloads into target-catalog tracks."""

from __future__ import annotations

from pydantic import ValidationError

from tunetracker.domain.errors import InvalidTrackError
from tunetracker.domain.model import Origin, Track

from .schema import SongPayloadInput, SubsonicSong

_MANDATORY_FIELDS = ("artist", "album", "duration", "track", "year")


def _ensure_song(payload: SongPayloadInput) -> SubsonicSong:
    if isinstance(payload, SubsonicSong):
        return payload
    try:
        return SubsonicSong.model_validate(payload)
    except ValidationError as exc:
        raise InvalidTrackError(f"Malformed Subsonic song: {exc.error_count()} errors") from exc


def translate_song(payload: SongPayloadInput) -> Track:
    """Build a target ``Track``; songs missing artist, album, duration, track or year fail."""

    song = _ensure_song(payload)
    if (
        song.artist is None
        or song.album is None
        or song.duration is None
        or song.track is None
        or song.year is None
    ):
        missing = [name for name in _MANDATORY_FIELDS if getattr(song, name) is None]
        raise InvalidTrackError(f"Subsonic song {song.id} lacks {', '.join(missing)}")

    return Track(
        title=song.title,
        artist=song.artist,
        album=song.album,
        duration=song.duration,
        track_number=song.track,
        disc_number=song.disc_number or 0,
        year=song.year,
        id=song.id,
        origin=Origin.TARGET,
        isrc=song.primary_isrc,
        musicbrainz_id=song.musicbrainz_id,
    )
