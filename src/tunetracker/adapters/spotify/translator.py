"""Translate Spotify playlist payloads into source-catalog tracks."""

from __future__ import annotations

import re

from pydantic import ValidationError

from tunetracker.domain.errors import InvalidTrackError
from tunetracker.domain.model import Origin, Track

from .schema import SpotifyTrack, TrackPayloadInput

_YEAR_PATTERN = re.compile(r"^(\d{4})")


def _ensure_track(payload: TrackPayloadInput) -> SpotifyTrack:
    if isinstance(payload, SpotifyTrack):
        return payload
    try:
        return SpotifyTrack.model_validate(payload)
    except ValidationError as exc:
        raise InvalidTrackError(f"Malformed Spotify track: {exc.error_count()} errors") from exc


def release_year(release_date: str | None) -> int:
    """Year prefix of a ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD`` date, 0 when unknown."""

    if not release_date:
        return 0
    match = _YEAR_PATTERN.match(release_date.strip())
    return int(match.group(1)) if match else 0


def translate_track(payload: TrackPayloadInput) -> Track:
    """Build a source ``Track`` from a Spotify track object."""

    track = _ensure_track(payload)
    if track.type != "track":
        raise InvalidTrackError(f"Unsupported playlist item type: {track.type}")
    if track.is_local or not track.id:
        raise InvalidTrackError(f"Local file {track.name!r} has no Spotify id")
    if not track.artists:
        raise InvalidTrackError(f"Spotify track {track.id} has no artist")
    if track.duration_ms is None:
        raise InvalidTrackError(f"Spotify track {track.id} has no duration")

    return Track(
        title=track.name,
        artist=track.artists[0].name,
        album=track.album.name,
        duration=track.duration_ms // 1000,
        track_number=track.track_number,
        disc_number=track.disc_number,
        year=release_year(track.album.release_date),
        id=track.id,
        origin=Origin.SOURCE,
        isrc=track.external_ids.get("isrc") or None,
    )
