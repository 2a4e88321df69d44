"""Spotify playlist reader producing the ordered source sequence."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from tunetracker.config.spotify import get_spotify_config
from tunetracker.config.sync import DEFAULT_PLAYLIST_BATCH_SIZE
from tunetracker.domain.errors import InvalidTrackError

from .client import SpotifyClient
from .translator import translate_track

if TYPE_CHECKING:
    from tunetracker.config.spotify import SpotifyConfig
    from tunetracker.domain.model import Track

log = getLogger(__name__)


def fetch_playlist_tracks(
    playlist_id: str,
    *,
    client: SpotifyClient | None = None,
    config: SpotifyConfig | None = None,
    batch_size: int = DEFAULT_PLAYLIST_BATCH_SIZE,
) -> list[Track]:
    """Fetch a playlist in order; episodes, local files and broken items are skipped."""

    active_client = client or SpotifyClient(config=config or get_spotify_config())
    tracks: list[Track] = []
    skipped = 0
    for item in active_client.iter_playlist_items(playlist_id, batch_size=batch_size):
        if item.track is None:
            skipped += 1
            continue
        try:
            tracks.append(translate_track(item.track))
        except InvalidTrackError as exc:
            skipped += 1
            log.debug("Skipping playlist item: %s", exc)

    log.info(
        "Fetched Spotify playlist %s: tracks=%s, skipped=%s", playlist_id, len(tracks), skipped
    )
    return tracks
