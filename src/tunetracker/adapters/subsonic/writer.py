"""Write reconciled tracks back to the Subsonic server."""

from __future__ import annotations

from itertools import batched
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from tunetracker.config.sync import DEFAULT_PLAYLIST_BATCH_SIZE
from tunetracker.domain.errors import PlaylistWriteError

from .client import SubsonicAPIError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tunetracker.domain.model import TrackId

    from .client import SubsonicClient

log = getLogger(__name__)


class SubsonicPlaylistWriter:
    """Create playlists or star songs; any failure becomes ``PlaylistWriteError``.

    Writes are not retried. When filling a freshly created playlist fails, the
    playlist is deleted again so a failed run leaves no half-filled copy behind.
    Song ids are sent in batches to keep each request within common server limits.
    """

    def __init__(
        self,
        client: SubsonicClient,
        *,
        batch_size: int = DEFAULT_PLAYLIST_BATCH_SIZE,
    ) -> None:
        if batch_size <= 0:
            raise ValueError("Batch size must be positive")
        self._client = client
        self._batch_size = batch_size

    async def create_playlist(
        self,
        *,
        name: str,
        comment: str,
        track_ids: Sequence[TrackId],
    ) -> str:
        try:
            playlist_id = await self._client.create_playlist(name)
        except (SubsonicAPIError, httpx.HTTPError) as exc:
            raise PlaylistWriteError(f"Could not create playlist {name!r}: {exc}") from exc

        try:
            await self._client.update_playlist(playlist_id, comment=comment, public=False)
            for batch in batched(track_ids, self._batch_size):
                await self._client.update_playlist(playlist_id, song_ids_to_add=batch)
        except (SubsonicAPIError, httpx.HTTPError) as exc:
            await self._discard(playlist_id)
            raise PlaylistWriteError(f"Could not fill playlist {name!r}: {exc}") from exc

        log.info("Created playlist %r (%s) with %s tracks", name, playlist_id, len(track_ids))
        return playlist_id

    async def add_favorites(self, track_ids: Sequence[TrackId]) -> None:
        try:
            for batch in batched(track_ids, self._batch_size):
                await self._client.star(batch)
        except (SubsonicAPIError, httpx.HTTPError) as exc:
            raise PlaylistWriteError(f"Could not star tracks: {exc}") from exc
        log.info("Starred %s tracks", len(track_ids))

    async def _discard(self, playlist_id: str) -> None:
        try:
            await self._client.delete_playlist(playlist_id)
        except (SubsonicAPIError, httpx.HTTPError) as exc:
            log.warning("Could not delete incomplete playlist %s: %s", playlist_id, exc)
        else:
            log.info("Deleted incomplete playlist %s", playlist_id)
