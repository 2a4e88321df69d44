"""Spotipy-based client wrapper for reading playlists."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Protocol

import spotipy
from spotipy.cache_handler import CacheFileHandler
from spotipy.oauth2 import SpotifyOAuth

from tunetracker.config.sync import DEFAULT_PLAYLIST_BATCH_SIZE

from .schema import PlaylistItem, PlaylistItemsPage, SpotifyPlaylist

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tunetracker.config.spotify import SpotifyConfig

_PLAYLIST_ID = r"[0-9A-Za-z]{22}"
_PLAYLIST_PATTERNS = (
    re.compile(rf"^({_PLAYLIST_ID})$"),
    re.compile(rf"^spotify:(?:user:[^:]+:)?playlist:({_PLAYLIST_ID})$"),
    re.compile(rf"^https?://open\.spotify\.com/(?:[\w-]+/)?playlist/({_PLAYLIST_ID})(?:[/?#].*)?$"),
)


class PlaylistSource(Protocol):
    """The subset of ``spotipy.Spotify`` this wrapper relies on."""

    def playlist(
        self, playlist_id: str, fields: str | None = None, **kwargs: Any
    ) -> dict[str, Any]: ...

    def playlist_items(
        self,
        playlist_id: str,
        fields: str | None = None,
        limit: int = 100,
        offset: int = 0,
        **kwargs: Any,
    ) -> dict[str, Any]: ...


def parse_playlist_id(value: str) -> str:
    """Accept a bare playlist id, a ``spotify:playlist:`` URI or an open.spotify.com URL."""

    candidate = value.strip()
    for pattern in _PLAYLIST_PATTERNS:
        match = pattern.match(candidate)
        if match:
            return match.group(1)
    raise ValueError(f"Not a Spotify playlist id, URI or URL: {value}")


class SpotifyClient:
    """Small wrapper around spotipy.Spotify for playlist paging."""

    def __init__(self, *, config: SpotifyConfig, client: PlaylistSource | None = None) -> None:
        if client is None:
            cache_handler = (
                CacheFileHandler(cache_path=config.cache_path) if config.cache_path else None
            )
            auth_manager = SpotifyOAuth(
                client_id=config.client_id,
                client_secret=config.client_secret,
                redirect_uri=config.redirect_uri,
                scope=" ".join(config.scope),
                cache_handler=cache_handler,
            )
            client = spotipy.Spotify(auth_manager=auth_manager)
        self._client = client

    def playlist_details(self, playlist_id: str) -> SpotifyPlaylist:
        raw_payload = self._client.playlist(playlist_id, fields="id,name,description")
        return SpotifyPlaylist.model_validate(raw_payload)

    def iter_playlist_items(
        self,
        playlist_id: str,
        *,
        batch_size: int = DEFAULT_PLAYLIST_BATCH_SIZE,
    ) -> Iterable[PlaylistItem]:
        offset = 0
        while True:
            raw_payload = self._client.playlist_items(
                playlist_id,
                limit=batch_size,
                offset=offset,
                additional_types=("track",),
            )
            payload = PlaylistItemsPage.model_validate(raw_payload)
            items = payload.items
            if not items:
                return
            yield from items
            if payload.next is None:
                return
            offset += len(items)
