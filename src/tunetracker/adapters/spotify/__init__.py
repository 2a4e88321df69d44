"""Spotify adapter package."""

from __future__ import annotations

from .client import SpotifyClient, parse_playlist_id
from .fetcher import fetch_playlist_tracks
from .schema import (
    PlaylistItem,
    PlaylistItemsPage,
    SpotifyAlbum,
    SpotifyArtist,
    SpotifyPlaylist,
    SpotifyTrack,
)
from .translator import release_year, translate_track

__all__ = [
    "PlaylistItem",
    "PlaylistItemsPage",
    "SpotifyAlbum",
    "SpotifyArtist",
    "SpotifyClient",
    "SpotifyPlaylist",
    "SpotifyTrack",
    "fetch_playlist_tracks",
    "parse_playlist_id",
    "release_year",
    "translate_track",
]
