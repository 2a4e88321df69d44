"""Subsonic adapter package (target catalog, write-back, manual resolution)."""

from __future__ import annotations

from .client import SEARCH_PAGE_SIZE, SubsonicAPIError, SubsonicClient, should_cache_payload
from .fetcher import fetch_library
from .resolver import InteractiveResolver
from .schema import SubsonicEnvelope, SubsonicResponse, SubsonicSong
from .translator import translate_song
from .writer import SubsonicPlaylistWriter

__all__ = [
    "SEARCH_PAGE_SIZE",
    "InteractiveResolver",
    "SubsonicAPIError",
    "SubsonicClient",
    "SubsonicEnvelope",
    "SubsonicPlaylistWriter",
    "SubsonicResponse",
    "SubsonicSong",
    "fetch_library",
    "should_cache_payload",
    "translate_song",
]
