"""Minimal Pydantic models for the Spotify Web API playlist endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyArtist(SpotifyBaseModel):
    id: str | None = None
    name: str


class SpotifyAlbum(SpotifyBaseModel):
    id: str | None = None
    name: str
    release_date: str | None = None


class SpotifyTrack(SpotifyBaseModel):
    id: str | None = None
    name: str
    type: str = "track"
    is_local: bool = False
    duration_ms: int | None = None
    track_number: int = 0
    disc_number: int = 1
    album: SpotifyAlbum
    artists: list[SpotifyArtist] = Field(default_factory=list["SpotifyArtist"])
    external_ids: dict[str, str] = Field(default_factory=dict)


class PlaylistItem(SpotifyBaseModel):
    added_at: str | None = None
    is_local: bool = False
    # Episodes and removed tracks share this slot, so it is validated per item later.
    track: dict[str, Any] | None = None


class SpotifyPage(SpotifyBaseModel):
    href: str | None = None
    limit: int | None = None
    next: str | None = None
    offset: int | None = None
    previous: str | None = None
    total: int | None = None


class PlaylistItemsPage(SpotifyPage):
    items: list[PlaylistItem] = Field(default_factory=list["PlaylistItem"])


class SpotifyPlaylist(SpotifyBaseModel):
    id: str | None = None
    name: str
    description: str | None = None


TrackPayloadInput = SpotifyTrack | Mapping[str, object]
