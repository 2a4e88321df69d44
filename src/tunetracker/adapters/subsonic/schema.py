"""Pydantic models for the Subsonic REST API (JSON flavour)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class SubsonicBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SubsonicSong(SubsonicBaseModel):
    """A ``Child`` entry; only ``id`` and ``title`` are guaranteed by the API."""

    id: str
    title: str
    artist: str | None = None
    album: str | None = None
    duration: int | None = None
    track: int | None = None
    disc_number: int | None = Field(default=None, alias="discNumber")
    year: int | None = None
    musicbrainz_id: str | None = Field(default=None, alias="musicBrainzId")
    # OpenSubsonic servers send a list, a few older forks a plain string.
    isrc: list[str] = Field(default_factory=list)

    _normalize_mbid = field_validator("musicbrainz_id", mode="before")(_blank_to_none)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value

    @field_validator("isrc", mode="before")
    @classmethod
    def _normalize_isrc(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value.strip() else []
        return value

    @property
    def primary_isrc(self) -> str | None:
        for code in self.isrc:
            if code.strip():
                return code.strip()
        return None


class SearchResult3(SubsonicBaseModel):
    # Left raw so a single malformed song cannot fail the whole page.
    song: list[dict[str, Any]] = Field(default_factory=list)


class SubsonicError(SubsonicBaseModel):
    code: int
    message: str = ""


class SubsonicPlaylist(SubsonicBaseModel):
    id: str
    name: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value


class SubsonicResponse(SubsonicBaseModel):
    status: Literal["ok", "failed"]
    version: str | None = None
    error: SubsonicError | None = None
    search_result3: SearchResult3 | None = Field(default=None, alias="searchResult3")
    song: dict[str, Any] | None = None
    playlist: SubsonicPlaylist | None = None


class SubsonicEnvelope(SubsonicBaseModel):
    response: SubsonicResponse = Field(alias="subsonic-response")


SongPayloadInput = SubsonicSong | Mapping[str, object]
