"""Async HTTP client for the Subsonic REST API."""

from __future__ import annotations

import hashlib
import secrets
from logging import getLogger
from typing import TYPE_CHECKING, Any, Final

import httpx
from pydantic import ValidationError

from tunetracker.adapters.http_resilience import ResilientClient

from .schema import SubsonicEnvelope, SubsonicResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence
    from types import TracebackType

    from tunetracker.config.http_resilience import ResilienceConfig
    from tunetracker.config.subsonic import SubsonicConfig

log = getLogger(__name__)

SEARCH_PAGE_SIZE: Final[int] = 20
ERROR_NOT_FOUND: Final[int] = 70

type QueryItems = list[tuple[str, str]]
type FormFields = dict[str, list[str]]


class SubsonicAPIError(RuntimeError):
    """Raised when the server answers with ``status="failed"`` or an unreadable payload."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


def should_cache_payload(payload: object) -> bool:
    """Only successful read payloads are worth caching."""

    if not isinstance(payload, dict):
        return False
    body = payload.get("subsonic-response")
    if not isinstance(body, dict) or body.get("status") != "ok":
        return False
    return "searchResult3" in body or "song" in body


def _token_auth(password: str, salt: str) -> str:
    return hashlib.md5((password + salt).encode("utf-8"), usedforsecurity=False).hexdigest()


class SubsonicClient:
    """Subsonic API client holding one ``ResilientClient`` open for its lifetime.

    Use as an async context manager so every request of a run shares the same rate
    limiter and connection pool::

        async with SubsonicClient(config=config) as client:
            songs = await client.search_songs(0)
    """

    def __init__(
        self,
        *,
        config: SubsonicConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient
        self._http: ResilientClient | None = None
        # One salt per client keeps request URLs stable within a run.
        self._salt = secrets.token_hex(8)

    async def __aenter__(self) -> SubsonicClient:
        self._http = self._client_factory(self._config.resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def ping(self) -> None:
        await self._call("ping")

    async def search_songs(
        self, offset: int, *, count: int = SEARCH_PAGE_SIZE
    ) -> list[dict[str, Any]]:
        """Return one raw page of the whole song library (an empty query matches all)."""

        response = await self._call(
            "search3",
            [
                ("query", ""),
                ("artistCount", "0"),
                ("albumCount", "0"),
                ("songCount", str(count)),
                ("songOffset", str(offset)),
            ],
        )
        if response.search_result3 is None:
            return []
        return response.search_result3.song

    async def get_song(self, song_id: str) -> dict[str, Any]:
        response = await self._call("getSong", [("id", song_id)])
        if response.song is None:
            raise SubsonicAPIError(f"Song {song_id} not found", code=ERROR_NOT_FOUND)
        return response.song

    async def create_playlist(self, name: str) -> str:
        response = await self._submit("createPlaylist", {"name": [name]})
        if response.playlist is None:
            raise SubsonicAPIError("createPlaylist did not return the new playlist")
        return response.playlist.id

    async def update_playlist(
        self,
        playlist_id: str,
        *,
        comment: str | None = None,
        public: bool | None = None,
        song_ids_to_add: Sequence[str] = (),
    ) -> None:
        form: FormFields = {"playlistId": [playlist_id]}
        if comment is not None:
            form["comment"] = [comment]
        if public is not None:
            form["public"] = ["true" if public else "false"]
        if song_ids_to_add:
            form["songIdToAdd"] = list(song_ids_to_add)
        await self._submit("updatePlaylist", form)

    async def delete_playlist(self, playlist_id: str) -> None:
        await self._submit("deletePlaylist", {"id": [playlist_id]})

    async def star(self, song_ids: Iterable[str]) -> None:
        await self._submit("star", {"id": list(song_ids)})

    def _auth_params(self) -> QueryItems:
        return [
            ("u", self._config.user),
            ("t", _token_auth(self._config.password, self._salt)),
            ("s", self._salt),
            ("v", self._config.api_version),
            ("c", self._config.client_name),
            ("f", "json"),
        ]

    def _require_http(self) -> ResilientClient:
        if self._http is None:
            raise RuntimeError("SubsonicClient must be used as an async context manager")
        return self._http

    async def _call(self, endpoint: str, params: QueryItems | None = None) -> SubsonicResponse:
        query = httpx.QueryParams([*self._auth_params(), *(params or [])])
        response = await self._require_http().get(endpoint, params=query)
        return self._parse(endpoint, response)

    async def _submit(self, endpoint: str, form: FormFields) -> SubsonicResponse:
        """Send a playlist or favorites change as a form POST.

        The retry policy only covers read methods, so a write that times out or hits a
        5xx is reported once instead of being replayed against the server.
        """

        response = await self._require_http().post(
            endpoint, params=httpx.QueryParams(self._auth_params()), data=form
        )
        return self._parse(endpoint, response)

    def _parse(self, endpoint: str, response: httpx.Response) -> SubsonicResponse:
        response.raise_for_status()

        try:
            envelope = SubsonicEnvelope.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise SubsonicAPIError(f"Unexpected Subsonic response for {endpoint}") from exc

        body = envelope.response
        if body.status == "failed":
            error = body.error
            code = error.code if error is not None else None
            message = error.message if error is not None else "unknown error"
            log.error(f"Subsonic API error {code} on {endpoint}: {message}")
            raise SubsonicAPIError(message, code=code)
        return body


__all__ = ["SEARCH_PAGE_SIZE", "SubsonicAPIError", "SubsonicClient", "should_cache_payload"]
