from __future__ import annotations

import asyncio

import pytest

from tests.helpers.subsonic import FakeSubsonicServer
from tests.helpers.tracks import make_song_payload
from tunetracker.adapters.subsonic import SubsonicClient, fetch_library
from tunetracker.domain.catalog import TargetCatalog
from tunetracker.domain.errors import CatalogFetchError


def _fetch(client: SubsonicClient, page_size: int = 20) -> TargetCatalog:
    async def run() -> TargetCatalog:
        async with client:
            return await fetch_library(client, page_size=page_size)

    return asyncio.run(run())


def test_fetch_library_drops_incomplete_songs(subsonic_client: SubsonicClient) -> None:
    catalog = _fetch(subsonic_client)

    assert [track.id for track in catalog] == ["3b6f2c1e9a", "7c41de0f22"]


def test_fetch_library_reads_until_empty_page(
    subsonic_client: SubsonicClient, server: FakeSubsonicServer
) -> None:
    server.songs = [make_song_payload(f"song-{index}") for index in range(47)]

    catalog = _fetch(subsonic_client)

    assert len(catalog) == 47
    offsets = [params["songOffset"] for params in server.calls("search3")]
    assert offsets == ["0", "20", "40", "60"]


def test_fetch_library_fails_on_server_error(
    subsonic_client: SubsonicClient, server: FakeSubsonicServer
) -> None:
    server.status_codes["search3"] = 500

    with pytest.raises(CatalogFetchError, match="offset 0"):
        _fetch(subsonic_client)
