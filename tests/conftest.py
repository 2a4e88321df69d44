from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests.helpers.spotify import FakeSpotipyClient, SpotifyPayload
from tests.helpers.subsonic import FakeSubsonicServer, SubsonicPayload, make_client_factory
from tunetracker.adapters.spotify import SpotifyClient
from tunetracker.adapters.subsonic import SubsonicClient
from tunetracker.config import ResilienceConfig, SpotifyConfig, SubsonicConfig

FIXTURES = Path(__file__).resolve().parent / "data"


def _load_fixture(name: str) -> dict[str, object]:
    return json.loads((FIXTURES / name).read_text())


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TUNETRACKER_MATCH_STRATEGY",
        "TUNETRACKER_RESOLVER_TIMEOUT",
        "SUBSONIC_TIMEOUT",
        "SPOTIFY_CACHE_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def search3_payload() -> SubsonicPayload:
    return _load_fixture("subsonic/search3.json")


@pytest.fixture
def library_songs(search3_payload: SubsonicPayload) -> list[SubsonicPayload]:
    return search3_payload["subsonic-response"]["searchResult3"]["song"]


@pytest.fixture
def subsonic_config() -> SubsonicConfig:
    return SubsonicConfig(
        url="http://music.test",
        user="alice",
        password="sesame",
        resilience=ResilienceConfig(name="subsonic", base_url="http://music.test/rest/"),
    )


@pytest.fixture
def server(library_songs: list[SubsonicPayload]) -> FakeSubsonicServer:
    return FakeSubsonicServer(songs=list(library_songs))


@pytest.fixture
def subsonic_client(
    server: FakeSubsonicServer, subsonic_config: SubsonicConfig
) -> SubsonicClient:
    return SubsonicClient(config=subsonic_config, client_factory=make_client_factory(server))


@pytest.fixture
def playlist_items_payload() -> SpotifyPayload:
    return _load_fixture("spotify/playlist_items.json")


@pytest.fixture
def playlist_tracks(playlist_items_payload: SpotifyPayload) -> list[SpotifyPayload]:
    return [item["track"] for item in playlist_items_payload["items"]]


@pytest.fixture
def fake_spotipy(playlist_items_payload: SpotifyPayload) -> FakeSpotipyClient:
    return FakeSpotipyClient(items=playlist_items_payload["items"])


@pytest.fixture
def spotify_config() -> SpotifyConfig:
    return SpotifyConfig(
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="http://127.0.0.1:8888/callback",
    )


@pytest.fixture
def spotify_client(fake_spotipy: FakeSpotipyClient, spotify_config: SpotifyConfig) -> SpotifyClient:
    return SpotifyClient(config=spotify_config, client=fake_spotipy)
