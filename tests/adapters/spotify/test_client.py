from __future__ import annotations

import pytest

from tests.helpers.spotify import FakeSpotipyClient
from tunetracker.adapters.spotify import SpotifyClient, parse_playlist_id
from tunetracker.config import SpotifyConfig

PLAYLIST_ID = "37i9dQZF1DX1spT6G94GFC"


@pytest.mark.parametrize(
    "value",
    [
        PLAYLIST_ID,
        f"  {PLAYLIST_ID}\n",
        f"spotify:playlist:{PLAYLIST_ID}",
        f"spotify:user:spotify:playlist:{PLAYLIST_ID}",
        f"https://open.spotify.com/playlist/{PLAYLIST_ID}",
        f"https://open.spotify.com/playlist/{PLAYLIST_ID}?si=4f1a2b3c",
        f"https://open.spotify.com/intl-de/playlist/{PLAYLIST_ID}",
    ],
)
def test_parse_playlist_id_accepts_known_forms(value: str) -> None:
    assert parse_playlist_id(value) == PLAYLIST_ID


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not-a-playlist",
        f"spotify:album:{PLAYLIST_ID}",
        f"https://open.spotify.com/track/{PLAYLIST_ID}",
        f"https://example.com/playlist/{PLAYLIST_ID}",
    ],
)
def test_parse_playlist_id_rejects_other_input(value: str) -> None:
    with pytest.raises(ValueError, match="Not a Spotify playlist"):
        parse_playlist_id(value)


def test_iter_playlist_items_follows_next_links(
    spotify_client: SpotifyClient, fake_spotipy: FakeSpotipyClient
) -> None:
    items = list(spotify_client.iter_playlist_items(PLAYLIST_ID, batch_size=2))

    assert len(items) == 5
    assert fake_spotipy.calls == [(0, 2), (2, 2), (4, 2)]
    assert items[-1].track is None


def test_iter_playlist_items_of_empty_playlist(spotify_config: SpotifyConfig) -> None:
    empty = SpotifyClient(config=spotify_config, client=FakeSpotipyClient(items=[]))

    assert list(empty.iter_playlist_items(PLAYLIST_ID)) == []


def test_playlist_details(spotify_client: SpotifyClient) -> None:
    details = spotify_client.playlist_details(PLAYLIST_ID)

    assert details.id == PLAYLIST_ID
    assert details.name == "Led Zeppelin Essentials"
