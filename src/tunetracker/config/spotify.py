"""Spotify configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars

SPOTIFY_PLAYLIST_SCOPES = (
    "playlist-read-private",
    "playlist-read-collaborative",
)


@dataclass(frozen=True)
class SpotifyConfig:
    client_id: str
    client_secret: str
    redirect_uri: str
    scope: tuple[str, ...] = SPOTIFY_PLAYLIST_SCOPES
    cache_path: str | None = None


def get_spotify_config(*, scope: tuple[str, ...] | None = None) -> SpotifyConfig:
    values = require_env_vars(
        ("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET", "SPOTIFY_REDIRECT_URI")
    )
    return SpotifyConfig(
        client_id=values["SPOTIFY_CLIENT_ID"],
        client_secret=values["SPOTIFY_CLIENT_SECRET"],
        redirect_uri=values["SPOTIFY_REDIRECT_URI"],
        scope=scope or SPOTIFY_PLAYLIST_SCOPES,
        cache_path=optional_env_var("SPOTIFY_CACHE_PATH"),
    )
