"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .spotify import SPOTIFY_PLAYLIST_SCOPES, SpotifyConfig, get_spotify_config
from .subsonic import SubsonicConfig, default_subsonic_resilience, get_subsonic_config
from .sync import SyncConfig, get_sync_config

__all__ = [
    "SPOTIFY_PLAYLIST_SCOPES",
    "CacheConfig",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SpotifyConfig",
    "SubsonicConfig",
    "SyncConfig",
    "configure_logging",
    "default_subsonic_resilience",
    "get_spotify_config",
    "get_subsonic_config",
    "get_sync_config",
    "optional_env_var",
    "require_env_vars",
]
