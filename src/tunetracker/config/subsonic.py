"""Subsonic server configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .env import env_positive_float, require_env_vars
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, ShouldCacheHook

SUBSONIC_API_VERSION: Final[str] = "1.16.1"
SUBSONIC_CLIENT_NAME: Final[str] = "TuneTracker"
SUBSONIC_TIMEOUT_SECONDS: Final[float] = 30.0
SUBSONIC_MAX_CALLS_PER_SECOND: Final[int] = 10


@dataclass(frozen=True)
class SubsonicConfig:
    """Holds Subsonic server connection values."""

    url: str
    user: str
    password: str = field(repr=False)
    resilience: ResilienceConfig
    api_version: str = SUBSONIC_API_VERSION
    client_name: str = SUBSONIC_CLIENT_NAME


def default_subsonic_resilience(
    url: str,
    *,
    timeout_seconds: float = SUBSONIC_TIMEOUT_SECONDS,
    cache_predicate: ShouldCacheHook | None = None,
) -> ResilienceConfig:
    return ResilienceConfig(
        name="subsonic",
        base_url=f"{url.rstrip('/')}/rest/",
        timeout_seconds=timeout_seconds,
        ratelimit=RateLimit(max_calls=SUBSONIC_MAX_CALLS_PER_SECOND, per_seconds=1.0),
        cache=CacheConfig(should_cache=cache_predicate),
    )


def get_subsonic_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> SubsonicConfig:
    values = require_env_vars(("SUBSONIC_URL", "SUBSONIC_USER", "SUBSONIC_PASSWORD"))
    url = values["SUBSONIC_URL"]
    return SubsonicConfig(
        url=url,
        user=values["SUBSONIC_USER"],
        password=values["SUBSONIC_PASSWORD"],
        resilience=resilience
        or default_subsonic_resilience(
            url,
            timeout_seconds=env_positive_float("SUBSONIC_TIMEOUT", SUBSONIC_TIMEOUT_SECONDS),
            cache_predicate=cache_predicate,
        ),
    )
