"""Configuration types for resilient HTTP clients."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

import httpx

ShouldCacheHook = Callable[[object], bool]

READ_ONLY_METHODS: Final[frozenset[str]] = frozenset({"GET", "HEAD", "OPTIONS"})
TRANSIENT_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Transport-level retries; application errors are never retried."""

    total: int = 3
    backoff_factor: float = 0.5
    max_backoff_wait: float = 30.0
    backoff_jitter: float = 1.0
    respect_retry_after_header: bool = True
    # Playlist writes are not idempotent and go out as POST, so only reads are retried.
    allowed_methods: frozenset[str] = READ_ONLY_METHODS
    status_forcelist: frozenset[int] = TRANSIENT_STATUS_CODES
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.TimeoutException,
        httpx.NetworkError,
        httpx.RemoteProtocolError,
    )


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class CacheConfig:
    """In-memory response cache kept for the lifetime of one client."""

    enabled: bool = True
    default_ttl_seconds: float | None = None
    refresh_ttl_on_access: bool = False
    should_cache: ShouldCacheHook | None = None


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    cache: CacheConfig | None = None
