"""Defaults for playlist transfer runs."""

from __future__ import annotations

from dataclasses import dataclass

from tunetracker.domain.catalog import DEFAULT_PAGE_SIZE
from tunetracker.domain.model import MatchStrategy

from .env import env_positive_float, optional_env_var
from .errors import InvalidConfigurationError

DEFAULT_PLAYLIST_BATCH_SIZE = 100


@dataclass(frozen=True, slots=True)
class SyncConfig:
    catalog_page_size: int = DEFAULT_PAGE_SIZE
    playlist_batch_size: int = DEFAULT_PLAYLIST_BATCH_SIZE
    match_strategy: MatchStrategy = MatchStrategy.FIRST
    resolver_timeout_seconds: float | None = None


def get_sync_config() -> SyncConfig:
    """Read ``TUNETRACKER_MATCH_STRATEGY`` and ``TUNETRACKER_RESOLVER_TIMEOUT`` if set."""

    raw_strategy = optional_env_var("TUNETRACKER_MATCH_STRATEGY")
    try:
        strategy = MatchStrategy(raw_strategy.lower()) if raw_strategy else MatchStrategy.FIRST
    except ValueError as exc:
        allowed = ", ".join(MatchStrategy)
        raise InvalidConfigurationError(
            "TUNETRACKER_MATCH_STRATEGY", raw_strategy or "", f"expected one of {allowed}"
        ) from exc

    timeout: float | None = None
    if optional_env_var("TUNETRACKER_RESOLVER_TIMEOUT") is not None:
        timeout = env_positive_float("TUNETRACKER_RESOLVER_TIMEOUT", 0.0)

    return SyncConfig(match_strategy=strategy, resolver_timeout_seconds=timeout)
