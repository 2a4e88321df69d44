"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

import spotipy
from pydantic import ValidationError

from tunetracker.adapters.spotify import SpotifyClient, fetch_playlist_tracks, parse_playlist_id
from tunetracker.adapters.subsonic import (
    InteractiveResolver,
    SubsonicClient,
    SubsonicPlaylistWriter,
    fetch_library,
    should_cache_payload,
)
from tunetracker.config import get_spotify_config, get_subsonic_config, get_sync_config
from tunetracker.domain.errors import CatalogFetchError
from tunetracker.domain.reconciliation import reconcile

if TYPE_CHECKING:
    from tunetracker.config.sync import SyncConfig
    from tunetracker.domain.model import MatchStrategy, Track
    from tunetracker.domain.ports.publishing import PlaylistWriter
    from tunetracker.domain.ports.resolving import FallbackResolver
    from tunetracker.domain.reconciliation import ReconciliationResult

type SubsonicClientFactory = Callable[[], SubsonicClient]
type ResolverFactory = Callable[[SubsonicClient], FallbackResolver]
type WriterFactory = Callable[[SubsonicClient], PlaylistWriter]

log = getLogger(__name__)


class Destination(StrEnum):
    PLAYLIST = "playlist"
    FAVORITES = "favorites"


@dataclass(slots=True)
class TransferResult:
    """Outcome of a playlist transfer."""

    reconciliation: ReconciliationResult
    destination: Destination
    playlist_name: str
    playlist_id: str | None = None
    written: bool = False


def _default_subsonic_client() -> SubsonicClient:
    return SubsonicClient(config=get_subsonic_config(cache_predicate=should_cache_payload))


def _interactive_resolver_factory(timeout_seconds: float | None) -> ResolverFactory:
    def factory(client: SubsonicClient) -> FallbackResolver:
        return InteractiveResolver(client, timeout_seconds=timeout_seconds)

    return factory


def transfer_playlist(
    playlist: str,
    *,
    playlist_name: str | None = None,
    playlist_description: str | None = None,
    destination: Destination = Destination.PLAYLIST,
    interactive: bool = False,
    strategy: MatchStrategy | None = None,
    dry_run: bool = False,
    spotify_client: SpotifyClient | None = None,
    subsonic_client_factory: SubsonicClientFactory | None = None,
    resolver_factory: ResolverFactory | None = None,
    writer_factory: WriterFactory | None = None,
    sync_config: SyncConfig | None = None,
) -> TransferResult:
    """Copy a Spotify playlist into the Subsonic library using the configured adapters.

    ``interactive`` enables the prompt-based fallback resolver unless a
    ``resolver_factory`` is supplied, which always takes precedence.
    """

    playlist_id = parse_playlist_id(playlist)
    sync = sync_config or get_sync_config()
    spotify = spotify_client or SpotifyClient(config=get_spotify_config())

    try:
        name = playlist_name or spotify.playlist_details(playlist_id).name
        sources = fetch_playlist_tracks(
            playlist_id,
            client=spotify,
            batch_size=sync.playlist_batch_size,
        )
    except (spotipy.SpotifyException, ValidationError) as exc:
        msg = f"Spotify playlist {playlist_id} could not be read: {exc}"
        raise CatalogFetchError(msg) from exc

    if resolver_factory is None and interactive:
        resolver_factory = _interactive_resolver_factory(sync.resolver_timeout_seconds)

    log.info(
        "Starting transfer: playlist=%s, name=%r, destination=%s, strategy=%s, dry_run=%s",
        playlist_id,
        name,
        destination,
        strategy or sync.match_strategy,
        dry_run,
    )
    result = asyncio.run(
        _transfer_async(
            sources,
            name=name,
            comment=playlist_description or f"Imported from Spotify playlist {playlist_id}",
            destination=destination,
            strategy=strategy or sync.match_strategy,
            dry_run=dry_run,
            sync=sync,
            client_factory=subsonic_client_factory or _default_subsonic_client,
            resolver_factory=resolver_factory,
            writer_factory=writer_factory
            or partial(SubsonicPlaylistWriter, batch_size=sync.playlist_batch_size),
        )
    )

    reconciliation = result.reconciliation
    log.info(
        f"Finished transfer: resolved={reconciliation.resolved}/{reconciliation.total}, "
        f"automatic={reconciliation.matched_automatically}, "
        f"fallback={reconciliation.matched_by_fallback}, written={result.written}"
    )
    return result


async def _transfer_async(
    sources: list[Track],
    *,
    name: str,
    comment: str,
    destination: Destination,
    strategy: MatchStrategy,
    dry_run: bool,
    sync: SyncConfig,
    client_factory: SubsonicClientFactory,
    resolver_factory: ResolverFactory | None,
    writer_factory: WriterFactory,
) -> TransferResult:
    async with client_factory() as client:
        catalog = await fetch_library(client, page_size=sync.catalog_page_size)
        resolver = resolver_factory(client) if resolver_factory is not None else None
        reconciliation = await reconcile(sources, catalog, resolver, strategy=strategy)

        result = TransferResult(
            reconciliation=reconciliation,
            destination=destination,
            playlist_name=name,
        )
        if dry_run:
            log.info("Dry run: skipping write-back of %s tracks", reconciliation.resolved)
            return result

        writer = writer_factory(client)
        track_ids = [track.id for track in reconciliation.tracks]
        if destination is Destination.FAVORITES:
            await writer.add_favorites(track_ids)
        else:
            result.playlist_id = await writer.create_playlist(
                name=name,
                comment=comment,
                track_ids=track_ids,
            )
        result.written = True
        return result
