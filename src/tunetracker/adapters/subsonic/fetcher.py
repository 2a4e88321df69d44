"""Assemble the full Subsonic library as the target catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tunetracker.domain.catalog import fetch_all

from .client import SEARCH_PAGE_SIZE
from .translator import translate_song

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tunetracker.domain.catalog import TargetCatalog

    from .client import SubsonicClient


async def fetch_library(
    client: SubsonicClient,
    *,
    page_size: int = SEARCH_PAGE_SIZE,
) -> TargetCatalog:
    """Fetch every song of the library through ``search3`` paging."""

    async def search(offset: int) -> Sequence[dict[str, Any]]:
        return await client.search_songs(offset, count=page_size)

    return await fetch_all(search, translate=translate_song, page_size=page_size)
