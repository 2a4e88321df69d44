"""Assemble the complete target catalog from an offset-paged search."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from tunetracker.domain.errors import CatalogFetchError, InvalidTrackError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tunetracker.domain.model import Track, TrackId
    from tunetracker.domain.ports.fetching import PagedSearch, RecordTranslator

log = getLogger(__name__)

DEFAULT_PAGE_SIZE: Final[int] = 20


@dataclass(frozen=True, slots=True)
class TargetCatalog:
    """Read-only catalog; iteration follows fetch order (first page first)."""

    tracks: tuple[Track, ...] = ()
    _by_id: Mapping[TrackId, Track] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_id: dict[TrackId, Track] = {}
        for track in self.tracks:
            by_id.setdefault(track.id, track)
        object.__setattr__(self, "_by_id", MappingProxyType(by_id))

    @classmethod
    def from_tracks(cls, tracks: Iterable[Track]) -> TargetCatalog:
        """Build a catalog, keeping the first occurrence of every id."""

        seen: set[TrackId] = set()
        unique: list[Track] = []
        for track in tracks:
            if track.id in seen:
                continue
            seen.add(track.id)
            unique.append(track)
        return cls(tracks=tuple(unique))

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    def __len__(self) -> int:
        return len(self.tracks)

    def __contains__(self, track_id: object) -> bool:
        return track_id in self._by_id

    def get(self, track_id: TrackId) -> Track | None:
        return self._by_id.get(track_id)


async def fetch_all[RawT](
    paged_search: PagedSearch[RawT],
    *,
    translate: RecordTranslator[RawT],
    page_size: int = DEFAULT_PAGE_SIZE,
) -> TargetCatalog:
    """Page through ``paged_search`` until it returns an empty page.

    Records that fail translation are dropped. Any error raised by the search
    itself aborts the fetch with ``CatalogFetchError``; a partial catalog is never
    returned.
    """

    if page_size <= 0:
        raise ValueError("Page size must be positive")

    tracks: list[Track] = []
    offset = 0
    dropped = 0
    while True:
        try:
            records = await paged_search(offset)
        except Exception as exc:
            raise CatalogFetchError(f"Catalog search failed at offset {offset}: {exc}") from exc

        if not records:
            break

        for record in records:
            try:
                tracks.append(translate(record))
            except InvalidTrackError as exc:
                dropped += 1
                log.debug("Dropping invalid catalog record: %s", exc)
        offset += page_size

    catalog = TargetCatalog.from_tracks(tracks)
    log.info(
        "Fetched target catalog: tracks=%s, dropped=%s, pages=%s",
        len(catalog),
        dropped,
        offset // page_size,
    )
    return catalog


__all__ = ["DEFAULT_PAGE_SIZE", "TargetCatalog", "fetch_all"]
