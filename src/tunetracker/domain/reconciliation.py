"""Two-pass reconciliation of an ordered source sequence against a target catalog.

Pass 1 scans the catalog for every source track in order and picks a target track
the scorer accepts. Pass 2 (optional) hands every entry that is still unresolved to
a fallback resolver, strictly one at a time and in source order. Entries that stay
unresolved are dropped from the output, which otherwise keeps the source order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING

from tunetracker.domain.errors import ResolverError
from tunetracker.domain.matching import score
from tunetracker.domain.model import EntryStatus, MatchStrategy, Origin

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from tunetracker.domain.matching import MatchScore
    from tunetracker.domain.model import Track
    from tunetracker.domain.ports.resolving import FallbackResolver

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MatchEntry:
    """One source position; ``target`` stays ``None`` until something resolves it."""

    position: int
    source: Track
    target: Track | None = None
    status: EntryStatus = EntryStatus.UNRESOLVED

    @property
    def resolved(self) -> bool:
        return self.target is not None


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    entries: tuple[MatchEntry, ...]

    @property
    def tracks(self) -> tuple[Track, ...]:
        """Resolved target tracks in source order."""
        return tuple(entry.target for entry in self.entries if entry.target is not None)

    @property
    def unresolved(self) -> tuple[Track, ...]:
        return tuple(entry.source for entry in self.entries if entry.target is None)

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def resolved(self) -> int:
        return len(self.tracks)

    @property
    def matched_automatically(self) -> int:
        return sum(1 for entry in self.entries if entry.status is EntryStatus.MATCHED)

    @property
    def matched_by_fallback(self) -> int:
        return sum(1 for entry in self.entries if entry.status is EntryStatus.RESOLVED)


def find_match(
    source: Track,
    catalog: Iterable[Track],
    *,
    strategy: MatchStrategy = MatchStrategy.FIRST,
) -> Track | None:
    """Return the catalog track matching ``source`` according to ``strategy``.

    ``FIRST`` stops at the first accepted candidate in catalog order. ``BEST`` keeps
    every accepted candidate and returns the highest score, preferring candidates
    that carry an ISRC and then earlier catalog positions on ties.
    """

    best: tuple[tuple[int, int], Track] | None = None
    for target in catalog:
        result = score(source, target)
        if not result.accepted:
            continue
        _log_accepted(source, target, result)
        if strategy is MatchStrategy.FIRST:
            return target
        rank = (result.total, 1 if target.isrc else 0)
        if best is None or rank > best[0]:
            best = (rank, target)
    return best[1] if best is not None else None


def match_sources(
    sources: Iterable[Track],
    catalog: Iterable[Track],
    *,
    strategy: MatchStrategy = MatchStrategy.FIRST,
) -> list[MatchEntry]:
    """Pass 1: automatic matching, one entry per source track in source order."""

    candidates = tuple(catalog)
    entries: list[MatchEntry] = []
    for position, source in enumerate(sources):
        target = find_match(source, candidates, strategy=strategy)
        if target is None:
            log.debug("No automatic match for %s", source.label)
            entries.append(MatchEntry(position=position, source=source))
            continue
        entries.append(
            MatchEntry(
                position=position,
                source=source,
                target=target,
                status=EntryStatus.MATCHED,
            )
        )
    return entries


async def resolve_unmatched(
    entries: Sequence[MatchEntry],
    resolver: FallbackResolver,
) -> list[MatchEntry]:
    """Pass 2: ask ``resolver`` about each unresolved entry, sequentially and in order."""

    resolved_entries: list[MatchEntry] = []
    for entry in entries:
        if entry.resolved:
            resolved_entries.append(entry)
            continue
        try:
            target = await resolver(entry.source)
        except ResolverError as exc:
            log.warning("Fallback resolver failed for %s: %s", entry.source.label, exc)
            target = None
        if target is not None and target.origin is not Origin.TARGET:
            log.warning("Ignoring resolver answer for %s: not a target track", entry.source.label)
            target = None
        if target is None:
            resolved_entries.append(entry)
            continue
        resolved_entries.append(replace(entry, target=target, status=EntryStatus.RESOLVED))
    return resolved_entries


async def reconcile(
    sources: Iterable[Track],
    catalog: Iterable[Track],
    resolver: FallbackResolver | None = None,
    *,
    strategy: MatchStrategy = MatchStrategy.FIRST,
) -> ReconciliationResult:
    """Map ``sources`` onto ``catalog``; unresolved entries are dropped from ``tracks``."""

    entries = match_sources(sources, catalog, strategy=strategy)
    unresolved = sum(1 for entry in entries if not entry.resolved)
    log.info(
        "Automatic matching finished: matched=%s, unresolved=%s",
        len(entries) - unresolved,
        unresolved,
    )

    if resolver is not None and unresolved:
        entries = await resolve_unmatched(entries, resolver)

    result = ReconciliationResult(entries=tuple(entries))
    for source in result.unresolved:
        log.info("Dropping unresolved track: %s", source.label)
    return result


def _log_accepted(source: Track, target: Track, result: MatchScore) -> None:
    log.debug(
        "[%s] %s matches %s (isrc=%s, album=%s, title=%s, year=%s, artist=%s, "
        "duration=%s, track_number=%s)",
        result.total,
        source.label,
        target.label,
        result.isrc_match,
        result.album,
        result.title,
        result.year,
        result.artist,
        result.duration,
        result.track_number,
    )


__all__ = [
    "MatchEntry",
    "ReconciliationResult",
    "find_match",
    "match_sources",
    "reconcile",
    "resolve_unmatched",
]
