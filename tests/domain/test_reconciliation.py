from __future__ import annotations

import asyncio

from tests.helpers.tracks import ScriptedResolver, make_target, make_track
from tunetracker.domain.catalog import TargetCatalog
from tunetracker.domain.errors import ResolverError
from tunetracker.domain.model import EntryStatus, MatchStrategy, Track
from tunetracker.domain.reconciliation import find_match, match_sources, reconcile


def _catalog() -> TargetCatalog:
    return TargetCatalog.from_tracks(
        [
            make_target("Kashmir", artist="Led Zeppelin", album="Physical Graffiti", duration=508),
            make_target(
                "Custard Pie", artist="Led Zeppelin", album="Physical Graffiti", duration=253
            ),
            make_target("Black Dog", artist="Led Zeppelin", album="IV", duration=296),
        ]
    )


def _sources() -> list[Track]:
    return [
        make_track("Black Dog", artist="Led Zeppelin", album="IV", duration=295, track_id="sp-1"),
        make_track("Unknown Song", artist="Nobody", album="Nowhere", duration=10, track_id="sp-2"),
        make_track(
            "Kashmir",
            artist="Led Zeppelin",
            album="Physical Graffiti",
            duration=508,
            track_id="sp-3",
        ),
        make_track("Another Miss", artist="Nobody", album="Else", duration=20, track_id="sp-4"),
    ]


def test_reconcile_drops_unmatched_and_keeps_order() -> None:
    result = asyncio.run(reconcile(_sources(), _catalog()))

    assert [track.title for track in result.tracks] == ["Black Dog", "Kashmir"]
    assert result.total == 4
    assert result.resolved == 2
    assert result.matched_automatically == 2
    assert result.matched_by_fallback == 0
    assert [track.id for track in result.unresolved] == ["sp-2", "sp-4"]


def test_reconcile_is_idempotent_without_resolver() -> None:
    sources, catalog = _sources(), _catalog()

    first = asyncio.run(reconcile(sources, catalog))
    second = asyncio.run(reconcile(sources, catalog))

    assert first == second


def test_reconcile_output_is_subsequence_of_sources() -> None:
    catalog = _catalog()
    sources = _sources() * 2

    result = asyncio.run(reconcile(sources, catalog))

    positions = [entry.position for entry in result.entries if entry.resolved]
    assert positions == sorted(positions)
    assert len(result.tracks) <= len(sources)


def test_resolver_called_in_order_for_unmatched_only() -> None:
    replacement = make_target("Found It", track_id="manual-1")
    resolver = ScriptedResolver(answers={"sp-2": replacement})

    result = asyncio.run(reconcile(_sources(), _catalog(), resolver))

    assert resolver.calls == ["sp-2", "sp-4"]
    assert [track.title for track in result.tracks] == ["Black Dog", "Found It", "Kashmir"]
    assert result.matched_by_fallback == 1
    assert result.entries[1].status is EntryStatus.RESOLVED
    assert result.entries[3].status is EntryStatus.UNRESOLVED


def test_resolver_not_called_when_everything_matches() -> None:
    resolver = ScriptedResolver()
    sources = [_sources()[0]]

    result = asyncio.run(reconcile(sources, _catalog(), resolver))

    assert resolver.calls == []
    assert result.resolved == 1


def test_resolver_errors_count_as_no_resolution() -> None:
    resolver = ScriptedResolver(
        answers={"sp-2": ResolverError("no such song"), "sp-4": make_target("Late", track_id="x")}
    )

    result = asyncio.run(reconcile(_sources(), _catalog(), resolver))

    assert resolver.calls == ["sp-2", "sp-4"]
    assert [track.title for track in result.tracks] == ["Black Dog", "Kashmir", "Late"]


def test_resolver_answers_from_source_catalog_are_ignored() -> None:
    resolver = ScriptedResolver(answers={"sp-2": make_track("Wrong side", track_id="sp-9")})

    result = asyncio.run(reconcile(_sources(), _catalog(), resolver))

    assert result.matched_by_fallback == 0
    assert result.resolved == 2


def test_first_strategy_takes_first_accepted_candidate() -> None:
    source = make_track("Song", album="Album", isrc="ISRC1")
    weaker = make_target("Song", album="Album (Deluxe)", track_id="weak", year=1990)
    stronger = make_target("Song", album="Album", track_id="strong", isrc="ISRC1")

    assert find_match(source, [weaker, stronger]) is weaker
    assert find_match(source, [weaker, stronger], strategy=MatchStrategy.BEST) is stronger


def test_best_strategy_prefers_isrc_then_catalog_order() -> None:
    source = make_track("Song", album="Album")
    plain = make_target("Song", album="Album", track_id="plain")
    tagged = make_target("Song", album="Album", track_id="tagged", isrc="ISRC2")
    twin = make_target("Song", album="Album", track_id="twin")

    assert find_match(source, [plain, tagged], strategy=MatchStrategy.BEST) is tagged
    assert find_match(source, [plain, twin], strategy=MatchStrategy.BEST) is plain


def test_match_sources_without_catalog_leaves_everything_unresolved() -> None:
    entries = match_sources(_sources(), [])

    assert [entry.position for entry in entries] == [0, 1, 2, 3]
    assert not any(entry.resolved for entry in entries)
