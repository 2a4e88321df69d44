from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.tracks import make_target, make_track
from tunetracker.domain.matching import (
    MATCH_THRESHOLD,
    duration_similarity,
    matches,
    score,
    text_similarity,
)

if TYPE_CHECKING:
    from tunetracker.domain.model import Track


def _wanton_song_pair(*, isrc: str | None) -> tuple[Track, Track]:
    source = make_track(
        "The Wanton Song - Remaster",
        artist="Led Zeppelin",
        album="Physical Graffiti (Remaster)",
        duration=248,
        track_number=6,
        disc_number=2,
        year=1975,
        isrc=isrc,
    )
    target = make_target(
        "The Wanton Song",
        artist="Led Zeppelin",
        album="Physical Graffiti",
        duration=249,
        track_number=12,
        disc_number=2,
        year=1995,
        isrc=isrc,
    )
    return source, target


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("Kashmir", "kashmir", 20),
        ("Physical Graffiti (Remaster)", "Physical Graffiti", 10),
        ("Physical Graffiti", "physical graffiti (deluxe edition)", 10),
        ("Houses of the Holy", "Presence", 0),
        ("", "", 20),
    ],
)
def test_text_similarity(left: str, right: str, expected: int) -> None:
    assert text_similarity(left, right) == expected


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [(200, 200, 20), (200, 203, 10), (203, 200, 10), (200, 204, 0)],
)
def test_duration_similarity(left: int, right: int, expected: int) -> None:
    assert duration_similarity(left, right) == expected


@pytest.mark.parametrize(("track_number", "disc_number"), [(1, 1), (7, 2), (0, 0)])
def test_identical_metadata_matches_regardless_of_numbering(
    track_number: int, disc_number: int
) -> None:
    source = make_track("Kashmir", artist="Led Zeppelin", album="Physical Graffiti", year=1975)
    target = make_target(
        "kashmir",
        artist="LED ZEPPELIN",
        album="Physical Graffiti",
        year=1975,
        track_number=track_number + 3,
        disc_number=disc_number,
    )

    assert matches(source, target)


def test_album_suffix_scores_partial_points() -> None:
    source = make_track(album="Physical Graffiti (Remaster)")
    target = make_target(album="Physical Graffiti")

    assert score(source, target).album == 10


def test_isrc_short_circuit_ignores_other_signals() -> None:
    source = make_track(
        "Trampled Under Foot",
        artist="Led Zeppelin",
        album="Physical Graffiti (Remaster)",
        duration=335,
        year=1975,
        isrc="GBAHT0500600",
    )
    target = make_target(
        "Trampled Underfoot",
        artist="Zeppelin, Led",
        album="Physical Graffiti",
        duration=400,
        year=2015,
        track_number=9,
        isrc="GBAHT0500600",
    )

    result = score(source, target)

    assert result.total < MATCH_THRESHOLD
    assert result.isrc_match
    assert matches(source, target)


def test_isrc_requires_album_agreement() -> None:
    source = make_track("Song", album="Greatest Hits", isrc="USRC17607839", duration=100)
    target = make_target("Other", album="Summer Compilation", isrc="USRC17607839", duration=300)

    assert not score(source, target).isrc_match
    assert not matches(source, target)


def test_missing_isrc_never_short_circuits() -> None:
    source = make_track("Song", album="Album", duration=100, isrc=None)
    target = make_target("Other", album="Album", duration=300, isrc=None)

    assert not score(source, target).isrc_match


@pytest.mark.parametrize("disc_number", [0, 2, 3])
def test_track_number_ignored_off_first_disc(disc_number: int) -> None:
    source = make_track(track_number=4, disc_number=disc_number)
    target = make_target(track_number=4, disc_number=disc_number)

    assert score(source, target).track_number == 0


def test_track_number_counts_on_first_disc() -> None:
    source = make_track(track_number=4, disc_number=1)
    target = make_target(track_number=4, disc_number=1)

    assert score(source, target).track_number == 20


def test_wanton_song_without_isrc_is_rejected() -> None:
    source, target = _wanton_song_pair(isrc=None)

    result = score(source, target)

    assert (result.album, result.title, result.artist, result.duration) == (10, 10, 20, 10)
    assert result.year == 0
    assert result.track_number == 0
    assert result.total == 50
    assert not matches(source, target)


def test_wanton_song_with_isrc_is_accepted() -> None:
    source, target = _wanton_song_pair(isrc="GBAHT0500595")

    assert score(source, target).total == 50
    assert matches(source, target)


def test_threshold_is_inclusive() -> None:
    # artist 20 + duration 20 + year 10 + album 20 = 70
    source = make_track("A", artist="X", album="Album", duration=100, year=2000, disc_number=2)
    target = make_target("B", artist="x", album="album", duration=100, year=2000)

    assert score(source, target).total == MATCH_THRESHOLD
    assert matches(source, target)
