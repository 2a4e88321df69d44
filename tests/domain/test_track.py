from __future__ import annotations

import pytest

from tests.helpers.tracks import make_track
from tunetracker.domain.errors import InvalidTrackError


def test_track_is_immutable() -> None:
    track = make_track()

    with pytest.raises(AttributeError):
        track.title = "Changed"  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"track_id": ""},
        {"duration": -1},
        {"track_number": -1},
        {"disc_number": -2},
    ],
)
def test_invalid_tracks_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(InvalidTrackError):
        make_track(**overrides)  # type: ignore[arg-type]


def test_zero_numbers_are_allowed() -> None:
    track = make_track(track_number=0, disc_number=0, duration=0)

    assert track.track_number == 0
    assert track.disc_number == 0


def test_label_names_artist_title_and_album() -> None:
    track = make_track("Kashmir", artist="Led Zeppelin", album="Physical Graffiti")

    assert track.label == "Led Zeppelin - Kashmir (Physical Graffiti)"
