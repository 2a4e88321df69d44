"""Ports for writing reconciled tracks back to the target service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tunetracker.domain.model import TrackId


@runtime_checkable
class PlaylistWriter(Protocol):
    """Write-back capability; failures surface as ``PlaylistWriteError``."""

    async def create_playlist(
        self,
        *,
        name: str,
        comment: str,
        track_ids: Sequence[TrackId],
    ) -> str:
        """Create a playlist holding ``track_ids`` in order and return its id."""
        ...

    async def add_favorites(self, track_ids: Sequence[TrackId]) -> None: ...


__all__ = ["PlaylistWriter"]
