"""Ports for fetching catalogs from external providers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tunetracker.domain.model import Track


@runtime_checkable
class PagedSearch[RawT](Protocol):
    """Offset-paged search over a remote catalog; an empty page means exhaustion."""

    async def __call__(self, offset: int) -> Sequence[RawT]: ...


class RecordTranslator[RawT](Protocol):
    """Turn a raw provider record into a ``Track`` or raise ``InvalidTrackError``."""

    def __call__(self, record: RawT, /) -> Track: ...


__all__ = ["PagedSearch", "RecordTranslator"]
