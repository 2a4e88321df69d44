"""Port for resolving source tracks that automatic matching left unresolved."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tunetracker.domain.model import Track


@runtime_checkable
class FallbackResolver(Protocol):
    """Supply a target track for ``unmatched`` or ``None``.

    Implementations may block for as long as they need (for example on user input)
    and raise ``ResolverError`` when the answer they obtained is unusable.
    """

    async def __call__(self, unmatched: Track) -> Track | None: ...


__all__ = ["FallbackResolver"]
