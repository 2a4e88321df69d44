"""Error taxonomy shared by the domain and its adapters."""

from __future__ import annotations

from typing import ClassVar


class InvalidTrackError(ValueError):
    """Raised when a raw record cannot be turned into a complete ``Track``."""


class SyncStageError(RuntimeError):
    """Fatal error that aborts a run, tagged with the stage that failed."""

    stage: ClassVar[str] = "sync"


class CatalogFetchError(SyncStageError):
    """Raised when the target catalog cannot be fetched in full."""

    stage = "fetch"


class PlaylistWriteError(SyncStageError):
    """Raised when the write-back to the target service fails."""

    stage = "write-back"


class ResolverError(RuntimeError):
    """Raised by a fallback resolver that cannot produce an answer."""
