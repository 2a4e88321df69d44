"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import PagedSearch, RecordTranslator
from .publishing import PlaylistWriter
from .resolving import FallbackResolver

__all__ = [
    "FallbackResolver",
    "PagedSearch",
    "PlaylistWriter",
    "RecordTranslator",
]
