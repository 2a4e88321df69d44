"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Origin(StrEnum):
    """Catalog a track record was read from."""

    SOURCE = "source"
    TARGET = "target"


class MatchStrategy(StrEnum):
    FIRST = "first"
    BEST = "best"


class EntryStatus(StrEnum):
    MATCHED = "matched"
    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
