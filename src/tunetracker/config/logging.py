"""Shared logging helpers for TuneTracker."""

from __future__ import annotations

import logging

QUIET_LOGGERS = ("httpx", "httpcore", "hishel", "spotipy", "urllib3")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for CLI output. Pass ``force=True`` to
    reconfigure during tests or specialised entry points. Chatty HTTP libraries are
    held at WARNING unless DEBUG output was requested.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    library_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
