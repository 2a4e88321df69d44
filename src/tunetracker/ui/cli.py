from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from tunetracker.app import Destination, transfer_playlist
from tunetracker.config import ConfigurationError, configure_logging
from tunetracker.domain.errors import SyncStageError
from tunetracker.domain.model import MatchStrategy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from tunetracker.app import TransferResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tunetracker",
        description="Copy a Spotify playlist into a Subsonic library",
    )
    parser.add_argument(
        "--playlist",
        type=str,
        required=True,
        help="Spotify playlist id, URI or open.spotify.com URL",
    )
    parser.add_argument(
        "--playlist-name",
        type=str,
        help="Name of the playlist to create (defaults to the Spotify playlist name)",
    )
    parser.add_argument(
        "--playlist-description",
        type=str,
        help="Comment stored on the created playlist",
    )
    parser.add_argument(
        "--favorites",
        action="store_true",
        help="Star the matched songs instead of creating a playlist",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for a song id for every track that could not be matched",
    )
    parser.add_argument(
        "--strategy",
        type=MatchStrategy,
        choices=list(MatchStrategy),
        default=None,
        help="Pick the first accepted candidate or the best scoring one (default: first)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Match only, do not write anything to the Subsonic server",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log match score breakdowns and skipped records",
    )
    return parser.parse_args(list(argv))


def _report(result: TransferResult) -> None:
    reconciliation = result.reconciliation
    for track in reconciliation.unresolved:
        log.warning("Not found: %s", track.label)
    log.info(
        "Matched %s of %s tracks (%s automatically, %s manually)",
        reconciliation.resolved,
        reconciliation.total,
        reconciliation.matched_automatically,
        reconciliation.matched_by_fallback,
    )
    if result.playlist_id is not None:
        log.info("Created playlist %r with id %s", result.playlist_name, result.playlist_id)
    elif result.written and result.destination is Destination.FAVORITES:
        log.info("Added %s tracks to favorites", reconciliation.resolved)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        result = transfer_playlist(
            parsed_args.playlist,
            playlist_name=parsed_args.playlist_name,
            playlist_description=parsed_args.playlist_description,
            destination=Destination.FAVORITES if parsed_args.favorites else Destination.PLAYLIST,
            interactive=parsed_args.interactive,
            strategy=parsed_args.strategy,
            dry_run=parsed_args.dry_run,
        )
    except (ValueError, ConfigurationError):
        log.exception("Invalid input")
        sys.exit(2)
    except SyncStageError as exc:
        log.error("Transfer failed during %s: %s", exc.stage, exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during transfer")
        sys.exit(1)

    _report(result)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
