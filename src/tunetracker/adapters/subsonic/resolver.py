"""Interactive fallback resolver backed by Subsonic song lookups."""

from __future__ import annotations

import asyncio
import queue
import threading
from concurrent.futures import Future
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from tunetracker.domain.errors import InvalidTrackError, ResolverError

from .client import SubsonicAPIError
from .translator import translate_song

if TYPE_CHECKING:
    from collections.abc import Callable

    from tunetracker.domain.model import Track

    from .client import SubsonicClient

log = getLogger(__name__)

type Prompt = Callable[[str], str]


class PromptReader:
    """One daemon thread that owns the input channel.

    Requests are served strictly one after another, so at most one ``prompt`` call is
    ever reading. The thread is a daemon because a prompt nobody answers must not keep
    the process alive at exit.
    """

    def __init__(self, prompt: Prompt) -> None:
        self._prompt = prompt
        self._requests: queue.SimpleQueue[tuple[str, Future[str]]] = queue.SimpleQueue()
        self._thread: threading.Thread | None = None

    def ask(self, message: str) -> Future[str]:
        if self._thread is None:
            self._thread = threading.Thread(
                target=self._serve, name="tunetracker-prompt", daemon=True
            )
            self._thread.start()
        answer: Future[str] = Future()
        self._requests.put((message, answer))
        return answer

    def _serve(self) -> None:
        while True:
            message, answer = self._requests.get()
            if not answer.set_running_or_notify_cancel():
                continue
            try:
                line = self._prompt(message)
            except Exception as exc:  # noqa: BLE001
                answer.set_exception(exc)
            else:
                answer.set_result(line)


class InteractiveResolver:
    """Ask for a Subsonic song id for every unmatched track.

    A blank answer skips the track; an id the server does not know raises
    ``ResolverError``. With ``timeout_seconds`` set, an unanswered prompt counts as
    skipped. The prompt stays open after a timeout and whatever is typed next
    answers the track being resolved at that moment; an answer that arrives while no
    track is waiting is discarded.
    """

    def __init__(
        self,
        client: SubsonicClient,
        *,
        prompt: Prompt = input,
        timeout_seconds: float | None = None,
    ) -> None:
        self._client = client
        self._reader = PromptReader(prompt)
        self._timeout_seconds = timeout_seconds
        self._pending: Future[str] | None = None

    async def __call__(self, unmatched: Track) -> Track | None:
        answer = await self._ask(
            f"No match for {unmatched.label}. Enter a song id (blank to skip): ",
            unmatched,
        )
        if answer is None:
            return None
        song_id = answer.strip()
        if not song_id:
            log.info("Skipped %s", unmatched.label)
            return None

        try:
            payload = await self._client.get_song(song_id)
        except (SubsonicAPIError, httpx.HTTPError) as exc:
            raise ResolverError(f"Song {song_id} could not be fetched: {exc}") from exc
        try:
            track = translate_song(payload)
        except InvalidTrackError as exc:
            raise ResolverError(f"Song {song_id} is incomplete: {exc}") from exc

        log.info("Resolved %s to %s", unmatched.label, track.label)
        return track

    async def _ask(self, message: str, unmatched: Track) -> str | None:
        pending = self._open_prompt(message, unmatched)
        try:
            async with asyncio.timeout(self._timeout_seconds):
                answer = await asyncio.shield(asyncio.wrap_future(pending))
        except TimeoutError:
            log.warning("No answer within %ss, skipping", self._timeout_seconds)
            return None
        except EOFError as exc:
            self._pending = None
            raise ResolverError("Input stream closed") from exc
        self._pending = None
        return answer

    def _open_prompt(self, message: str, unmatched: Track) -> Future[str]:
        pending = self._pending
        if pending is not None and pending.done():
            if pending.exception() is None:
                log.info("Discarding late answer %r", pending.result())
            pending = None
        if pending is None:
            pending = self._reader.ask(message)
        else:
            log.warning("Still waiting for input; the next answer is for %s", unmatched.label)
        self._pending = pending
        return pending
