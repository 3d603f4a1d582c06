"""Collapse concurrent identical reads into one underlying fetch.

The first caller for a key starts the fetch as a task; callers arriving
within window_seconds await the same task. An entry is dropped when its
task finishes, or replaced once it is older than the window so a hung
fetch is not served forever. Advisory only: disabled means every call
runs its own fetch.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class _InFlight:
    task: asyncio.Future[Any]
    started_at: float


class RequestDeduplicator:
    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        window_seconds: float = 5.0,
        enabled: bool = True,
    ) -> None:
        self._clock = clock
        self._window_seconds = window_seconds
        self._enabled = enabled
        self._in_flight: dict[str, _InFlight] = {}

    @property
    def enabled(self) -> bool:
        return self._enabled

    def pending_count(self) -> int:
        return len(self._in_flight)

    async def run(self, key: str, fetch: Callable[[], Awaitable[T]]) -> T:
        if not self._enabled:
            return await fetch()

        now = self._clock()
        entry = self._in_flight.get(key)
        if entry is not None and now - entry.started_at < self._window_seconds:
            logger.debug("Joining in-flight request %s", key)
            return await asyncio.shield(entry.task)

        if entry is not None:
            logger.debug("Replacing stale in-flight request %s", key)
        task = asyncio.ensure_future(fetch())
        fresh = _InFlight(task=task, started_at=now)
        self._in_flight[key] = fresh
        task.add_done_callback(lambda t: self._on_done(key, fresh, t))
        # Shield so one cancelled caller does not cancel the fetch for the others.
        return await asyncio.shield(task)

    def _on_done(self, key: str, entry: _InFlight, task: asyncio.Future[Any]) -> None:
        if self._in_flight.get(key) is entry:
            del self._in_flight[key]
        if not task.cancelled():
            # Mark retrieved; waiters re-raise it themselves.
            task.exception()
