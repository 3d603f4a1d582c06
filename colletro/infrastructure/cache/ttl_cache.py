"""In-process TTL cache with an injected clock.

Entries expire ttl seconds after they are set. When the cache is full,
the oldest 10% of entries (by set time) are evicted before inserting.
State lives on the instance, so tests build their own cache and clock.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

EVICT_FRACTION = 0.1


@dataclass
class _Entry:
    value: Any
    stored_at: float
    expires_at: float


class InMemoryTTLCache:
    """Implements CacheProtocol over a dict."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        default_ttl: float = 30.0,
        max_size: int = 1000,
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._clock = clock
        self._default_ttl = default_ttl
        self._max_size = max_size
        # Insertion order is set order: set() pops before re-inserting.
        self._entries: dict[str, _Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def is_available(self) -> bool:
        return True

    async def get(self, key: str) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() > entry.expires_at:
            del self._entries[key]
            return None
        return entry.value

    async def set(self, key: str, value: Any, ttl: float | None = None) -> bool:
        self._entries.pop(key, None)
        if len(self._entries) >= self._max_size:
            self._evict_oldest()
        now = self._clock()
        self._entries[key] = _Entry(
            value=value,
            stored_at=now,
            expires_at=now + (self._default_ttl if ttl is None else ttl),
        )
        return True

    async def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def clean_expired(self) -> int:
        """Drop every expired entry; return how many were removed."""
        now = self._clock()
        expired = [k for k, e in self._entries.items() if now > e.expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def _evict_oldest(self) -> None:
        count = max(1, int(self._max_size * EVICT_FRACTION))
        for key in list(self._entries)[:count]:
            del self._entries[key]
        logger.debug("TTL cache full; evicted %d oldest entries", count)
