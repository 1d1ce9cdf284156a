"""
In-process cache for Scryfall responses.

Entries expire ``ttl`` seconds after they were written, whatever their access
pattern. With ``max_items > 0`` the store is also capacity bounded: inserting
a new key into a full store first evicts the entry with the oldest
``last_accessed_at`` (a linear scan; the key space is bounded by the variety
of card queries, not by request volume).

Expired entries are removed lazily by :meth:`TTLCache.get` and eagerly by the
periodic :meth:`TTLCache.sweep`.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from scryfall_bot import maintenance

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(slots=True)
class CacheEntry:
    """A cached payload plus its write and last-read timestamps."""

    key: str
    value: Any
    written_at: float
    last_accessed_at: float

    def age(self, now: float) -> float:
        return now - self.written_at


class TTLCache:
    """Key/value store with TTL expiry and least-recently-accessed eviction."""

    def __init__(self, ttl: float, max_items: int = 0, clock: Clock = time.monotonic) -> None:
        self.ttl = ttl
        self.max_items = max(0, max_items)
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}
        self._sweeper: asyncio.Task | None = None

    # ------------------------------------------------------------------ #
    # Read / write
    # ------------------------------------------------------------------ #

    def get(self, key: str) -> Any | None:
        """
        Return the value for ``key``, or ``None`` if missing or expired.

        A hit refreshes the entry's access time. An expired entry is removed.
        """
        entry = self._store.get(key)
        if entry is None:
            return None

        now = self._clock()
        if entry.age(now) > self.ttl:
            del self._store[key]
            logger.debug("Cache entry %s expired on read", key)
            return None

        entry.last_accessed_at = now
        return entry.value

    def set(self, key: str, value: Any) -> None:
        """
        Insert or overwrite ``key``.

        When the store is already at capacity the least recently accessed
        entry is evicted first, even if ``key`` itself is being overwritten.
        """
        if self.max_items and len(self._store) >= self.max_items:
            self.evict_oldest()

        now = self._clock()
        self._store[key] = CacheEntry(key=key, value=value, written_at=now, last_accessed_at=now)

    def evict_oldest(self) -> str | None:
        """Evict the least recently accessed entry and return its key."""
        if not self._store:
            return None

        oldest = min(self._store.values(), key=lambda e: e.last_accessed_at)
        del self._store[oldest.key]
        logger.info("Evicting least recently accessed cache entry: %s", oldest.key)
        return oldest.key

    def sweep(self) -> int:
        """
        Drop every entry older than the TTL, then trim to capacity.

        Returns the number of entries removed.
        """
        now = self._clock()
        expired = [key for key, entry in self._store.items() if entry.age(now) > self.ttl]
        for key in expired:
            del self._store[key]

        removed = len(expired)
        if self.max_items:
            while len(self._store) > self.max_items:
                self.evict_oldest()
                removed += 1

        logger.info("Cache sweep removed %d entr%s (%d remaining)", removed, "y" if removed == 1 else "ies", len(self._store))
        return removed

    # ------------------------------------------------------------------ #
    # Inspection helpers
    # ------------------------------------------------------------------ #

    def entry(self, key: str) -> CacheEntry | None:
        """Return the raw entry without touching its access time or expiry."""
        return self._store.get(key)

    def delete(self, key: str) -> bool:
        return self._store.pop(key, None) is not None

    def clear(self) -> None:
        self._store.clear()

    def keys(self) -> list[str]:
        return list(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._store))

    # ------------------------------------------------------------------ #
    # Background sweep
    # ------------------------------------------------------------------ #

    async def start_sweeper(self, interval: float) -> asyncio.Task:
        """Run :meth:`sweep` every ``interval`` seconds until stopped."""
        if self._sweeper and not self._sweeper.done():
            return self._sweeper

        async def _cycle() -> None:
            self.sweep()

        logger.info("Starting cache sweeper (interval=%ss, ttl=%ss, max_items=%d)", interval, self.ttl, self.max_items)
        self._sweeper = await maintenance.startup(_cycle, interval, name="cache-sweeper")
        return self._sweeper

    async def stop_sweeper(self) -> None:
        await maintenance.shutdown(self._sweeper)
        self._sweeper = None
