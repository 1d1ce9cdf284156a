"""Global pacing for outbound Scryfall requests."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)


class FetchGate:
    """
    Space outbound calls at least ``min_delay`` seconds apart.

    One clock is shared by every caller. No lock is held while waiting, so
    callers racing through :meth:`acquire` at the same moment may both compute
    a similar wait and proceed close together.
    """

    def __init__(
        self,
        min_delay: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.min_delay = max(0.0, min_delay)
        self._clock = clock
        self._sleep = sleep
        self._last_request: float | None = None

    @property
    def last_request_time(self) -> float | None:
        return self._last_request

    async def acquire(self) -> None:
        """Suspend until the minimum spacing since the last call has passed."""
        if self._last_request is not None and self.min_delay > 0:
            elapsed = self._clock() - self._last_request
            if elapsed < self.min_delay:
                delay = self.min_delay - elapsed
                logger.debug("Throttling outbound request for %.3fs", delay)
                await self._sleep(delay)

        self._last_request = self._clock()
