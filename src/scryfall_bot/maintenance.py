"""
Periodic background jobs, such as the response-cache sweep.

A job is an :class:`asyncio.Task` owned by the running event loop. It never
keeps the process alive: shutting the loop down cancels it, and
:func:`shutdown` cancels it explicitly during a clean stop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

Job = Callable[[], Awaitable[None]]


async def startup(job: Job, interval: float, *, name: str = "maintenance") -> asyncio.Task:
    """
    Run ``job`` every ``interval`` seconds under the task name ``name``.

    The first run happens one interval after scheduling, so a freshly started
    cache is not swept immediately. A failing run is logged with the job name
    and the schedule carries on.
    """

    async def _every_interval() -> None:
        while True:
            await asyncio.sleep(interval)
            try:
                await job()
            except Exception:
                logger.exception("Background job %s failed; retrying in %ss", name, interval)

    logger.debug("Scheduling background job %s every %ss", name, interval)
    return asyncio.create_task(_every_interval(), name=name)


async def shutdown(task: asyncio.Task | None) -> None:
    """Cancel a job started with :func:`startup` and wait until it has stopped."""

    if task is None or task.done():
        return

    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        logger.debug("Background job %s stopped", task.get_name())
