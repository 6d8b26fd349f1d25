"""Scheduled refresh with an explicit lifetime."""

import asyncio
import contextlib
from typing import Any, Awaitable, Callable, Optional

import structlog

from gestio.service.aggregation.settings import aggregation_settings

logger = structlog.get_logger(__name__)


class RefreshScheduler:
    """
    Runs a coroutine function every `interval` seconds in a background task.

    The first run happens one interval after `start()`. Use as an async
    context manager to tie the schedule to a scope:

        async with repo.auto_refresh(interval=30):
            ...
    """

    def __init__(
        self,
        refresh: Callable[[], Awaitable[Any]],
        interval: Optional[float] = None,
        name: str = "refresh",
    ):
        self._refresh = refresh
        self._interval = (
            interval if interval is not None else aggregation_settings.refresh_interval_seconds
        )
        if self._interval <= 0:
            raise ValueError("interval must be positive")
        self._name = name
        self._task: Optional[asyncio.Task] = None
        self.runs = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the schedule. Calling start on a running scheduler is a no-op."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name=self._name)
        logger.info("refresh_started", name=self._name, interval=self._interval)

    async def stop(self) -> None:
        """Cancel the schedule and wait for the task to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("refresh_stopped", name=self._name, runs=self.runs)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self._refresh()
            except Exception as e:
                logger.error("refresh_failed", name=self._name, error=str(e))
            self.runs += 1

    async def __aenter__(self) -> "RefreshScheduler":
        self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()
