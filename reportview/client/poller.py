"""Report list poller: refreshes while any report is still processing."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from reportview.client.reports import ReportClient, ReportStats
from reportview.config import settings

logger = logging.getLogger(__name__)

ReportsCallback = Callable[[list[dict], ReportStats], Awaitable[None] | None]


class ReportPoller:
    """Background task that lists reports every ``interval`` seconds.

    The task ends by itself once no report is processing. ``stop()`` cancels
    it early, e.g. when the session is torn down.
    """

    def __init__(
        self,
        client: ReportClient,
        on_update: ReportsCallback,
        interval: float | None = None,
    ) -> None:
        self.client = client
        self.on_update = on_update
        self.interval = interval if interval is not None else settings.poll_interval
        self.last_error: Exception | None = None
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Start polling; calling it while already running is a no-op."""
        if self.running:
            return self._task
        self.last_error = None
        self._task = asyncio.create_task(self._run())
        logger.info("Report polling started (every %.1fs)", self.interval)
        return self._task

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Report polling stopped")

    async def _run(self) -> None:
        while True:
            try:
                reports = await self.client.list_reports()
            except Exception as exc:
                self.last_error = exc
                logger.exception("Report poll failed; stopping")
                return

            stats = ReportStats.from_reports(reports)
            result = self.on_update(reports, stats)
            if asyncio.iscoroutine(result):
                await result

            if not stats.any_processing:
                logger.info("No reports processing; polling finished")
                return

            logger.debug("%d report(s) processing, next poll in %.1fs", stats.processing, self.interval)
            await asyncio.sleep(self.interval)
