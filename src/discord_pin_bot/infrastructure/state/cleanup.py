"""Periodic sweep of expired voting sessions."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from discord_pin_bot.domain.shared.datetime_utils import utcnow
from discord_pin_bot.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...config.settings import VotingSettings
    from ...domain.voting.repository import VotingSessionStore

logger = logging.getLogger(__name__)


class SessionSweepJob:
    def __init__(
        self,
        *,
        session_store: VotingSessionStore,
        settings: VotingSettings,
    ) -> None:
        self._store = session_store
        self._settings = settings
        self._running = False
        self._task: asyncio.Task | None = None

    def start(self) -> None:
        if self._running:
            logger.warning(LogTemplates.SWEEP_ALREADY_RUNNING)
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(
            LogTemplates.SWEEP_STARTED,
            self._settings.sweep_interval_seconds,
            self._settings.session_max_age_seconds,
        )

    async def stop(self) -> None:
        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info(LogTemplates.SWEEP_STOPPED)

    async def _run_loop(self) -> None:
        interval_seconds = self._settings.sweep_interval_seconds

        while self._running:
            # First sweep waits one interval; nothing can be stale at startup.
            try:
                await asyncio.sleep(interval_seconds)
            except asyncio.CancelledError:
                break

            try:
                await self.run_sweep()
            except Exception:
                logger.exception(LogTemplates.SWEEP_FAILED)

    async def run_sweep(self) -> list[int]:
        logger.debug(LogTemplates.SWEEP_CYCLE_RUNNING)

        max_age = timedelta(seconds=self._settings.session_max_age_seconds)
        removed = await self._store.sweep_expired(utcnow(), max_age)

        if removed:
            logger.info(LogTemplates.SWEEP_COMPLETED, len(removed))
        return removed

    @property
    def is_running(self) -> bool:
        return self._running
