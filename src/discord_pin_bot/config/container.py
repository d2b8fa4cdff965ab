"""Dependency Injection Container

Owns the bot's process-wide state (settings, voting session store, pin
cooldowns, adapters, handlers) and hands it explicitly to the cogs. Components
are created on first access and cached for the lifetime of the process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from discord.ext.commands import Bot

    from ..application.commands.cast_pin_vote import CastPinVoteHandler, RetractPinVoteHandler
    from ..application.commands.start_pin_vote import StartPinVoteHandler
    from ..application.interfaces.message_pinner import MessagePinner
    from ..application.services.pin_service import PinApplicationService
    from ..domain.voting.repository import VotingSessionStore
    from ..infrastructure.state.cleanup import SessionSweepJob
    from ..infrastructure.state.pin_cooldown import PinCooldownTracker
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed.
    """

    settings: Settings
    _bot: Bot | None = None

    # State
    _session_store: VotingSessionStore | None = None
    _pin_cooldowns: PinCooldownTracker | None = None

    # Infrastructure adapters
    _message_pinner: MessagePinner | None = None

    # Application services
    _pin_service: PinApplicationService | None = None

    # Command handlers
    _start_pin_vote_handler: StartPinVoteHandler | None = None
    _cast_pin_vote_handler: CastPinVoteHandler | None = None
    _retract_pin_vote_handler: RetractPinVoteHandler | None = None

    # Background jobs
    _sweep_job: SessionSweepJob | None = None

    def set_bot(self, bot: Bot) -> None:
        """Set the Discord bot instance."""
        self._bot = bot

    @property
    def bot(self) -> Bot:
        """Get the Discord bot instance."""
        if self._bot is None:
            raise RuntimeError(ErrorMessages.BOT_NOT_INITIALIZED)
        return self._bot

    # === State ===

    @property
    def session_store(self) -> VotingSessionStore:
        """Get the voting session store."""
        if self._session_store is None:
            from ..infrastructure.state.voting_session_store import InMemoryVotingSessionStore

            self._session_store = InMemoryVotingSessionStore()
        return self._session_store

    @property
    def pin_cooldowns(self) -> PinCooldownTracker:
        """Get the per-channel pin cooldown tracker."""
        if self._pin_cooldowns is None:
            from ..infrastructure.state.pin_cooldown import PinCooldownTracker

            self._pin_cooldowns = PinCooldownTracker(
                cooldown_seconds=self.settings.voting.pin_cooldown_seconds
            )
        return self._pin_cooldowns

    # === Infrastructure Adapters ===

    @property
    def message_pinner(self) -> MessagePinner:
        """Get the message pinner."""
        if self._message_pinner is None:
            from ..infrastructure.discord.adapters.message_pinner import DiscordMessagePinner

            self._message_pinner = DiscordMessagePinner(self.bot)
        return self._message_pinner

    # === Application Services ===

    @property
    def pin_service(self) -> PinApplicationService:
        """Get the pin application service."""
        if self._pin_service is None:
            from ..application.services.pin_service import PinApplicationService

            self._pin_service = PinApplicationService(
                pinner=self.message_pinner,
                cooldowns=self.pin_cooldowns,
            )
        return self._pin_service

    # === Command Handlers ===

    @property
    def start_pin_vote_handler(self) -> StartPinVoteHandler:
        """Get the start pin vote command handler."""
        if self._start_pin_vote_handler is None:
            from ..application.commands.start_pin_vote import StartPinVoteHandler

            self._start_pin_vote_handler = StartPinVoteHandler(
                session_store=self.session_store,
                pin_service=self.pin_service,
                confirm_cap=self.settings.confirm_cap,
            )
        return self._start_pin_vote_handler

    @property
    def cast_pin_vote_handler(self) -> CastPinVoteHandler:
        """Get the cast pin vote command handler."""
        if self._cast_pin_vote_handler is None:
            from ..application.commands.cast_pin_vote import CastPinVoteHandler

            self._cast_pin_vote_handler = CastPinVoteHandler(
                session_store=self.session_store,
                pin_service=self.pin_service,
            )
        return self._cast_pin_vote_handler

    @property
    def retract_pin_vote_handler(self) -> RetractPinVoteHandler:
        """Get the retract pin vote command handler."""
        if self._retract_pin_vote_handler is None:
            from ..application.commands.cast_pin_vote import RetractPinVoteHandler

            self._retract_pin_vote_handler = RetractPinVoteHandler(
                session_store=self.session_store,
            )
        return self._retract_pin_vote_handler

    # === Background Jobs ===

    @property
    def sweep_job(self) -> SessionSweepJob:
        """Get the expired-session sweep job."""
        if self._sweep_job is None:
            from ..infrastructure.state.cleanup import SessionSweepJob

            self._sweep_job = SessionSweepJob(
                session_store=self.session_store,
                settings=self.settings.voting,
            )
        return self._sweep_job

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Create the in-process state eagerly so the first event doesn't pay for it."""
        _ = self.session_store
        _ = self.pin_cooldowns

    async def shutdown(self) -> None:
        """Stop background work. Pending votes are discarded with the process."""
        if self._sweep_job is not None and self._sweep_job.is_running:
            try:
                await self._sweep_job.stop()
            except Exception as exc:
                logger.warning("Failed stopping session sweep job: %r", exc)


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
