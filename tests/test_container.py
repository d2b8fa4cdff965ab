"""
Unit Tests for Dependency Injection Container

Tests for:
- Lazy initialization and caching of components
- Bot instance management (set_bot, bot property, error when not set)
- Settings flowing into the components that use them
- Lifecycle methods (initialize, shutdown)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from discord_pin_bot.application.commands.cast_pin_vote import (
    CastPinVoteHandler,
    RetractPinVoteHandler,
)
from discord_pin_bot.application.commands.start_pin_vote import StartPinVoteHandler
from discord_pin_bot.application.services.pin_service import PinApplicationService
from discord_pin_bot.config.container import Container, create_container
from discord_pin_bot.config.settings import Settings, VotingSettings
from discord_pin_bot.infrastructure.discord.adapters.message_pinner import DiscordMessagePinner
from discord_pin_bot.infrastructure.state.cleanup import SessionSweepJob
from discord_pin_bot.infrastructure.state.pin_cooldown import PinCooldownTracker
from discord_pin_bot.infrastructure.state.voting_session_store import (
    InMemoryVotingSessionStore,
)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        token="test-token",
        confirm_cap=4,
        voting=VotingSettings(pin_cooldown_seconds=9),
    )


@pytest.fixture
def container(settings):
    return create_container(settings)


class TestBotManagement:
    def test_bot_not_set_raises(self, container):
        with pytest.raises(RuntimeError, match="Bot not initialized"):
            _ = container.bot

    def test_set_bot(self, container):
        bot = MagicMock()
        container.set_bot(bot)

        assert container.bot is bot


class TestLazyComponents:
    """Components are built on first access and cached."""

    def test_session_store(self, container):
        store = container.session_store

        assert isinstance(store, InMemoryVotingSessionStore)
        assert container.session_store is store

    def test_pin_cooldowns_use_settings(self, container):
        cooldowns = container.pin_cooldowns

        assert isinstance(cooldowns, PinCooldownTracker)
        assert cooldowns.cooldown_seconds == 9
        assert container.pin_cooldowns is cooldowns

    def test_message_pinner_requires_bot(self, container):
        with pytest.raises(RuntimeError):
            _ = container.message_pinner

        container.set_bot(MagicMock())
        assert isinstance(container.message_pinner, DiscordMessagePinner)

    def test_pin_service(self, container):
        container.set_bot(MagicMock())

        service = container.pin_service

        assert isinstance(service, PinApplicationService)
        assert container.pin_service is service

    def test_handlers(self, container):
        container.set_bot(MagicMock())

        assert isinstance(container.start_pin_vote_handler, StartPinVoteHandler)
        assert isinstance(container.cast_pin_vote_handler, CastPinVoteHandler)
        assert isinstance(container.retract_pin_vote_handler, RetractPinVoteHandler)
        assert container.start_pin_vote_handler._confirm_cap == 4
        assert container.cast_pin_vote_handler._session_store is container.session_store

    def test_sweep_job(self, container):
        job = container.sweep_job

        assert isinstance(job, SessionSweepJob)
        assert container.sweep_job is job
        assert job.is_running is False


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_initialize_builds_state(self, container):
        await container.initialize()

        assert container._session_store is not None
        assert container._pin_cooldowns is not None

    @pytest.mark.asyncio
    async def test_shutdown_stops_running_sweep_job(self, settings):
        job = MagicMock()
        job.is_running = True
        job.stop = AsyncMock()
        container = Container(settings, _sweep_job=job)

        await container.shutdown()

        job.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_shutdown_skips_idle_sweep_job(self, settings):
        job = MagicMock()
        job.is_running = False
        job.stop = AsyncMock()
        container = Container(settings, _sweep_job=job)

        await container.shutdown()

        job.stop.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_shutdown_tolerates_stop_error(self, settings):
        job = MagicMock()
        job.is_running = True
        job.stop = AsyncMock(side_effect=RuntimeError("boom"))
        container = Container(settings, _sweep_job=job)

        await container.shutdown()

    @pytest.mark.asyncio
    async def test_shutdown_without_components(self, container):
        await container.shutdown()
