"""
Unit Tests for Bot Lifecycle

Tests for src/discord_pin_bot/infrastructure/discord/bot.py:

1. TestBotInitialization: intents, prefix, help command, container wiring
2. TestSetupHook: container init, cog loading, sweep job start and failures
3. TestLoadCogs: every extension attempted, failures tolerated
4. TestBotClose: sweep job stop, container shutdown
5. TestCreateBot: factory function
"""

from unittest.mock import AsyncMock, MagicMock, PropertyMock, patch

import pytest

from discord_pin_bot.infrastructure.discord.bot import PinBot, create_bot
from discord_pin_bot.infrastructure.discord.cogs import COG_EXTENSIONS


@pytest.fixture
def mock_settings():
    """Create mock settings."""
    settings = MagicMock()
    settings.discord.command_prefix = "!"
    return settings


@pytest.fixture
def mock_container():
    """Create mock container with all required properties."""
    container = MagicMock()
    container.initialize = AsyncMock()
    container.shutdown = AsyncMock()
    container.set_bot = MagicMock()

    sweep_job = MagicMock()
    sweep_job.start = MagicMock()
    sweep_job.stop = AsyncMock()
    type(container).sweep_job = PropertyMock(return_value=sweep_job)

    return container


# =============================================================================
# Bot Initialization Tests
# =============================================================================


class TestBotInitialization:
    """Tests for PinBot initialization."""

    @pytest.mark.asyncio
    async def test_init_sets_minimal_intents(self, mock_container, mock_settings):
        """Should request only guild, message, reaction and content intents."""
        bot = PinBot(container=mock_container, settings=mock_settings)

        assert bot.intents.guilds is True
        assert bot.intents.guild_messages is True
        assert bot.intents.guild_reactions is True
        assert bot.intents.message_content is True
        assert bot.intents.voice_states is False
        assert bot.intents.members is False

    @pytest.mark.asyncio
    async def test_init_sets_command_prefix(self, mock_container, mock_settings):
        mock_settings.discord.command_prefix = "?"
        bot = PinBot(container=mock_container, settings=mock_settings)

        assert bot.command_prefix == "?"

    @pytest.mark.asyncio
    async def test_init_disables_default_help(self, mock_container, mock_settings):
        bot = PinBot(container=mock_container, settings=mock_settings)

        assert bot.help_command is None

    @pytest.mark.asyncio
    async def test_init_wires_container(self, mock_container, mock_settings):
        bot = PinBot(container=mock_container, settings=mock_settings)

        assert bot.container is mock_container
        assert bot.settings is mock_settings
        mock_container.set_bot.assert_called_once_with(bot)


# =============================================================================
# Setup Hook Tests
# =============================================================================


class TestSetupHook:
    """Tests for PinBot.setup_hook method."""

    @pytest.mark.asyncio
    async def test_setup_hook_initializes_and_starts_sweep(self, mock_container, mock_settings):
        bot = PinBot(container=mock_container, settings=mock_settings)

        with patch.object(bot, "_load_cogs", new_callable=AsyncMock) as mock_load:
            await bot.setup_hook()

        mock_container.initialize.assert_awaited_once()
        mock_load.assert_awaited_once()
        mock_container.sweep_job.start.assert_called_once()

    @pytest.mark.asyncio
    async def test_setup_hook_reraises_container_failure(self, mock_container, mock_settings):
        mock_container.initialize.side_effect = RuntimeError("init failed")
        bot = PinBot(container=mock_container, settings=mock_settings)

        with patch.object(bot, "_load_cogs", new_callable=AsyncMock) as mock_load:
            with pytest.raises(RuntimeError, match="init failed"):
                await bot.setup_hook()

        mock_load.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_setup_hook_tolerates_sweep_start_failure(self, mock_container, mock_settings):
        mock_container.sweep_job.start.side_effect = RuntimeError("no loop")
        bot = PinBot(container=mock_container, settings=mock_settings)

        with patch.object(bot, "_load_cogs", new_callable=AsyncMock):
            await bot.setup_hook()


# =============================================================================
# Cog Loading Tests
# =============================================================================


class TestLoadCogs:
    """Tests for PinBot._load_cogs method."""

    @pytest.mark.asyncio
    async def test_load_cogs_loads_all_cogs(self, mock_container, mock_settings):
        bot = PinBot(container=mock_container, settings=mock_settings)

        with patch.object(bot, "load_extension", new_callable=AsyncMock) as mock_load:
            await bot._load_cogs()

        assert mock_load.call_count == len(COG_EXTENSIONS)
        mock_load.assert_any_call("discord_pin_bot.infrastructure.discord.cogs.pin_vote_cog")
        mock_load.assert_any_call("discord_pin_bot.infrastructure.discord.cogs.event_cog")

    @pytest.mark.asyncio
    async def test_load_cogs_handles_individual_failure(self, mock_container, mock_settings):
        bot = PinBot(container=mock_container, settings=mock_settings)

        async def load_side_effect(cog_name):
            if "pin_vote_cog" in cog_name:
                raise Exception("Pin vote cog failed")

        with patch.object(
            bot, "load_extension", new_callable=AsyncMock, side_effect=load_side_effect
        ) as mock_load:
            await bot._load_cogs()

        assert mock_load.call_count == len(COG_EXTENSIONS)


# =============================================================================
# Close Tests
# =============================================================================


class TestBotClose:
    """Tests for PinBot.close method."""

    @pytest.mark.asyncio
    async def test_close_stops_sweep_job(self, mock_container, mock_settings):
        bot = PinBot(container=mock_container, settings=mock_settings)

        await bot.close()

        mock_container.sweep_job.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_shuts_down_container(self, mock_container, mock_settings):
        bot = PinBot(container=mock_container, settings=mock_settings)

        await bot.close()

        mock_container.shutdown.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_handles_errors(self, mock_container, mock_settings):
        mock_container.sweep_job.stop.side_effect = Exception("Stop failed")
        mock_container.shutdown.side_effect = Exception("Shutdown failed")
        bot = PinBot(container=mock_container, settings=mock_settings)

        # Should not raise
        await bot.close()

        mock_container.shutdown.assert_awaited_once()


# =============================================================================
# Factory Tests
# =============================================================================


class TestCreateBot:
    @pytest.mark.asyncio
    async def test_create_bot_returns_pin_bot(self, mock_container, mock_settings):
        bot = create_bot(mock_container, mock_settings)

        assert isinstance(bot, PinBot)
        assert bot.container is mock_container
        assert bot.settings is mock_settings
