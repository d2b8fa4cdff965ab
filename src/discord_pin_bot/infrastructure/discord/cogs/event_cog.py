"""Discord event listeners for connection lifecycle, guild membership, and command errors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from discord_pin_bot.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)

# Guild-wide permissions a pin vote needs: post the ballot, react to it, pin the target.
PIN_VOTE_PERMISSIONS = ("send_messages", "add_reactions", "manage_messages")


def missing_pin_permissions(guild: discord.Guild) -> list[str]:
    """Names from PIN_VOTE_PERMISSIONS the bot lacks in ``guild``."""
    me = guild.me
    if me is None:
        return list(PIN_VOTE_PERMISSIONS)
    perms = me.guild_permissions
    return [name for name in PIN_VOTE_PERMISSIONS if not getattr(perms, name)]


class EventCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container
        self._resumed_logged_once = False

    # ─────────────────────────────────────────────────────────────────
    # Lifecycle Events
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_connect(self) -> None:
        logger.info(LogTemplates.WS_CONNECTED)

    @commands.Cog.listener()
    async def on_disconnect(self) -> None:
        logger.warning(LogTemplates.WS_DISCONNECTED)

    @commands.Cog.listener()
    async def on_resumed(self) -> None:
        if self._resumed_logged_once:
            return
        # Reactions sent while disconnected are not replayed.
        open_votes = await self.container.session_store.count()
        logger.info(LogTemplates.WS_RESUMED, open_votes)
        self._resumed_logged_once = True

    # ─────────────────────────────────────────────────────────────────
    # Guild Events
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_guild_join(self, guild: discord.Guild) -> None:
        logger.info(LogTemplates.GUILD_JOINED, guild.name, guild.id)

        missing = missing_pin_permissions(guild)
        if missing:
            logger.warning(
                LogTemplates.GUILD_MISSING_PERMISSIONS, guild.name, guild.id, ", ".join(missing)
            )

    @commands.Cog.listener()
    async def on_guild_remove(self, guild: discord.Guild) -> None:
        logger.info(LogTemplates.GUILD_LEFT, guild.name, guild.id)

    # ─────────────────────────────────────────────────────────────────
    # Command Error Handler
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        # Mentions look like prefixed commands to the framework; there are none.
        if isinstance(error, commands.CommandNotFound):
            return

        original = getattr(error, "original", error)
        logger.exception(
            LogTemplates.COMMAND_ERROR,
            getattr(ctx.command, "qualified_name", "<unknown>"),
            exc_info=original,
        )


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(EventCog(bot, container))
