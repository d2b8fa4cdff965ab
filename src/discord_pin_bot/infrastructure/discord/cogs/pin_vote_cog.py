"""Gateway listeners that turn mentions and vote reactions into pin votes."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from discord_pin_bot.application.commands.cast_pin_vote import CastPinVoteCommand
from discord_pin_bot.application.commands.start_pin_vote import (
    StartPinVoteCommand,
    StartPinVoteStatus,
)
from discord_pin_bot.domain.shared.messages import (
    DiscordUIMessages,
    ErrorMessages,
    LogTemplates,
)
from discord_pin_bot.domain.voting.services import VotingDomainService

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)


class PinVoteCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container
        self._voting = container.settings.voting

    def _mentions_bot_first(self, content: str) -> bool:
        user = self.bot.user
        if user is None:
            return False
        return content.startswith((f"<@{user.id}>", f"<@!{user.id}>"))

    def _is_own_user(self, user_id: int) -> bool:
        return self.bot.user is not None and user_id == self.bot.user.id

    # ─────────────────────────────────────────────────────────────────
    # Mentions
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return

        reference = message.reference
        if reference is None or reference.message_id is None:
            return

        if not self._mentions_bot_first(message.content):
            return

        command = StartPinVoteCommand(
            target_message_id=reference.message_id,
            channel_id=reference.channel_id or message.channel.id,
            ballot_message_id=message.id,
        )
        result = await self.container.start_pin_vote_handler.handle(command)

        if result.status is StartPinVoteStatus.ALREADY_ACTIVE:
            try:
                await message.reply(DiscordUIMessages.VOTE_ALREADY_RUNNING, mention_author=False)
            except discord.HTTPException as e:
                logger.debug(LogTemplates.REPLY_FAILED, message.id, e)
            return

        if result.vote_opened and result.session is not None:
            await self._decorate_ballot(message, result.session.threshold)

    async def _decorate_ballot(self, message: discord.Message, threshold: int) -> None:
        delay = self._voting.reaction_delay_ms / 1000
        for emoji in VotingDomainService.ballot_emojis(threshold, self._voting.vote_emoji):
            try:
                await message.add_reaction(emoji)
            except discord.HTTPException as e:
                logger.warning(LogTemplates.REACTION_ADD_FAILED, emoji, e)
            # Spacing keeps us clear of the reaction rate limit.
            await asyncio.sleep(delay)

    # ─────────────────────────────────────────────────────────────────
    # Reactions
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_raw_reaction_add(self, payload: discord.RawReactionActionEvent) -> None:
        if self._is_own_user(payload.user_id):
            return

        if payload.member is not None and payload.member.bot:
            return

        if not VotingDomainService.is_vote_emoji(payload.emoji, self._voting.vote_emoji):
            return

        command = CastPinVoteCommand(
            ballot_message_id=payload.message_id,
            user_id=payload.user_id,
        )
        await self.container.cast_pin_vote_handler.handle(command)

    @commands.Cog.listener()
    async def on_raw_reaction_remove(self, payload: discord.RawReactionActionEvent) -> None:
        if self._is_own_user(payload.user_id):
            return

        if not VotingDomainService.is_vote_emoji(payload.emoji, self._voting.vote_emoji):
            return

        command = CastPinVoteCommand(
            ballot_message_id=payload.message_id,
            user_id=payload.user_id,
        )
        await self.container.retract_pin_vote_handler.handle(command)

    # ─────────────────────────────────────────────────────────────────
    # Deletions
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_raw_message_delete(self, payload: discord.RawMessageDeleteEvent) -> None:
        """Drop the vote when either its ballot or its target disappears."""
        store = self.container.session_store

        target_id = await store.resolve_ballot(payload.message_id)
        if target_id is not None:
            await store.remove_session(target_id)
            return

        await store.remove_session(payload.message_id)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(PinVoteCog(bot, container))
