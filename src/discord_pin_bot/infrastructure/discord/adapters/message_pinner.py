"""Discord implementation of the MessagePinner port."""

from __future__ import annotations

import asyncio
import logging

import aiohttp
import discord
from discord.ext import commands

from discord_pin_bot.application.interfaces.message_pinner import MessagePinner
from discord_pin_bot.domain.shared.exceptions import PinFailedError

logger = logging.getLogger(__name__)


class DiscordMessagePinner(MessagePinner):
    """Pins through a partial message, so no fetch round-trip is needed."""

    def __init__(self, bot: commands.Bot) -> None:
        self._bot = bot

    async def pin(self, channel_id: int, message_id: int) -> None:
        channel = self._bot.get_partial_messageable(channel_id)
        message = channel.get_partial_message(message_id)

        try:
            await message.pin()
        except discord.Forbidden as e:
            raise PinFailedError(message_id, "forbidden") from e
        except discord.NotFound as e:
            raise PinFailedError(message_id, "not_found") from e
        except discord.HTTPException as e:
            # Covers the 50-pin channel limit and transient API errors.
            logger.debug("Pin HTTP error for message %s: status=%s", message_id, e.status)
            raise PinFailedError(message_id, "http_error") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("Pin network error for message %s: %r", message_id, e)
            raise PinFailedError(message_id, "network_error") from e
