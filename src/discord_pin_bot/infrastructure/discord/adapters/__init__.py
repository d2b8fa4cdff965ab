"""Discord adapters implementing application ports."""

from discord_pin_bot.infrastructure.discord.adapters.message_pinner import DiscordMessagePinner

__all__ = [
    "DiscordMessagePinner",
]
