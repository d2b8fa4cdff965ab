"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Discord (bot, cogs, pin adapter)
- In-process state (voting session store, pin cooldowns, sweep job)
"""

from discord_pin_bot.infrastructure.discord.adapters.message_pinner import DiscordMessagePinner
from discord_pin_bot.infrastructure.discord.bot import create_bot
from discord_pin_bot.infrastructure.state.voting_session_store import InMemoryVotingSessionStore

__all__ = [
    "create_bot",
    "DiscordMessagePinner",
    "InMemoryVotingSessionStore",
]
