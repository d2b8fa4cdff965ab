"""
Discord Cogs

Extensions loaded by the bot at startup:
- pin_vote_cog: mentions, vote reactions and deletions
- event_cog: lifecycle logging, guild pin-permission check, command errors
"""

COG_EXTENSIONS = (
    "discord_pin_bot.infrastructure.discord.cogs.pin_vote_cog",
    "discord_pin_bot.infrastructure.discord.cogs.event_cog",
)

__all__ = [
    "COG_EXTENSIONS",
]
