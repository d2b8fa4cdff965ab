"""
Voting Domain Services

Business rules around the configured confirm cap.
"""

from discord_pin_bot.domain.shared.constants import Emojis


class VotingDomainService:
    """Rules that decide whether a mention opens a vote and how the ballot looks."""

    INSTANT_PIN_CAP = 0

    @classmethod
    def requires_vote(cls, confirm_cap: int) -> bool:
        """A cap of 0 pins on mention without opening a session."""
        return confirm_cap > cls.INSTANT_PIN_CAP

    @classmethod
    def ballot_emojis(cls, threshold: int, vote_emoji: str = Emojis.VOTE) -> list[str]:
        """Reactions the bot adds to a ballot: the vote emoji, then the threshold keycap.

        Thresholds without a keycap fall back to ``❓``.
        """
        return [vote_emoji, Emojis.for_count(threshold) or Emojis.UNKNOWN_COUNT]

    @classmethod
    def is_vote_emoji(cls, emoji: object, vote_emoji: str = Emojis.VOTE) -> bool:
        """Compare a reaction emoji (str, PartialEmoji, Emoji) against the vote emoji."""
        return str(emoji) == vote_emoji
