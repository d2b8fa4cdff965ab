"""
Application Commands

Command objects and handlers driven by gateway events.
"""

from discord_pin_bot.application.commands.cast_pin_vote import (
    CastPinVoteCommand,
    CastPinVoteHandler,
    CastPinVoteResult,
    RetractPinVoteHandler,
)
from discord_pin_bot.application.commands.start_pin_vote import (
    StartPinVoteCommand,
    StartPinVoteHandler,
    StartPinVoteResult,
    StartPinVoteStatus,
)

__all__ = [
    "StartPinVoteCommand",
    "StartPinVoteHandler",
    "StartPinVoteResult",
    "StartPinVoteStatus",
    "CastPinVoteCommand",
    "CastPinVoteHandler",
    "CastPinVoteResult",
    "RetractPinVoteHandler",
]
