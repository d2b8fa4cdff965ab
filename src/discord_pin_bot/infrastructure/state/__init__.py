"""In-process state: voting sessions, pin cooldowns and the sweep job."""

from discord_pin_bot.infrastructure.state.cleanup import SessionSweepJob
from discord_pin_bot.infrastructure.state.pin_cooldown import PinCooldownTracker
from discord_pin_bot.infrastructure.state.voting_session_store import (
    InMemoryVotingSessionStore,
)

__all__ = [
    "InMemoryVotingSessionStore",
    "PinCooldownTracker",
    "SessionSweepJob",
]
