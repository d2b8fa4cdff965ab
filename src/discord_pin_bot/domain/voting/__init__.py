"""
Voting Bounded Context

Domain logic for reaction votes that gate message pinning.
"""

from discord_pin_bot.domain.voting.entities import VotingSession
from discord_pin_bot.domain.voting.repository import VotingSessionStore
from discord_pin_bot.domain.voting.services import VotingDomainService
from discord_pin_bot.domain.voting.value_objects import (
    PinOutcome,
    SessionHandle,
    VoteOutcome,
    VoteResult,
)

__all__ = [
    # Entities
    "VotingSession",
    # Value Objects
    "SessionHandle",
    "VoteOutcome",
    "VoteResult",
    "PinOutcome",
    # Repository
    "VotingSessionStore",
    # Services
    "VotingDomainService",
]
