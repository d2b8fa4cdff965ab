"""
Voting Domain Value Objects

Immutable value objects for the pin-voting bounded context.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

from discord_pin_bot.domain.shared.types import (
    ChannelIdField,
    MessageIdField,
    NonNegativeInt,
    PositiveInt,
)


class VoteOutcome(Enum):
    """What happened when a user's vote reached the store."""

    COUNTED = "counted"  # Vote added, threshold not yet met
    THRESHOLD_REACHED = "threshold_reached"  # Vote added and met the threshold
    ALREADY_VOTED = "already_voted"  # Same user voted before, nothing changed


class PinOutcome(Enum):
    """Result of attempting to pin a message."""

    PINNED = "pinned"
    RATE_LIMITED = "rate_limited"
    FAILED = "failed"


class SessionHandle(BaseModel):
    """Read-only snapshot of a voting session's identity and threshold."""

    model_config = ConfigDict(frozen=True)

    message_id: MessageIdField
    channel_id: ChannelIdField
    ballot_message_id: MessageIdField | None = None
    threshold: PositiveInt
    created_at: datetime


class VoteResult(BaseModel):
    """Outcome of recording a single vote.

    ``session`` is only set on ``THRESHOLD_REACHED``; the store has already
    closed the session at that point, so the handle is the caller's last view
    of it.
    """

    model_config = ConfigDict(frozen=True)

    outcome: VoteOutcome
    vote_count: NonNegativeInt
    threshold: PositiveInt
    session: SessionHandle | None = None

    @property
    def threshold_reached(self) -> bool:
        return self.outcome is VoteOutcome.THRESHOLD_REACHED

    @property
    def was_counted(self) -> bool:
        return self.outcome in {VoteOutcome.COUNTED, VoteOutcome.THRESHOLD_REACHED}

    @property
    def votes_needed(self) -> int:
        return max(0, self.threshold - self.vote_count)

    @classmethod
    def counted(cls, vote_count: int, threshold: int) -> VoteResult:
        return cls(outcome=VoteOutcome.COUNTED, vote_count=vote_count, threshold=threshold)

    @classmethod
    def reached(cls, session: SessionHandle, vote_count: int) -> VoteResult:
        return cls(
            outcome=VoteOutcome.THRESHOLD_REACHED,
            vote_count=vote_count,
            threshold=session.threshold,
            session=session,
        )

    @classmethod
    def already_voted(cls, vote_count: int, threshold: int) -> VoteResult:
        return cls(outcome=VoteOutcome.ALREADY_VOTED, vote_count=vote_count, threshold=threshold)
