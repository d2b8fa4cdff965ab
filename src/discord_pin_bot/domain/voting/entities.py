"""Core domain entities for the pin-voting bounded context."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field, PrivateAttr

from discord_pin_bot.domain.shared.datetime_utils import age_of, utcnow
from discord_pin_bot.domain.shared.types import (
    ChannelIdField,
    MessageIdField,
    PositiveInt,
    UtcDatetimeField,
)
from discord_pin_bot.domain.voting.value_objects import SessionHandle


class VotingSession(BaseModel):
    """Pending pin vote for one target message.

    The vote count is derived from the voter set, so it can never drift from
    the number of distinct users who voted.
    """

    message_id: MessageIdField
    channel_id: ChannelIdField
    threshold: PositiveInt
    ballot_message_id: MessageIdField | None = None
    created_at: UtcDatetimeField = Field(default_factory=utcnow)

    _voters: set[int] = PrivateAttr(default_factory=set)

    @property
    def vote_count(self) -> int:
        return len(self._voters)

    @property
    def voters(self) -> frozenset[int]:
        return frozenset(self._voters)

    @property
    def is_threshold_met(self) -> bool:
        return self.vote_count >= self.threshold

    def has_voted(self, user_id: int) -> bool:
        return user_id in self._voters

    def add_vote(self, user_id: int) -> bool:
        """Add a vote. Returns False if the user had already voted."""
        if self.has_voted(user_id):
            return False
        self._voters.add(user_id)
        return True

    def remove_vote(self, user_id: int) -> bool:
        if user_id in self._voters:
            self._voters.remove(user_id)
            return True
        return False

    def is_expired(self, now: datetime, max_age: timedelta) -> bool:
        return age_of(self.created_at, now) > max_age

    def to_handle(self) -> SessionHandle:
        return SessionHandle(
            message_id=self.message_id,
            channel_id=self.channel_id,
            ballot_message_id=self.ballot_message_id,
            threshold=self.threshold,
            created_at=self.created_at,
        )

    def snapshot(self) -> VotingSession:
        """Detached copy; mutating it never affects the stored session."""
        clone = self.model_copy()
        clone._voters = set(self._voters)
        return clone
