"""
Cast Pin Vote Command

Command and handlers for vote reactions added to or removed from a ballot.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from discord_pin_bot.domain.shared.exceptions import SessionNotFoundError
from discord_pin_bot.domain.shared.messages import LogTemplates
from discord_pin_bot.domain.shared.types import MessageIdField, UserIdField
from discord_pin_bot.domain.voting.value_objects import PinOutcome, VoteResult

if TYPE_CHECKING:
    from ...domain.voting.repository import VotingSessionStore
    from ..services.pin_service import PinApplicationService

logger = logging.getLogger(__name__)


class CastPinVoteCommand(BaseModel):
    """A user's vote reaction on a ballot message."""

    model_config = ConfigDict(frozen=True, strict=True)

    ballot_message_id: MessageIdField
    user_id: UserIdField


class CastPinVoteResult(BaseModel):
    """Result of a cast pin vote command.

    ``vote`` is None when the ballot has no active session.
    """

    model_config = ConfigDict(frozen=True)

    vote: VoteResult | None = None
    pin_outcome: PinOutcome | None = None

    @property
    def has_session(self) -> bool:
        return self.vote is not None


class CastPinVoteHandler:
    """Handler for CastPinVoteCommand.

    The vote that meets the threshold closes the session inside the store,
    before the pin call, so a failed pin is never retried.
    """

    def __init__(
        self,
        session_store: VotingSessionStore,
        pin_service: PinApplicationService,
    ) -> None:
        self._session_store = session_store
        self._pin_service = pin_service

    async def handle(self, command: CastPinVoteCommand) -> CastPinVoteResult:
        target_id = await self._session_store.resolve_ballot(command.ballot_message_id)
        if target_id is None:
            return CastPinVoteResult()

        try:
            vote = await self._session_store.record_vote(target_id, command.user_id)
        except SessionNotFoundError:
            # Closed or swept between the lookup and the vote.
            logger.debug(LogTemplates.SESSION_NOT_FOUND, target_id)
            return CastPinVoteResult()

        if not vote.was_counted:
            logger.debug(LogTemplates.VOTE_DUPLICATE, command.user_id, target_id)
            return CastPinVoteResult(vote=vote)

        logger.info(
            LogTemplates.VOTE_ADDED,
            command.user_id,
            target_id,
            vote.vote_count,
            vote.votes_needed,
        )

        if not vote.threshold_reached or vote.session is None:
            return CastPinVoteResult(vote=vote)

        logger.info(
            LogTemplates.VOTE_THRESHOLD_REACHED, target_id, vote.vote_count, vote.threshold
        )
        outcome = await self._pin_service.pin(vote.session.channel_id, vote.session.message_id)
        return CastPinVoteResult(vote=vote, pin_outcome=outcome)


class RetractPinVoteHandler:
    """Handler for a removed vote reaction; shares CastPinVoteCommand."""

    def __init__(self, session_store: VotingSessionStore) -> None:
        self._session_store = session_store

    async def handle(self, command: CastPinVoteCommand) -> int | None:
        """Return the new vote count, or None if nothing changed."""
        target_id = await self._session_store.resolve_ballot(command.ballot_message_id)
        if target_id is None:
            return None

        try:
            count = await self._session_store.retract_vote(target_id, command.user_id)
        except SessionNotFoundError:
            logger.debug(LogTemplates.SESSION_NOT_FOUND, target_id)
            return None

        if count is not None:
            logger.info(LogTemplates.VOTE_REMOVED, command.user_id, target_id, count)
        return count
