"""
Start Pin Vote Command

Command and handler for a mention that asks the bot to pin a replied-to message.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from discord_pin_bot.domain.shared.exceptions import SessionAlreadyExistsError
from discord_pin_bot.domain.shared.messages import LogTemplates
from discord_pin_bot.domain.shared.types import ChannelIdField, MessageIdField
from discord_pin_bot.domain.voting.services import VotingDomainService
from discord_pin_bot.domain.voting.value_objects import PinOutcome, SessionHandle

if TYPE_CHECKING:
    from ...domain.voting.repository import VotingSessionStore
    from ..services.pin_service import PinApplicationService

logger = logging.getLogger(__name__)


class StartPinVoteCommand(BaseModel):
    """Mention received for a target message."""

    model_config = ConfigDict(frozen=True, strict=True)

    target_message_id: MessageIdField
    channel_id: ChannelIdField
    ballot_message_id: MessageIdField


class StartPinVoteStatus(Enum):
    VOTE_OPENED = "vote_opened"
    ALREADY_ACTIVE = "already_active"
    PINNED_IMMEDIATELY = "pinned_immediately"


class StartPinVoteResult(BaseModel):
    """Result of a start pin vote command."""

    model_config = ConfigDict(frozen=True)

    status: StartPinVoteStatus
    session: SessionHandle | None = None
    pin_outcome: PinOutcome | None = None

    @property
    def vote_opened(self) -> bool:
        return self.status is StartPinVoteStatus.VOTE_OPENED


class StartPinVoteHandler:
    """Handler for StartPinVoteCommand."""

    def __init__(
        self,
        session_store: VotingSessionStore,
        pin_service: PinApplicationService,
        confirm_cap: int,
    ) -> None:
        self._session_store = session_store
        self._pin_service = pin_service
        self._confirm_cap = confirm_cap

    async def handle(self, command: StartPinVoteCommand) -> StartPinVoteResult:
        if not VotingDomainService.requires_vote(self._confirm_cap):
            logger.info(LogTemplates.PIN_INSTANT, command.target_message_id)
            outcome = await self._pin_service.pin(command.channel_id, command.target_message_id)
            return StartPinVoteResult(
                status=StartPinVoteStatus.PINNED_IMMEDIATELY, pin_outcome=outcome
            )

        try:
            session = await self._session_store.create_session(
                command.target_message_id,
                self._confirm_cap,
                channel_id=command.channel_id,
                ballot_message_id=command.ballot_message_id,
            )
        except SessionAlreadyExistsError:
            logger.info(LogTemplates.SESSION_ALREADY_ACTIVE, command.target_message_id)
            return StartPinVoteResult(status=StartPinVoteStatus.ALREADY_ACTIVE)

        return StartPinVoteResult(status=StartPinVoteStatus.VOTE_OPENED, session=session)
