"""In-memory voting session store.

Sessions live only as long as the process; a restart discards pending votes.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta

from discord_pin_bot.domain.shared.datetime_utils import ensure_aware, utcnow
from discord_pin_bot.domain.shared.exceptions import (
    SessionAlreadyExistsError,
    SessionNotFoundError,
)
from discord_pin_bot.domain.shared.messages import ErrorMessages, LogTemplates
from discord_pin_bot.domain.voting.entities import VotingSession
from discord_pin_bot.domain.voting.repository import VotingSessionStore
from discord_pin_bot.domain.voting.value_objects import SessionHandle, VoteResult

logger = logging.getLogger(__name__)


class InMemoryVotingSessionStore(VotingSessionStore):
    """Dict-backed store serialized by a single asyncio lock.

    Critical sections never await anything but the lock, so event handlers
    are only ever held up by other short store operations.
    """

    def __init__(self) -> None:
        self._sessions: dict[int, VotingSession] = {}
        self._ballots: dict[int, int] = {}
        self._lock = asyncio.Lock()

    async def create_session(
        self,
        message_id: int,
        threshold: int,
        *,
        channel_id: int,
        ballot_message_id: int | None = None,
        created_at: datetime | None = None,
    ) -> SessionHandle:
        if threshold < 1:
            raise ValueError(ErrorMessages.INVALID_THRESHOLD)

        async with self._lock:
            if message_id in self._sessions:
                raise SessionAlreadyExistsError(message_id)

            session = VotingSession(
                message_id=message_id,
                channel_id=channel_id,
                threshold=threshold,
                ballot_message_id=ballot_message_id,
                created_at=created_at or utcnow(),
            )
            self._sessions[message_id] = session
            if ballot_message_id is not None:
                self._ballots[ballot_message_id] = message_id

        logger.info(LogTemplates.SESSION_CREATED, message_id, channel_id, threshold)
        return session.to_handle()

    async def record_vote(self, message_id: int, user_id: int) -> VoteResult:
        async with self._lock:
            session = self._sessions.get(message_id)
            if session is None:
                raise SessionNotFoundError(message_id)

            if not session.add_vote(user_id):
                return VoteResult.already_voted(session.vote_count, session.threshold)

            if session.is_threshold_met:
                self._discard(message_id)
                return VoteResult.reached(session.to_handle(), session.vote_count)

            return VoteResult.counted(session.vote_count, session.threshold)

    async def retract_vote(self, message_id: int, user_id: int) -> int | None:
        async with self._lock:
            session = self._sessions.get(message_id)
            if session is None:
                raise SessionNotFoundError(message_id)

            if not session.remove_vote(user_id):
                return None
            return session.vote_count

    async def remove_session(self, message_id: int) -> bool:
        async with self._lock:
            removed = self._discard(message_id)

        if removed:
            logger.debug(LogTemplates.SESSION_REMOVED, message_id)
        return removed

    async def sweep_expired(self, now: datetime, max_age: timedelta) -> list[int]:
        if max_age < timedelta(0):
            raise ValueError(ErrorMessages.INVALID_MAX_AGE)
        now = ensure_aware(now)

        async with self._lock:
            expired = [
                message_id
                for message_id, session in self._sessions.items()
                if session.is_expired(now, max_age)
            ]
            for message_id in expired:
                self._discard(message_id)

        return expired

    async def get(self, message_id: int) -> VotingSession | None:
        async with self._lock:
            session = self._sessions.get(message_id)
            return session.snapshot() if session is not None else None

    async def resolve_ballot(self, ballot_message_id: int) -> int | None:
        async with self._lock:
            return self._ballots.get(ballot_message_id)

    async def count(self) -> int:
        async with self._lock:
            return len(self._sessions)

    def __len__(self) -> int:
        return len(self._sessions)

    def _discard(self, message_id: int) -> bool:
        # Caller must hold the lock.
        session = self._sessions.pop(message_id, None)
        if session is None:
            return False
        if session.ballot_message_id is not None:
            self._ballots.pop(session.ballot_message_id, None)
        return True
