"""
Voting Domain Repository Interfaces

Abstract base class defining the contract for the voting session store.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from discord_pin_bot.domain.voting.entities import VotingSession
from discord_pin_bot.domain.voting.value_objects import SessionHandle, VoteResult


class VotingSessionStore(ABC):
    """Registry of pending pin votes keyed by target message ID.

    Implementations must make every mutating operation atomic with respect
    to the others, and must not perform network I/O while doing so.
    """

    @abstractmethod
    async def create_session(
        self,
        message_id: int,
        threshold: int,
        *,
        channel_id: int,
        ballot_message_id: int | None = None,
        created_at: datetime | None = None,
    ) -> SessionHandle:
        """Open a voting session for a message.

        Args:
            message_id: The target message that will be pinned.
            threshold: Votes required, at least 1.
            channel_id: Channel holding the target message.
            ballot_message_id: Message users react on, if different from the target.
            created_at: Creation timestamp (UTC). Defaults to now.

        Returns:
            A snapshot of the new session.

        Raises:
            SessionAlreadyExistsError: If a session for the message is active.
        """
        ...

    @abstractmethod
    async def record_vote(self, message_id: int, user_id: int) -> VoteResult:
        """Count a vote from a user.

        The vote that meets the threshold closes the session, so
        ``THRESHOLD_REACHED`` is reported at most once per session.

        Raises:
            SessionNotFoundError: If no session is active for the message.
        """
        ...

    @abstractmethod
    async def retract_vote(self, message_id: int, user_id: int) -> int | None:
        """Withdraw a user's vote.

        Returns:
            The new vote count, or None if the user had not voted.

        Raises:
            SessionNotFoundError: If no session is active for the message.
        """
        ...

    @abstractmethod
    async def remove_session(self, message_id: int) -> bool:
        """Remove a session. Idempotent; returns True if one was removed."""
        ...

    @abstractmethod
    async def sweep_expired(self, now: datetime, max_age: timedelta) -> list[int]:
        """Remove every session older than ``max_age`` and return their message IDs."""
        ...

    @abstractmethod
    async def get(self, message_id: int) -> VotingSession | None:
        """Return a detached copy of the session, or None."""
        ...

    @abstractmethod
    async def resolve_ballot(self, ballot_message_id: int) -> int | None:
        """Map a ballot message ID to the target message ID it votes on."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Number of active sessions."""
        ...
