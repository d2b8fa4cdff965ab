"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, identifier: str | int, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id '{identifier}' not found"
        super().__init__(msg, code="ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class SessionNotFoundError(EntityNotFoundError):
    """Raised when no voting session is active for a message."""

    def __init__(self, message_id: int) -> None:
        super().__init__("VotingSession", message_id)
        self.code = "NO_SUCH_SESSION"
        self.message_id = message_id


class SessionAlreadyExistsError(DomainError):
    """Raised when a voting session is already active for a message."""

    def __init__(self, message_id: int, message: str | None = None) -> None:
        msg = message or f"A voting session is already active for message '{message_id}'"
        super().__init__(msg, code="ALREADY_EXISTS")
        self.message_id = message_id


class PinFailedError(DomainError):
    """Raised when the platform refuses or fails to pin a message.

    ``reason`` is a short machine-readable tag (``forbidden``, ``not_found``,
    ``http_error``) so callers can log without inspecting the original error.
    """

    def __init__(self, message_id: int, reason: str, message: str | None = None) -> None:
        msg = message or f"Failed to pin message '{message_id}': {reason}"
        super().__init__(msg, code="PLATFORM_ERROR")
        self.message_id = message_id
        self.reason = reason
