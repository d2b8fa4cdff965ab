"""
Shared Domain Kernel

Contains exceptions, constrained types and constants shared by the voting context.
"""

from discord_pin_bot.domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    PinFailedError,
    SessionAlreadyExistsError,
    SessionNotFoundError,
)

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "SessionNotFoundError",
    "SessionAlreadyExistsError",
    "PinFailedError",
]
