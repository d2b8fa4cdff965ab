"""
Domain Layer

Contains pure business logic:
- shared/: Exceptions, constrained types and constants
- voting/: Voting sessions and pin-vote rules
"""

from discord_pin_bot.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
