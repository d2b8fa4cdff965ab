"""Date/time helpers.

All voting timestamps are timezone-aware UTC datetimes.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from discord_pin_bot.domain.shared.messages import ErrorMessages


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def ensure_aware(value: datetime, error: str = ErrorMessages.TIMEZONE_REQUIRED_NOW) -> datetime:
    """Reject naive datetimes and normalise aware ones to UTC."""
    if value.tzinfo is None:
        raise ValueError(error)
    return value.astimezone(UTC)


def age_of(created_at: datetime, now: datetime) -> timedelta:
    return ensure_aware(now) - created_at
