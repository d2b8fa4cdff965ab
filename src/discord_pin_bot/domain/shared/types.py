"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across the bot is defined here once,
so models can simply annotate their fields::

    from discord_pin_bot.domain.shared.types import DiscordSnowflake, PositiveInt

    class MyModel(BaseModel):
        message_id: DiscordSnowflake
        threshold: PositiveInt
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BeforeValidator, Field

# ── Numeric constraints ─────────────────────────────────────────────

DiscordSnowflake = Annotated[int, Field(gt=0, lt=2**64)]
"""Positive integer that fits a Discord snowflake (1 … 2^64-1)."""

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

PositiveInt = Annotated[int, Field(gt=0)]
"""Integer > 0."""

ConfirmCap = Annotated[int, Field(ge=0, le=10)]
"""Votes required to pin: 0 … 10, where 0 pins on mention."""


# ── Datetime constraints ────────────────────────────────────────────

def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if v.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return v.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""


# ── Pydantic-compatible ID aliases ──────────────────────────────────

MessageIdField = DiscordSnowflake
"""Message ID as a plain Pydantic field."""

UserIdField = DiscordSnowflake
"""User ID as a plain Pydantic field."""

ChannelIdField = DiscordSnowflake
"""Channel ID as a plain Pydantic field."""
