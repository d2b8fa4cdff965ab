"""Per-channel pin cooldown.

Remembers when the bot last pinned in each channel so bursts of completed
votes don't hammer the pin endpoint.

This is intentionally in-memory; it resets on bot restart.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from math import ceil

from discord_pin_bot.domain.shared.datetime_utils import ensure_aware, utcnow
from discord_pin_bot.domain.shared.messages import ErrorMessages


@dataclass
class PinCooldownTracker:
    """Tracks the last successful pin per channel.

    A channel is blocked for ``cooldown_seconds`` after each pin.
    """

    cooldown_seconds: int = 5

    def __post_init__(self) -> None:
        if self.cooldown_seconds < 0:
            raise ValueError(ErrorMessages.INVALID_COOLDOWN_SECONDS)
        self._last_pin: dict[int, datetime] = {}

    def mark_pinned(self, channel_id: int, pinned_at: datetime | None = None) -> None:
        """Record a successful pin in a channel."""
        when = pinned_at or utcnow()
        self._last_pin[channel_id] = ensure_aware(when, ErrorMessages.TIMEZONE_REQUIRED_PINNED_AT)

    def remaining_seconds(self, channel_id: int, now: datetime | None = None) -> int:
        """Seconds until the channel may be pinned again, or 0."""
        last = self._last_pin.get(channel_id)
        if last is None or self.cooldown_seconds == 0:
            return 0

        current = ensure_aware(now or utcnow())
        ready_at = last + timedelta(seconds=self.cooldown_seconds)
        remaining = (ready_at - current).total_seconds()
        return ceil(remaining) if remaining > 0 else 0

    def is_blocked(self, channel_id: int, now: datetime | None = None) -> bool:
        return self.remaining_seconds(channel_id, now=now) > 0

    def try_reserve(self, channel_id: int, now: datetime | None = None) -> bool:
        """Claim the channel's next pin slot, or return False while it is cooling down.

        Check and mark happen without yielding, so concurrent callers in the
        same channel cannot both get through.
        """
        current = ensure_aware(now or utcnow())
        if self.is_blocked(channel_id, now=current):
            return False
        self.mark_pinned(channel_id, pinned_at=current)
        return True

    def clear(self, channel_id: int) -> None:
        """Release a reservation whose pin failed."""
        self._last_pin.pop(channel_id, None)
