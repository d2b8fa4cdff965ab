"""Centralized constants for emojis and timing defaults."""

from __future__ import annotations


class Emojis:
    """Emojis the bot reacts with on ballot messages."""

    VOTE = "✅"
    UNKNOWN_COUNT = "❓"

    # Keycaps for thresholds 1 … 10
    NUMBERS: tuple[str, ...] = (
        "1️⃣",
        "2️⃣",
        "3️⃣",
        "4️⃣",
        "5️⃣",
        "6️⃣",
        "7️⃣",
        "8️⃣",
        "9️⃣",
        "🔟",
    )

    @classmethod
    def for_count(cls, count: int) -> str | None:
        """Return the keycap emoji for ``count`` or None when out of range."""
        if count < 1 or count > len(cls.NUMBERS):
            return None
        return cls.NUMBERS[count - 1]


class TimeConstants:
    """Timing defaults shared by settings and background jobs."""

    PIN_COOLDOWN_SECONDS = 5
    SWEEP_INTERVAL_SECONDS = 300
    SESSION_MAX_AGE_SECONDS = 3600
    REACTION_DELAY_MS = 100
    SHUTDOWN_TIMEOUT_SECONDS = 30.0
