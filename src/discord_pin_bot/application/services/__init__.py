"""Application services."""

from discord_pin_bot.application.services.pin_service import PinApplicationService

__all__ = [
    "PinApplicationService",
]
