"""
Application Interfaces (Ports)

Abstract interfaces implemented by infrastructure adapters.
"""

from discord_pin_bot.application.interfaces.message_pinner import MessagePinner

__all__ = [
    "MessagePinner",
]
