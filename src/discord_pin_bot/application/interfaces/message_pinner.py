"""Port interface for pinning chat messages."""

from __future__ import annotations

from abc import ABC, abstractmethod

from discord_pin_bot.domain.shared.types import ChannelIdField, MessageIdField


class MessagePinner(ABC):
    """Interface for the platform's pin endpoint."""

    @abstractmethod
    async def pin(self, channel_id: ChannelIdField, message_id: MessageIdField) -> None:
        """Pin a message.

        Raises:
            PinFailedError: If the platform rejects the pin (already pinned,
                pin limit reached, missing permission, transient failure).
        """
        ...
