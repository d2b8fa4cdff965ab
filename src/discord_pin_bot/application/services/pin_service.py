"""Pin application service: cooldown gate in front of the pin port."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from discord_pin_bot.domain.shared.exceptions import PinFailedError
from discord_pin_bot.domain.shared.messages import LogTemplates
from discord_pin_bot.domain.voting.value_objects import PinOutcome

if TYPE_CHECKING:
    from ...infrastructure.state.pin_cooldown import PinCooldownTracker
    from ..interfaces.message_pinner import MessagePinner

logger = logging.getLogger(__name__)


class PinApplicationService:
    """Pins messages at most once per channel cooldown window.

    Failures are logged and reported as an outcome; nothing is retried.
    """

    def __init__(self, *, pinner: MessagePinner, cooldowns: PinCooldownTracker) -> None:
        self._pinner = pinner
        self._cooldowns = cooldowns

    async def pin(self, channel_id: int, message_id: int) -> PinOutcome:
        # Reserve before the await; a concurrent pin in the channel sees the slot taken.
        if not self._cooldowns.try_reserve(channel_id):
            logger.warning(LogTemplates.PIN_RATE_LIMITED, channel_id)
            return PinOutcome.RATE_LIMITED

        try:
            await self._pinner.pin(channel_id, message_id)
        except PinFailedError as e:
            self._cooldowns.clear(channel_id)
            logger.error(LogTemplates.PIN_FAILED, message_id, e.reason)
            return PinOutcome.FAILED

        logger.info(LogTemplates.PIN_SUCCEEDED, message_id, channel_id)
        return PinOutcome.PINNED
