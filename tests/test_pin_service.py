"""Tests for PinApplicationService."""

import asyncio
from datetime import timedelta

import pytest

from discord_pin_bot.application.services.pin_service import PinApplicationService
from discord_pin_bot.domain.shared.datetime_utils import utcnow
from discord_pin_bot.domain.shared.exceptions import PinFailedError
from discord_pin_bot.domain.voting.value_objects import PinOutcome
from discord_pin_bot.infrastructure.state.pin_cooldown import PinCooldownTracker

CHANNEL_ID = 700000000000000001
MESSAGE_ID = 700000000000000002


class TestPinApplicationService:
    @pytest.mark.asyncio
    async def test_pin_success_marks_cooldown(self, pin_service, mock_pinner, pin_cooldowns):
        outcome = await pin_service.pin(CHANNEL_ID, MESSAGE_ID)

        assert outcome is PinOutcome.PINNED
        mock_pinner.pin.assert_awaited_once_with(CHANNEL_ID, MESSAGE_ID)
        assert pin_cooldowns.is_blocked(CHANNEL_ID)

    @pytest.mark.asyncio
    async def test_pin_blocked_during_cooldown(self, pin_service, mock_pinner, pin_cooldowns):
        pin_cooldowns.mark_pinned(CHANNEL_ID)

        outcome = await pin_service.pin(CHANNEL_ID, MESSAGE_ID)

        assert outcome is PinOutcome.RATE_LIMITED
        mock_pinner.pin.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cooldown_is_per_channel(self, pin_service, mock_pinner, pin_cooldowns):
        pin_cooldowns.mark_pinned(CHANNEL_ID)

        outcome = await pin_service.pin(CHANNEL_ID + 1, MESSAGE_ID)

        assert outcome is PinOutcome.PINNED

    @pytest.mark.asyncio
    async def test_pin_allowed_after_cooldown(self, pin_service, pin_cooldowns):
        pin_cooldowns.mark_pinned(CHANNEL_ID, pinned_at=utcnow() - timedelta(seconds=6))

        assert await pin_service.pin(CHANNEL_ID, MESSAGE_ID) is PinOutcome.PINNED

    @pytest.mark.asyncio
    async def test_failure_is_reported_not_raised(self, pin_service, mock_pinner, pin_cooldowns):
        mock_pinner.pin.side_effect = PinFailedError(MESSAGE_ID, "not_found")

        outcome = await pin_service.pin(CHANNEL_ID, MESSAGE_ID)

        assert outcome is PinOutcome.FAILED
        assert not pin_cooldowns.is_blocked(CHANNEL_ID)

    @pytest.mark.asyncio
    async def test_zero_cooldown_never_blocks(self, mock_pinner):
        service = PinApplicationService(
            pinner=mock_pinner, cooldowns=PinCooldownTracker(cooldown_seconds=0)
        )

        assert await service.pin(CHANNEL_ID, MESSAGE_ID) is PinOutcome.PINNED
        assert await service.pin(CHANNEL_ID, MESSAGE_ID) is PinOutcome.PINNED
        assert mock_pinner.pin.await_count == 2

    @pytest.mark.asyncio
    async def test_concurrent_pins_in_one_channel_pin_once(self, pin_service, mock_pinner):
        """Two thresholds landing together in a channel produce a single pin call."""

        async def slow_pin(_channel_id, _message_id):
            await asyncio.sleep(0.01)

        mock_pinner.pin.side_effect = slow_pin

        outcomes = await asyncio.gather(
            pin_service.pin(CHANNEL_ID, MESSAGE_ID),
            pin_service.pin(CHANNEL_ID, MESSAGE_ID + 1),
        )

        assert sorted(o.value for o in outcomes) == ["pinned", "rate_limited"]
        assert mock_pinner.pin.await_count == 1

    @pytest.mark.asyncio
    async def test_failed_pin_releases_channel(self, pin_service, mock_pinner):
        mock_pinner.pin.side_effect = [PinFailedError(MESSAGE_ID, "http_error"), None]

        first = await pin_service.pin(CHANNEL_ID, MESSAGE_ID)
        second = await pin_service.pin(CHANNEL_ID, MESSAGE_ID + 1)

        assert first is PinOutcome.FAILED
        assert second is PinOutcome.PINNED
