from unittest.mock import AsyncMock, MagicMock

import pytest

# ============================================================================
# State Fixtures
# ============================================================================


@pytest.fixture
def session_store():
    """Create an empty in-memory voting session store."""
    from discord_pin_bot.infrastructure.state.voting_session_store import (
        InMemoryVotingSessionStore,
    )

    return InMemoryVotingSessionStore()


@pytest.fixture
def pin_cooldowns():
    """Create a pin cooldown tracker with the default 5 second window."""
    from discord_pin_bot.infrastructure.state.pin_cooldown import PinCooldownTracker

    return PinCooldownTracker(cooldown_seconds=5)


# ============================================================================
# Adapter / Service Fixtures
# ============================================================================


@pytest.fixture
def mock_pinner():
    """Create a MessagePinner double whose pin() succeeds."""
    from discord_pin_bot.application.interfaces.message_pinner import MessagePinner

    pinner = MagicMock(spec=MessagePinner)
    pinner.pin = AsyncMock(return_value=None)
    return pinner


@pytest.fixture
def pin_service(mock_pinner, pin_cooldowns):
    """Create a pin service wired to the mock pinner."""
    from discord_pin_bot.application.services.pin_service import PinApplicationService

    return PinApplicationService(pinner=mock_pinner, cooldowns=pin_cooldowns)

