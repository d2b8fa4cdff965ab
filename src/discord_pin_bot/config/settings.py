"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization, so the confirm cap read at startup holds for the whole
process lifetime.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.constants import Emojis, TimeConstants
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import ConfirmCap


class DiscordSettings(BaseModel):
    """Discord bot configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    command_prefix: str = Field(
        default="!",
        min_length=1,
        max_length=5,
        validation_alias=AliasChoices("command_prefix", "prefix"),
    )


class VotingSettings(BaseModel):
    """Pin voting configuration."""

    model_config = ConfigDict(frozen=True)

    vote_emoji: str = Field(default=Emojis.VOTE, min_length=1)
    session_max_age_seconds: int = Field(default=TimeConstants.SESSION_MAX_AGE_SECONDS, ge=1)
    sweep_interval_seconds: int = Field(default=TimeConstants.SWEEP_INTERVAL_SECONDS, ge=1)
    pin_cooldown_seconds: int = Field(default=TimeConstants.PIN_COOLDOWN_SECONDS, ge=0)
    reaction_delay_ms: int = Field(default=TimeConstants.REACTION_DELAY_MS, ge=0, le=5000)


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - TOKEN (or DISCORD_TOKEN), CONFIRM_CAP, LOG_LEVEL (top-level)
    - DISCORD__COMMAND_PREFIX (nested with delimiter)
    - VOTING__VOTE_EMOJI, VOTING__PIN_COOLDOWN_SECONDS, etc.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    log_level: str = "INFO"

    token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("token", "discord_token", "bot_token"),
    )
    confirm_cap: ConfirmCap = 3

    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    voting: VotingSettings = Field(default_factory=VotingSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
