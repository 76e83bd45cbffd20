"""Application Settings and Configuration

Pydantic-based settings loaded from environment variables and an optional
``.env`` file. Nested groups use ``__`` as delimiter, e.g.
``DISCORD__TOKEN`` or ``AUDIO__YTDLP_FORMAT``. All settings are frozen after
initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import CommandPrefixStr, NonEmptyStr


class DiscordSettings(BaseModel):
    """Discord bot configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token: SecretStr = Field(
        default=SecretStr(""), validation_alias=AliasChoices("token", "bot_token", "discord_token")
    )
    command_prefix: CommandPrefixStr = Field(
        default="!",
        validation_alias=AliasChoices("command_prefix", "prefix"),
    )

    @field_validator("command_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Reject prefixes containing whitespace; the command would never parse."""
        if any(ch.isspace() for ch in v):
            raise ValueError(ErrorMessages.INVALID_COMMAND_PREFIX)
        return v


class AudioSettings(BaseModel):
    """yt-dlp and ffmpeg configuration for audio streaming."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ytdlp_format: NonEmptyStr = "bestaudio/best"
    ffmpeg_before_options: str = "-reconnect 1 -reconnect_streamed 1 -reconnect_delay_max 5"
    ffmpeg_options: str = "-vn"
    connect_timeout_s: float = Field(
        default=10.0,
        gt=0.0,
        le=60.0,
        validation_alias=AliasChoices("connect_timeout_s", "connect_timeout"),
    )


class ReplySettings(BaseModel):
    """Keyword reply configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True


class Settings(BaseSettings):
    """Application settings container.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - DISCORD__TOKEN, DISCORD__COMMAND_PREFIX (nested)
    - AUDIO__YTDLP_FORMAT, AUDIO__FFMPEG_OPTIONS, ... (nested)
    - REPLIES__ENABLED (nested)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)
    replies: ReplySettings = Field(default_factory=ReplySettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=sorted(valid_levels))
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Sources, highest priority first: environment variables, ``.env``, defaults.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
