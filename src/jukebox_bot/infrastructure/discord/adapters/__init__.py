"""discord.py implementations of the voice ports."""

from jukebox_bot.infrastructure.discord.adapters.voice_adapter import (
    DiscordStreamHandle,
    DiscordVoiceAdapter,
    DiscordVoiceHandle,
)

__all__ = ["DiscordStreamHandle", "DiscordVoiceAdapter", "DiscordVoiceHandle"]
