"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Discord (bot, cogs, voice adapter)
- Audio (yt-dlp resolver)
"""

from jukebox_bot.infrastructure.discord.adapters.voice_adapter import DiscordVoiceAdapter
from jukebox_bot.infrastructure.discord.bot import create_bot

__all__ = [
    "create_bot",
    "DiscordVoiceAdapter",
]
