"""Discord cogs - command handlers and listeners."""

from jukebox_bot.infrastructure.discord.cogs.event_cog import EventCog
from jukebox_bot.infrastructure.discord.cogs.keyword_cog import KeywordCog
from jukebox_bot.infrastructure.discord.cogs.music_cog import MusicCog

__all__ = [
    "EventCog",
    "KeywordCog",
    "MusicCog",
]
