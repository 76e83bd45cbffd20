"""Voice channel guard functions for Discord cogs."""

from jukebox_bot.infrastructure.discord.guards.voice_guards import (
    get_member,
    member_voice_channel,
)

__all__ = [
    "get_member",
    "member_voice_channel",
]
