"""
Music Bounded Context

Tracks, per-guild sessions and their playback state.
"""

from jukebox_bot.domain.music.entities import GuildSession, QueueEntry, Track
from jukebox_bot.domain.music.value_objects import ConnectionStatus, PlaybackState

__all__ = [
    "Track",
    "QueueEntry",
    "GuildSession",
    "PlaybackState",
    "ConnectionStatus",
]
