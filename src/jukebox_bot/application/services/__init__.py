"""Application services orchestrating domain objects and infrastructure ports."""

from jukebox_bot.application.services.playback_service import (
    EnqueueResult,
    PlaybackSessionManager,
)

__all__ = ["EnqueueResult", "PlaybackSessionManager"]
