"""
Shared Domain Kernel

Exceptions, constants, message catalogs and constrained types shared by the
music and replies contexts.
"""

from jukebox_bot.domain.shared.exceptions import (
    DomainError,
    InvalidOperationError,
    NoActiveVoiceSessionError,
    NotInVoiceChannelError,
    NotJoinedError,
    PlaybackError,
    SessionStaleError,
    StreamStartError,
    TrackResolutionError,
    VoiceConnectionError,
)

__all__ = [
    "DomainError",
    "InvalidOperationError",
    "PlaybackError",
    "NotInVoiceChannelError",
    "NoActiveVoiceSessionError",
    "SessionStaleError",
    "StreamStartError",
    "TrackResolutionError",
    "NotJoinedError",
    "VoiceConnectionError",
]
