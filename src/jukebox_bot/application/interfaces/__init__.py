"""Ports implemented by the infrastructure layer."""

from jukebox_bot.application.interfaces.announcer import Announcer
from jukebox_bot.application.interfaces.audio_resolver import AudioResolver
from jukebox_bot.application.interfaces.voice_adapter import (
    StreamFinishedCallback,
    StreamHandle,
    VoiceAdapter,
    VoiceHandle,
)

__all__ = [
    "Announcer",
    "AudioResolver",
    "StreamFinishedCallback",
    "StreamHandle",
    "VoiceAdapter",
    "VoiceHandle",
]
