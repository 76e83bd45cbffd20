"""Immutable value objects for the music bounded context."""

from __future__ import annotations

from enum import Enum


class PlaybackState(Enum):
    """Playback state of one guild session.

    State transitions:
    - IDLE -> PLAYING (first track starts)
    - PLAYING -> PLAYING (finished or skipped track is followed by the next one)
    - PLAYING -> IDLE (queue ran dry, or leave)
    - IDLE -> IDLE (leave while idle)

    Pause is a property of the live stream, not a session state.
    """

    IDLE = "idle"
    PLAYING = "playing"

    def can_transition_to(self, target: PlaybackState) -> bool:
        valid_transitions = {
            PlaybackState.IDLE: {PlaybackState.IDLE, PlaybackState.PLAYING},
            PlaybackState.PLAYING: {PlaybackState.PLAYING, PlaybackState.IDLE},
        }
        return target in valid_transitions.get(self, set())


class ConnectionStatus(Enum):
    """Status reported by a voice handle."""

    CONNECTED = "connected"
    CONNECTING = "connecting"
    DISCONNECTED = "disconnected"
