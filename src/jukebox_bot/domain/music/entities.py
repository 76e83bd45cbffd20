"""Core domain entities for the music bounded context."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from jukebox_bot.domain.music.value_objects import ConnectionStatus, PlaybackState
from jukebox_bot.domain.shared.exceptions import InvalidOperationError
from jukebox_bot.domain.shared.types import (
    DiscordSnowflake,
    HttpUrlStr,
    QueuePositionInt,
    TrackTitleStr,
)

if TYPE_CHECKING:
    from jukebox_bot.application.interfaces.announcer import Announcer
    from jukebox_bot.application.interfaces.voice_adapter import StreamHandle, VoiceHandle


class Track(BaseModel):
    """Immutable description of a playable track.

    ``source_url`` is the page URL the track was requested with (or the page
    a search resolved to); the audio stream URL is looked up again when the
    track starts, since those expire.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    title: TrackTitleStr
    source_url: HttpUrlStr


class QueueEntry(BaseModel):
    """A pending track and its one-based position in the queue."""

    model_config = ConfigDict(frozen=True)

    position: QueuePositionInt
    track: Track


@dataclass(eq=False)
class GuildSession:
    """Playback state for a single guild.

    ``queue`` holds only tracks that have not started yet; the track being
    streamed is popped into ``current_track`` the moment it starts.
    """

    guild_id: DiscordSnowflake
    voice: VoiceHandle | None = None
    announcer: Announcer | None = None
    queue: list[Track] = field(default_factory=list)
    current_track: Track | None = None
    stream: StreamHandle | None = None
    state: PlaybackState = PlaybackState.IDLE
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    @property
    def is_playing(self) -> bool:
        return self.state == PlaybackState.PLAYING

    @property
    def queue_length(self) -> int:
        return len(self.queue)

    @property
    def voice_status(self) -> ConnectionStatus | None:
        return self.voice.status if self.voice is not None else None

    @property
    def is_connected(self) -> bool:
        return self.voice_status == ConnectionStatus.CONNECTED

    def enqueue(self, track: Track) -> int:
        """Append a track and return its one-based queue position."""
        self.queue.append(track)
        return len(self.queue)

    def begin_next_track(self) -> Track | None:
        """Pop the queue head into ``current_track``.

        Returns None and goes idle when the queue is empty.
        """
        self.stream = None
        if not self.queue:
            self.current_track = None
            self._transition_to(PlaybackState.IDLE)
            return None

        track = self.queue.pop(0)
        self.current_track = track
        self._transition_to(PlaybackState.PLAYING)
        return track

    def attach_stream(self, stream: StreamHandle) -> None:
        if not self.is_playing:
            raise InvalidOperationError(operation="attach stream", current_state=self.state.value)
        self.stream = stream

    def owns_stream(self, stream: StreamHandle) -> bool:
        return self.stream is not None and self.stream is stream

    def reset(self) -> int:
        """Drop queued tracks and the active stream; return how many tracks were dropped."""
        dropped = len(self.queue)
        self.queue.clear()
        self.current_track = None
        self.stream = None
        self._transition_to(PlaybackState.IDLE)
        return dropped

    def pending(self) -> list[QueueEntry]:
        return [
            QueueEntry(position=index, track=track)
            for index, track in enumerate(self.queue, start=1)
        ]

    def _transition_to(self, new_state: PlaybackState) -> None:
        if not self.state.can_transition_to(new_state):
            raise InvalidOperationError(
                operation=f"transition to {new_state.value}",
                current_state=self.state.value,
            )
        self.state = new_state
