"""Port interfaces for voice connections and the audio streams playing on them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from jukebox_bot.domain.music.value_objects import ConnectionStatus

StreamFinishedCallback = Callable[[Exception | None], Awaitable[None]]
"""Coroutine function run once on the event loop when a stream ends."""


class StreamHandle(ABC):
    """Controller for one audio stream; pause state lives here, not in the session."""

    @abstractmethod
    def pause(self) -> None:
        ...

    @abstractmethod
    def resume(self) -> None:
        ...

    @abstractmethod
    def end(self) -> bool:
        """Stop the stream early; the finished callback still fires.

        Returns False when the stream had already stopped.
        """
        ...

    @property
    @abstractmethod
    def is_paused(self) -> bool:
        ...


class VoiceHandle(ABC):
    """An established voice connection for one guild."""

    @property
    @abstractmethod
    def status(self) -> ConnectionStatus:
        ...

    @abstractmethod
    def play(
        self,
        stream_url: str,
        *,
        volume: float,
        on_finished: StreamFinishedCallback,
    ) -> StreamHandle:
        """Start streaming audio; ``on_finished`` is awaited exactly once afterwards."""
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        ...


class VoiceAdapter(ABC):
    """Interface for joining voice channels."""

    @abstractmethod
    async def connect(self, channel: Any) -> VoiceHandle:
        """Join (or move to) ``channel`` and return the connection handle.

        Raises:
            VoiceConnectionError: The connection could not be established.
        """
        ...
