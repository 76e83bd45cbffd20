"""Port interface for resolving tracks and their audio streams."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from jukebox_bot.domain.shared.types import NonEmptyStr

if TYPE_CHECKING:
    from ...domain.music.entities import Track


class AudioResolver(ABC):
    """Interface for turning user input into tracks and tracks into audio streams."""

    @abstractmethod
    async def resolve(self, query: NonEmptyStr) -> "Track":
        """Resolve a URL or search query to a track.

        Raises:
            TrackResolutionError: The URL is malformed or the lookup failed.
        """
        ...

    @abstractmethod
    async def audio_stream_url(self, track: "Track") -> str:
        """Return a direct audio-only stream URL for the track.

        Raises:
            TrackResolutionError: No audio stream could be found.
        """
        ...

    @abstractmethod
    def is_url(self, query: NonEmptyStr) -> bool:
        ...
