"""Shared constants that are not user-configurable."""

from __future__ import annotations

from typing import Final


class AudioConstants:
    """Fixed audio playback parameters."""

    # Output gain for every stream; first playback is otherwise uncomfortably loud.
    VOLUME: Final[float] = 0.5


class CommandNames:
    """Prefix-relative chat command names."""

    JOIN: Final[str] = "join"
    PLAY: Final[str] = "p"
    RESUME: Final[str] = "resume"
    PAUSE: Final[str] = "pause"
    SKIP: Final[str] = "s"
    QUEUE: Final[str] = "queue"
    LEAVE: Final[str] = "leave"


class LimitConstants:
    """Output size limits imposed by Discord."""

    MESSAGE_MAX_LENGTH: Final[int] = 2000
    TITLE_TRUNCATION: Final[int] = 90
    LOG_QUERY_TRUNCATE: Final[int] = 60
