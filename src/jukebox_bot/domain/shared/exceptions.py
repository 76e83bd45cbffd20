"""Domain-level errors, including the playback error taxonomy reported to users."""

from __future__ import annotations

from jukebox_bot.domain.shared.messages import DiscordUIMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidOperationError(DomainError):
    """Raised when an operation is invalid in the current state."""

    def __init__(self, operation: str, current_state: str, message: str | None = None) -> None:
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(msg, code="INVALID_OPERATION")
        self.operation = operation
        self.current_state = current_state


class PlaybackError(DomainError):
    """A playback command could not run; ``message`` is shown to the user as-is."""

    default_message: str = DiscordUIMessages.ERROR_GENERIC

    def __init__(self, message: str | None = None, *, guild_id: int | None = None) -> None:
        super().__init__(message or self.default_message)
        self.guild_id = guild_id


class NotInVoiceChannelError(PlaybackError):
    default_message = DiscordUIMessages.ERROR_JOIN_CHANNEL_FIRST


class NoActiveVoiceSessionError(PlaybackError):
    default_message = DiscordUIMessages.ERROR_USE_JOIN_FIRST


class SessionStaleError(PlaybackError):
    default_message = DiscordUIMessages.ERROR_USE_JOIN_TO_REJOIN


class NotJoinedError(PlaybackError):
    default_message = DiscordUIMessages.ERROR_NOT_JOINED


class VoiceConnectionError(PlaybackError):
    default_message = DiscordUIMessages.ERROR_COULD_NOT_JOIN_VOICE


class StreamStartError(PlaybackError):
    """The voice connection refused to start an audio stream."""

    default_message = DiscordUIMessages.ERROR_GENERIC


class TrackResolutionError(PlaybackError):
    """Metadata lookup failed for a URL or search query."""

    def __init__(self, query: str, reason: str | None = None, *, guild_id: int | None = None) -> None:
        super().__init__(
            DiscordUIMessages.ERROR_TRACK_NOT_FOUND.format(query=query), guild_id=guild_id
        )
        self.query = query
        self.reason = reason
