"""Playback session manager - per-guild queues driven by stream completion."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...domain.music.entities import GuildSession, QueueEntry, Track
from ...domain.music.value_objects import ConnectionStatus
from ...domain.shared.constants import AudioConstants, LimitConstants
from ...domain.shared.exceptions import (
    NoActiveVoiceSessionError,
    NotInVoiceChannelError,
    NotJoinedError,
    PlaybackError,
    SessionStaleError,
    TrackResolutionError,
)
from ...domain.shared.messages import DiscordUIMessages, LogTemplates
from ...domain.shared.types import DiscordSnowflake

if TYPE_CHECKING:
    from ..interfaces.announcer import Announcer
    from ..interfaces.audio_resolver import AudioResolver
    from ..interfaces.voice_adapter import StreamHandle, VoiceAdapter, VoiceHandle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnqueueResult:
    """Outcome of a play request.

    ``position`` is the one-based queue position when the track was only
    queued, and None when it started playing right away.
    """

    track: Track
    started: bool
    position: int | None = None


class PlaybackSessionManager:
    """Owns one ``GuildSession`` per guild and moves tracks from queue to stream.

    Each session's ``lock`` serialises the decision to start or just queue a
    track and the on-track-finished transition, so two play requests racing
    on an idle guild cannot both start a stream.
    """

    def __init__(
        self,
        *,
        voice_adapter: VoiceAdapter,
        audio_resolver: AudioResolver,
        volume: float = AudioConstants.VOLUME,
    ) -> None:
        self._voice_adapter = voice_adapter
        self._audio_resolver = audio_resolver
        self._volume = volume
        self._sessions: dict[DiscordSnowflake, GuildSession] = {}

    @property
    def sessions(self) -> Mapping[DiscordSnowflake, GuildSession]:
        return self._sessions

    def get_session(self, guild_id: DiscordSnowflake) -> GuildSession | None:
        return self._sessions.get(guild_id)

    # ─────────────────────────────────────────────────────────────────
    # Voice connection
    # ─────────────────────────────────────────────────────────────────

    async def join(
        self,
        guild_id: DiscordSnowflake,
        voice_channel: Any | None,
        *,
        announcer: Announcer | None = None,
    ) -> VoiceHandle:
        """Connect to the requester's voice channel and store the handle.

        Raises:
            NotInVoiceChannelError: The requester is not in a voice channel.
            VoiceConnectionError: The voice connection failed.
        """
        if voice_channel is None:
            raise NotInVoiceChannelError(guild_id=guild_id)

        handle = await self._voice_adapter.connect(voice_channel)

        session = self._sessions.get(guild_id)
        if session is None:
            session = GuildSession(guild_id=guild_id)
            self._sessions[guild_id] = session
            logger.info(LogTemplates.SESSION_JOINED, guild_id)
        else:
            logger.info(LogTemplates.SESSION_REJOINED, guild_id)

        session.voice = handle
        if announcer is not None:
            session.announcer = announcer
        return handle

    async def leave(self, guild_id: DiscordSnowflake) -> int:
        """Clear the session and disconnect; returns the number of dropped tracks.

        Raises:
            NotJoinedError: There is no connected voice handle for the guild.
        """
        session = self._sessions.get(guild_id)
        if session is None or session.voice is None or not session.is_connected:
            raise NotJoinedError(guild_id=guild_id)

        async with session.lock:
            dropped = session.reset()
            await session.voice.disconnect()

        logger.info(LogTemplates.SESSION_LEFT, guild_id, dropped)
        return dropped

    async def shutdown(self) -> None:
        """Disconnect every connected session (bot shutdown)."""
        connected = [s for s in self._sessions.values() if s.is_connected]
        if connected:
            logger.info(LogTemplates.SHUTDOWN_DISCONNECT, len(connected))

        for session in connected:
            voice = session.voice
            session.reset()
            if voice is None:
                continue
            try:
                await voice.disconnect()
            except Exception as exc:
                logger.warning(LogTemplates.VOICE_DISCONNECT_FAILED, session.guild_id, exc)

    # ─────────────────────────────────────────────────────────────────
    # Queue
    # ─────────────────────────────────────────────────────────────────

    async def enqueue_and_maybe_start(
        self,
        guild_id: DiscordSnowflake,
        query: str,
        *,
        announcer: Announcer | None = None,
    ) -> EnqueueResult:
        """Resolve ``query``, append it to the queue and start playback if idle.

        Raises:
            NoActiveVoiceSessionError: ``join`` was never called for the guild.
            SessionStaleError: The voice handle has been disconnected.
            TrackResolutionError: The URL or query could not be resolved.
        """
        session = self._require_live_session(guild_id)
        if announcer is not None:
            session.announcer = announcer

        try:
            track = await self._audio_resolver.resolve(query)
        except TrackResolutionError as exc:
            logger.warning(
                LogTemplates.YTDLP_RESOLUTION_FAILED,
                query[: LimitConstants.LOG_QUERY_TRUNCATE],
                exc.reason,
            )
            exc.guild_id = guild_id
            raise

        async with session.lock:
            # The voice handle may have dropped while metadata was being fetched.
            if session.voice_status == ConnectionStatus.DISCONNECTED:
                raise SessionStaleError(guild_id=guild_id)

            position = session.enqueue(track)
            logger.info(LogTemplates.TRACK_QUEUED, track.title, guild_id, position)

            if session.is_playing:
                return EnqueueResult(track=track, started=False, position=position)

            await self._advance_locked(session)
            return EnqueueResult(track=track, started=True)

    def inspect_queue(self, guild_id: DiscordSnowflake) -> list[QueueEntry]:
        """Pending (not yet started) tracks with one-based positions."""
        session = self._sessions.get(guild_id)
        if session is None:
            return []
        return session.pending()

    # ─────────────────────────────────────────────────────────────────
    # Advancing
    # ─────────────────────────────────────────────────────────────────

    async def advance(self, guild_id: DiscordSnowflake) -> Track | None:
        """Start the next queued track; returns it, or None when the queue is empty."""
        session = self._sessions.get(guild_id)
        if session is None:
            raise NoActiveVoiceSessionError(guild_id=guild_id)

        async with session.lock:
            return await self._advance_locked(session)

    async def _advance_locked(self, session: GuildSession) -> Track | None:
        """Pop queue heads until one starts streaming. Caller holds ``session.lock``."""
        while True:
            track = session.begin_next_track()
            if track is None:
                logger.info(LogTemplates.QUEUE_EXHAUSTED, session.guild_id)
                await self._announce(session, DiscordUIMessages.QUEUE_EMPTY_AFTER_PLAYBACK)
                return None

            logger.info(
                LogTemplates.TRACK_STARTING, track.title, session.guild_id, session.queue_length
            )
            await self._announce(session, DiscordUIMessages.NOW_PLAYING.format(title=track.title))

            try:
                stream = await self._open_stream(session, track)
            except SessionStaleError:
                session.reset()
                raise
            except Exception as exc:
                # Unexpected errors skip the track like any stream failure.
                if isinstance(exc, PlaybackError):
                    logger.warning(
                        LogTemplates.TRACK_STREAM_FAILED, track.title, session.guild_id, exc
                    )
                else:
                    logger.exception(
                        LogTemplates.TRACK_STREAM_FAILED, track.title, session.guild_id, exc
                    )
                await self._announce(
                    session, DiscordUIMessages.STREAM_FAILED.format(title=track.title)
                )
                continue

            session.attach_stream(stream)
            return track

    async def _open_stream(self, session: GuildSession, track: Track) -> StreamHandle:
        stream_url = await self._audio_resolver.audio_stream_url(track)

        voice = session.voice
        if voice is None or voice.status != ConnectionStatus.CONNECTED:
            raise SessionStaleError(guild_id=session.guild_id)

        stream: StreamHandle | None = None

        async def on_finished(error: Exception | None) -> None:
            await self._on_stream_finished(session.guild_id, stream, error)

        stream = voice.play(stream_url, volume=self._volume, on_finished=on_finished)
        return stream

    async def _on_stream_finished(
        self,
        guild_id: DiscordSnowflake,
        stream: StreamHandle | None,
        error: Exception | None,
    ) -> None:
        session = self._sessions.get(guild_id)
        if session is None:
            return

        async with session.lock:
            if stream is None or not session.owns_stream(stream):
                logger.debug(LogTemplates.STALE_STREAM_CALLBACK, guild_id)
                return

            logger.info(LogTemplates.TRACK_FINISHED, guild_id, error)
            try:
                await self._advance_locked(session)
            except SessionStaleError:
                # Voice dropped mid-queue; the session is already reset.
                logger.warning(LogTemplates.PLAYBACK_ERROR, guild_id, "voice disconnected")

    # ─────────────────────────────────────────────────────────────────
    # Stream controls
    # ─────────────────────────────────────────────────────────────────

    async def pause(self, guild_id: DiscordSnowflake) -> bool:
        stream = self._active_stream(guild_id)
        if stream is None:
            return False
        stream.pause()
        logger.info(LogTemplates.PLAYBACK_PAUSED, guild_id)
        return True

    async def resume(self, guild_id: DiscordSnowflake) -> bool:
        stream = self._active_stream(guild_id)
        if stream is None:
            return False
        stream.resume()
        logger.info(LogTemplates.PLAYBACK_RESUMED, guild_id)
        return True

    async def skip(self, guild_id: DiscordSnowflake) -> bool:
        """End the current stream; the completion callback advances the queue.

        Returns False when nothing was stopped, including a stream that already
        ended but whose completion has not run yet.
        """
        stream = self._active_stream(guild_id)
        if stream is None or not stream.end():
            return False
        logger.info(LogTemplates.PLAYBACK_SKIPPED, guild_id)
        return True

    # ─────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────

    def _active_stream(self, guild_id: DiscordSnowflake) -> StreamHandle | None:
        session = self._sessions.get(guild_id)
        return session.stream if session is not None else None

    def _require_live_session(self, guild_id: DiscordSnowflake) -> GuildSession:
        session = self._sessions.get(guild_id)
        if session is None or session.voice is None:
            raise NoActiveVoiceSessionError(guild_id=guild_id)
        if session.voice.status == ConnectionStatus.DISCONNECTED:
            raise SessionStaleError(guild_id=guild_id)
        return session

    async def _announce(self, session: GuildSession, content: str) -> None:
        if session.announcer is None:
            return
        try:
            await session.announcer.send(content)
        except Exception as exc:
            logger.warning(LogTemplates.ANNOUNCE_FAILED, session.guild_id, exc)
