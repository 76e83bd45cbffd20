"""Discord voice adapter implementing the voice ports with discord.py."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Future
from typing import Any

import discord

from jukebox_bot.application.interfaces.voice_adapter import (
    StreamFinishedCallback,
    StreamHandle,
    VoiceAdapter,
    VoiceHandle,
)
from jukebox_bot.config.settings import AudioSettings
from jukebox_bot.domain.music.value_objects import ConnectionStatus
from jukebox_bot.domain.shared.exceptions import StreamStartError, VoiceConnectionError
from jukebox_bot.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class DiscordStreamHandle(StreamHandle):
    """Controls one ``FFmpegPCMAudio`` source playing on a voice client.

    Every control is a no-op once the voice client has moved on to another
    source, so a late pause or skip cannot touch the next track.
    """

    def __init__(self, voice_client: discord.VoiceClient, source: discord.AudioSource) -> None:
        self._vc = voice_client
        self._source = source

    @property
    def _is_current(self) -> bool:
        return self._vc.source is self._source

    def pause(self) -> None:
        if self._is_current and self._vc.is_playing():
            self._vc.pause()

    def resume(self) -> None:
        if self._is_current and self._vc.is_paused():
            self._vc.resume()

    def end(self) -> bool:
        # discord.py drops the source on stop, so a second end finds nothing current.
        if not self._is_current:
            return False
        self._vc.stop()
        return True

    @property
    def is_paused(self) -> bool:
        return self._is_current and self._vc.is_paused()


class DiscordVoiceHandle(VoiceHandle):
    def __init__(
        self,
        voice_client: discord.VoiceClient,
        loop: asyncio.AbstractEventLoop,
        settings: AudioSettings,
    ) -> None:
        self._vc = voice_client
        self._loop = loop
        self._settings = settings

    @property
    def voice_client(self) -> discord.VoiceClient:
        return self._vc

    @property
    def guild_id(self) -> int:
        return self._vc.guild.id

    @property
    def status(self) -> ConnectionStatus:
        if self._vc.is_connected():
            return ConnectionStatus.CONNECTED
        return ConnectionStatus.DISCONNECTED

    def play(
        self,
        stream_url: str,
        *,
        volume: float,
        on_finished: StreamFinishedCallback,
    ) -> StreamHandle:
        guild_id = self.guild_id

        if self._vc.is_playing() or self._vc.is_paused():
            self._vc.stop()

        try:
            source = discord.FFmpegPCMAudio(
                stream_url,
                before_options=self._settings.ffmpeg_before_options,
                options=self._settings.ffmpeg_options,
            )
            volume_source = discord.PCMVolumeTransformer(source, volume=volume)
        except (discord.ClientException, OSError) as exc:
            logger.error(LogTemplates.PLAYBACK_ERROR, guild_id, exc)
            raise StreamStartError(guild_id=guild_id) from exc

        def after_callback(error: Exception | None = None) -> None:
            # Runs on the audio player thread; hand off to the event loop.
            if error:
                logger.warning(LogTemplates.PLAYBACK_ERROR, guild_id, error)
            future = asyncio.run_coroutine_threadsafe(on_finished(error), self._loop)
            future.add_done_callback(lambda f: _log_callback_failure(guild_id, f))

        try:
            self._vc.play(volume_source, after=after_callback)
        except discord.ClientException as exc:
            logger.error(LogTemplates.VOICE_CLIENT_ERROR, exc)
            volume_source.cleanup()
            raise StreamStartError(guild_id=guild_id) from exc

        logger.debug(LogTemplates.PLAYBACK_STARTED, stream_url[:60], guild_id)
        return DiscordStreamHandle(self._vc, volume_source)

    async def disconnect(self) -> None:
        await self._vc.disconnect(force=True)
        logger.info(LogTemplates.VOICE_DISCONNECTED, self.guild_id)


def _log_callback_failure(guild_id: int, future: Future[Any]) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.error(LogTemplates.PLAYBACK_CALLBACK_ERROR, guild_id, exc)


class DiscordVoiceAdapter(VoiceAdapter):
    """Joins voice channels through the bot's gateway connection."""

    def __init__(self, bot: discord.Client, settings: AudioSettings | None = None) -> None:
        self._bot = bot
        self._settings = settings or AudioSettings()

    async def connect(self, channel: Any) -> VoiceHandle:
        guild = channel.guild
        vc = guild.voice_client

        if isinstance(vc, discord.VoiceClient) and not vc.is_connected():
            logger.warning(LogTemplates.VOICE_STALE_CLIENT, guild.id)
            try:
                await vc.disconnect(force=True)
            except Exception as exc:
                logger.debug(LogTemplates.VOICE_DISCONNECT_FAILED, guild.id, exc)
            vc = None

        try:
            async with asyncio.timeout(self._settings.connect_timeout_s):
                if isinstance(vc, discord.VoiceClient):
                    if vc.channel is None or vc.channel.id != channel.id:
                        await vc.move_to(channel)
                        logger.info(LogTemplates.VOICE_MOVED, channel.name, guild.name)
                else:
                    vc = await channel.connect(self_deaf=True)
                    logger.info(LogTemplates.VOICE_CONNECTED, channel.name, guild.name)
        except TimeoutError as exc:
            logger.error(LogTemplates.VOICE_CONNECTION_TIMEOUT, channel.id)
            raise VoiceConnectionError(guild_id=guild.id) from exc
        except discord.Forbidden as exc:
            logger.error(LogTemplates.VOICE_NO_PERMISSION, channel.id)
            raise VoiceConnectionError(guild_id=guild.id) from exc
        except discord.ClientException as exc:
            logger.error(LogTemplates.VOICE_CLIENT_ERROR, exc)
            raise VoiceConnectionError(guild_id=guild.id) from exc

        return DiscordVoiceHandle(vc, self._bot.loop, self._settings)
