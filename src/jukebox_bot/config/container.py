"""Dependency Injection Container

Holds the application's object graph. Components are created lazily on first
access and cached, so tests can swap any of them in before the bot starts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from discord.ext.commands import Bot

    from ..application.interfaces.audio_resolver import AudioResolver
    from ..application.interfaces.voice_adapter import VoiceAdapter
    from ..application.services.playback_service import PlaybackSessionManager
    from ..domain.replies.services import KeywordReplyMatcher
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    The voice adapter needs the bot (for its event loop), so ``set_bot`` must
    run before ``voice_adapter`` or ``playback_manager`` is first used.
    """

    settings: Settings
    _bot: Bot | None = None

    # Infrastructure adapters
    _audio_resolver: AudioResolver | None = None
    _voice_adapter: VoiceAdapter | None = None

    # Application / domain services
    _playback_manager: PlaybackSessionManager | None = None
    _keyword_matcher: KeywordReplyMatcher | None = None

    def set_bot(self, bot: Bot) -> None:
        """Set the Discord bot instance."""
        self._bot = bot

    @property
    def bot(self) -> Bot:
        """Get the Discord bot instance."""
        if self._bot is None:
            raise RuntimeError(ErrorMessages.BOT_NOT_INITIALIZED)
        return self._bot

    # === Adapters ===

    @property
    def audio_resolver(self) -> AudioResolver:
        if self._audio_resolver is None:
            from ..infrastructure.audio.ytdlp_resolver import YtDlpResolver

            self._audio_resolver = YtDlpResolver(self.settings.audio)
        return self._audio_resolver

    @property
    def voice_adapter(self) -> VoiceAdapter:
        if self._voice_adapter is None:
            from ..infrastructure.discord.adapters.voice_adapter import DiscordVoiceAdapter

            self._voice_adapter = DiscordVoiceAdapter(self.bot, self.settings.audio)
        return self._voice_adapter

    # === Services ===

    @property
    def playback_manager(self) -> PlaybackSessionManager:
        """Get the per-guild playback session manager."""
        if self._playback_manager is None:
            from ..application.services.playback_service import PlaybackSessionManager

            self._playback_manager = PlaybackSessionManager(
                voice_adapter=self.voice_adapter,
                audio_resolver=self.audio_resolver,
            )
        return self._playback_manager

    @property
    def keyword_matcher(self) -> KeywordReplyMatcher:
        if self._keyword_matcher is None:
            from ..domain.replies.services import KeywordReplyMatcher

            self._keyword_matcher = KeywordReplyMatcher()
        return self._keyword_matcher

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Build the eager parts of the graph so wiring errors surface at startup."""
        _ = self.playback_manager
        _ = self.keyword_matcher

    async def shutdown(self) -> None:
        """Disconnect every voice session and drop cached components."""
        if self._playback_manager is not None:
            try:
                await self._playback_manager.shutdown()
            except Exception as exc:
                logger.warning(LogTemplates.BOT_CONTAINER_SHUTDOWN_ERROR, exc)

        self._playback_manager = None
        self._voice_adapter = None


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
