"""
Unit Tests for the dependency injection Container

- lazy creation and caching of adapters and services
- bot wiring
- initialize / shutdown lifecycle
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from jukebox_bot.application.services.playback_service import PlaybackSessionManager
from jukebox_bot.config.container import Container, create_container
from jukebox_bot.config.settings import Settings
from jukebox_bot.domain.replies.services import KeywordReplyMatcher
from jukebox_bot.infrastructure.audio.ytdlp_resolver import YtDlpResolver
from jukebox_bot.infrastructure.discord.adapters.voice_adapter import DiscordVoiceAdapter


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def container(settings):
    return create_container(settings)


class TestContainer:
    def test_create_container(self, container, settings):
        assert isinstance(container, Container)
        assert container.settings is settings

    def test_bot_required(self, container):
        with pytest.raises(RuntimeError):
            _ = container.bot

    def test_set_bot(self, container):
        bot = MagicMock()

        container.set_bot(bot)

        assert container.bot is bot

    def test_audio_resolver_is_cached(self, container):
        resolver = container.audio_resolver

        assert isinstance(resolver, YtDlpResolver)
        assert container.audio_resolver is resolver

    def test_voice_adapter_needs_bot(self, container):
        with pytest.raises(RuntimeError):
            _ = container.voice_adapter

        container.set_bot(MagicMock())
        assert isinstance(container.voice_adapter, DiscordVoiceAdapter)

    def test_playback_manager_is_cached(self, container):
        container.set_bot(MagicMock())

        manager = container.playback_manager

        assert isinstance(manager, PlaybackSessionManager)
        assert container.playback_manager is manager

    def test_keyword_matcher(self, container):
        assert isinstance(container.keyword_matcher, KeywordReplyMatcher)

    def test_overrides_are_respected(self, settings, voice_adapter, resolver):
        """Should build the manager from pre-set adapters."""
        container = Container(settings, _voice_adapter=voice_adapter, _audio_resolver=resolver)

        assert container.playback_manager is not None
        assert container.voice_adapter is voice_adapter


class TestContainerLifecycle:
    async def test_initialize_builds_services(self, container):
        container.set_bot(MagicMock())

        await container.initialize()

        assert container._playback_manager is not None
        assert container._keyword_matcher is not None

    async def test_shutdown_stops_manager(self, container):
        manager = MagicMock()
        manager.shutdown = AsyncMock()
        container._playback_manager = manager

        await container.shutdown()

        manager.shutdown.assert_awaited_once()
        assert container._playback_manager is None

    async def test_shutdown_logs_manager_errors(self, container, caplog):
        manager = MagicMock()
        manager.shutdown = AsyncMock(side_effect=RuntimeError("stuck"))
        container._playback_manager = manager

        await container.shutdown()

        assert "stuck" in caplog.text
        assert container._playback_manager is None

    async def test_shutdown_without_manager(self, container):
        await container.shutdown()
