import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from jukebox_bot.application.interfaces.audio_resolver import AudioResolver
from jukebox_bot.application.interfaces.voice_adapter import (
    StreamHandle,
    VoiceAdapter,
    VoiceHandle,
)
from jukebox_bot.application.services.playback_service import PlaybackSessionManager
from jukebox_bot.domain.music.entities import Track
from jukebox_bot.domain.music.value_objects import ConnectionStatus
from jukebox_bot.domain.shared.exceptions import StreamStartError, TrackResolutionError

GUILD_ID = 123456789

# ============================================================================
# Fake ports
# ============================================================================


class FakeStreamHandle(StreamHandle):
    """Stream that never ends on its own; tests call ``finish`` or ``end``."""

    def __init__(self, url, on_finished):
        self.url = url
        self._on_finished = on_finished
        self.paused = False
        self.ended = False
        self.finished_task = None

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def end(self):
        if self.ended:
            return False
        self.ended = True
        # discord.py fires the after-callback later, from another thread.
        self.finished_task = asyncio.get_running_loop().create_task(self._on_finished(None))
        return True

    @property
    def is_paused(self):
        return self.paused

    async def finish(self, error=None):
        """Simulate the track playing to the end."""
        self.ended = True
        await self._on_finished(error)


class FakeVoiceHandle(VoiceHandle):
    def __init__(self, channel=None, fail_urls=()):
        self.channel = channel
        self.fail_urls = set(fail_urls)
        self._status = ConnectionStatus.CONNECTED
        self.streams: list[FakeStreamHandle] = []
        self.volumes: list[float] = []
        self.disconnect_calls = 0

    @property
    def status(self):
        return self._status

    def drop(self):
        self._status = ConnectionStatus.DISCONNECTED

    def play(self, stream_url, *, volume, on_finished):
        if stream_url in self.fail_urls:
            raise StreamStartError()
        stream = FakeStreamHandle(stream_url, on_finished)
        self.streams.append(stream)
        self.volumes.append(volume)
        return stream

    async def disconnect(self):
        self.disconnect_calls += 1
        self._status = ConnectionStatus.DISCONNECTED


class FakeVoiceAdapter(VoiceAdapter):
    def __init__(self):
        self.handles: list[FakeVoiceHandle] = []
        self.fail_with: Exception | None = None

    async def connect(self, channel):
        if self.fail_with is not None:
            raise self.fail_with
        handle = FakeVoiceHandle(channel)
        self.handles.append(handle)
        return handle

    @property
    def last_handle(self) -> FakeVoiceHandle:
        return self.handles[-1]


class FakeResolver(AudioResolver):
    """Resolves ``https://...`` queries to themselves and text to a search URL."""

    def __init__(self):
        self.unresolvable: set[str] = set()
        self.no_stream: set[str] = set()
        self.crashing: set[str] = set()
        self.resolve_calls: list[str] = []

    def is_url(self, query):
        return query.startswith(("http://", "https://"))

    async def resolve(self, query):
        self.resolve_calls.append(query)
        if query in self.unresolvable:
            raise TrackResolutionError(query, "not found")
        if self.is_url(query):
            return Track(title=f"Song {query.rsplit('/', 1)[-1]}", source_url=query)
        slug = query.replace(" ", "-")
        return Track(title=f"Song {slug}", source_url=f"https://www.youtube.com/watch?v={slug}")

    async def audio_stream_url(self, track):
        if track.source_url in self.no_stream:
            raise TrackResolutionError(track.source_url, "no audio stream")
        if track.source_url in self.crashing:
            raise RuntimeError("extractor crashed")
        return f"{track.source_url}#audio"


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def guild_id():
    return GUILD_ID


@pytest.fixture
def voice_adapter():
    return FakeVoiceAdapter()


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def manager(voice_adapter, resolver):
    return PlaybackSessionManager(voice_adapter=voice_adapter, audio_resolver=resolver)


@pytest.fixture
def announcer():
    """Text channel stand-in collecting announcements."""
    channel = MagicMock()
    channel.send = AsyncMock()
    return channel


@pytest.fixture
def voice_channel():
    channel = MagicMock()
    channel.id = 555
    channel.name = "Music"
    return channel


@pytest.fixture
def sample_track():
    return Track(title="Test Track", source_url="https://www.youtube.com/watch?v=test123")
