"""
Unit Tests for MusicCog

Prefix commands join / p / resume / pause / s / queue / leave driven against
a real PlaybackSessionManager wired to fake voice and resolver ports, plus
the cog error handler that turns PlaybackError into chat replies.
"""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest
from discord.ext import commands

from jukebox_bot.domain.shared.exceptions import (
    NoActiveVoiceSessionError,
    NotInVoiceChannelError,
    NotJoinedError,
    TrackResolutionError,
)
from jukebox_bot.domain.shared.messages import DiscordUIMessages
from jukebox_bot.infrastructure.discord.cogs.music_cog import MusicCog, setup
from jukebox_bot.infrastructure.discord.guards.voice_guards import (
    get_member,
    member_voice_channel,
)

URL_A = "https://www.youtube.com/watch?v=aaa"
URL_B = "https://www.youtube.com/watch?v=bbb"

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def container(manager):
    container = MagicMock()
    container.playback_manager = manager
    container.settings.discord.command_prefix = "!"
    return container


@pytest.fixture
def cog(container):
    cog = MusicCog(MagicMock(), container)
    # Bind commands to the instance the way Cog._inject does on bot.add_cog,
    # so commands can be awaited directly as cog.<command>(ctx).
    for command in cog.get_commands():
        command.cog = cog
    return cog


def _member(voice_channel=None) -> MagicMock:
    member = MagicMock(spec=discord.Member)
    if voice_channel is None:
        member.voice = None
    else:
        member.voice = MagicMock()
        member.voice.channel = voice_channel
    return member


@pytest.fixture
def make_ctx(guild_id, announcer):
    def _make(voice_channel=None, prefix="!"):
        ctx = MagicMock()
        ctx.guild = MagicMock()
        ctx.guild.id = guild_id
        ctx.author = _member(voice_channel)
        ctx.prefix = prefix
        ctx.channel = announcer
        ctx.send = AsyncMock()
        ctx.reply = AsyncMock()
        return ctx

    return _make


@pytest.fixture
def ctx_in_voice(make_ctx, voice_channel):
    return make_ctx(voice_channel)


def _sent(ctx) -> list[str]:
    return [c.args[0] for c in ctx.send.await_args_list]


# =============================================================================
# Guards
# =============================================================================


class TestVoiceGuards:
    def test_get_member_requires_guild(self, make_ctx):
        ctx = make_ctx()
        ctx.guild = None

        assert get_member(ctx) is None

    def test_get_member_rejects_non_members(self, make_ctx):
        ctx = make_ctx()
        ctx.author = MagicMock(spec=discord.User)

        assert get_member(ctx) is None

    def test_member_voice_channel(self, voice_channel):
        assert member_voice_channel(_member(voice_channel)) is voice_channel
        assert member_voice_channel(_member()) is None
        assert member_voice_channel(None) is None


# =============================================================================
# Join / leave
# =============================================================================


class TestJoinLeave:
    async def test_join_requires_caller_in_voice(self, cog, make_ctx):
        """Should raise NotInVoiceChannelError when the caller is not in voice."""
        with pytest.raises(NotInVoiceChannelError):
            await cog.join(make_ctx())

    async def test_join_connects(self, cog, ctx_in_voice, manager, guild_id, voice_channel):
        await cog.join(ctx_in_voice)

        assert manager.get_session(guild_id).is_connected
        ctx_in_voice.send.assert_awaited_once_with(
            DiscordUIMessages.ACTION_JOINED.format(channel=voice_channel.name)
        )

    async def test_leave_without_join_raises(self, cog, ctx_in_voice):
        with pytest.raises(NotJoinedError):
            await cog.leave(ctx_in_voice)

    async def test_leave_disconnects(self, cog, ctx_in_voice, manager, guild_id):
        await cog.join(ctx_in_voice)

        await cog.leave(ctx_in_voice)

        assert not manager.get_session(guild_id).is_connected
        assert _sent(ctx_in_voice)[-1] == DiscordUIMessages.ACTION_LEFT


# =============================================================================
# Play / queue
# =============================================================================


class TestPlay:
    async def test_play_caller_not_in_voice(self, cog, make_ctx):
        """Should reply to the caller when they are not in a voice channel."""
        ctx = make_ctx()

        await cog.play(ctx, query=URL_A)

        ctx.reply.assert_awaited_once_with(DiscordUIMessages.ERROR_LISTEN_WITHOUT_JOINING)

    async def test_play_missing_query(self, cog, make_ctx, voice_channel):
        ctx = make_ctx(voice_channel, prefix="?")

        await cog.play(ctx, query="   ")

        ctx.send.assert_awaited_once_with("Usage: `?p <YouTube URL>`")

    async def test_play_without_join_raises(self, cog, ctx_in_voice):
        with pytest.raises(NoActiveVoiceSessionError):
            await cog.play(ctx_in_voice, query=URL_A)

    async def test_play_starts_and_announces(self, cog, ctx_in_voice, announcer):
        """Should announce now-playing in the channel and send nothing else."""
        await cog.join(ctx_in_voice)
        ctx_in_voice.send.reset_mock()

        await cog.play(ctx_in_voice, query=URL_A)

        announcer.send.assert_awaited_once_with(
            DiscordUIMessages.NOW_PLAYING.format(title="Song watch?v=aaa")
        )
        ctx_in_voice.send.assert_not_awaited()

    async def test_play_while_playing_reports_queued(self, cog, ctx_in_voice):
        await cog.join(ctx_in_voice)
        await cog.play(ctx_in_voice, query=URL_A)

        await cog.play(ctx_in_voice, query=URL_B)

        assert _sent(ctx_in_voice)[-1] == DiscordUIMessages.TRACK_QUEUED.format(
            title="Song watch?v=bbb"
        )


class TestQueue:
    async def test_empty_queue(self, cog, ctx_in_voice):
        await cog.queue(ctx_in_voice)

        ctx_in_voice.send.assert_awaited_once_with(DiscordUIMessages.QUEUE_EMPTY)

    async def test_lists_pending_tracks(self, cog, ctx_in_voice):
        await cog.join(ctx_in_voice)
        await cog.play(ctx_in_voice, query=URL_A)
        await cog.play(ctx_in_voice, query=URL_B)
        await cog.play(ctx_in_voice, query="lofi beats")
        ctx_in_voice.send.reset_mock()

        await cog.queue(ctx_in_voice)

        ctx_in_voice.send.assert_awaited_once_with("[1] Song watch?v=bbb\n[2] Song lofi-beats")

    async def test_long_queue_is_split(self, cog, ctx_in_voice, resolver):
        """Should split the listing into messages within Discord's length limit."""
        await cog.join(ctx_in_voice)
        for n in range(60):
            await cog.play(ctx_in_voice, query=f"{'x' * 80} {n}")
        ctx_in_voice.send.reset_mock()

        await cog.queue(ctx_in_voice)

        chunks = _sent(ctx_in_voice)
        assert len(chunks) > 1
        assert all(len(c) <= 2000 for c in chunks)
        assert chunks[0].startswith("[1] ")


# =============================================================================
# Stream controls
# =============================================================================


class TestControls:
    @pytest.mark.parametrize("command", ["pause", "resume", "skip"])
    async def test_silent_without_stream(self, cog, ctx_in_voice, command):
        await getattr(cog, command)(ctx_in_voice)

        ctx_in_voice.send.assert_not_awaited()

    async def test_pause_resume_skip_acknowledge(self, cog, ctx_in_voice, manager, guild_id):
        await cog.join(ctx_in_voice)
        await cog.play(ctx_in_voice, query=URL_A)
        stream = manager.get_session(guild_id).stream
        ctx_in_voice.send.reset_mock()

        await cog.pause(ctx_in_voice)
        await cog.resume(ctx_in_voice)
        await cog.skip(ctx_in_voice)
        await stream.finished_task

        assert _sent(ctx_in_voice) == [
            DiscordUIMessages.ACTION_PAUSED,
            DiscordUIMessages.ACTION_RESUMED,
            DiscordUIMessages.ACTION_SKIPPED,
        ]


# =============================================================================
# Error handling
# =============================================================================


class TestCogErrorHandling:
    async def test_playback_error_is_reported_with_prefix(self, cog, make_ctx):
        """Should send the error message with the invoking prefix filled in."""
        ctx = make_ctx(prefix="$")
        error = commands.CommandInvokeError(NoActiveVoiceSessionError())

        await cog.cog_command_error(ctx, error)

        ctx.send.assert_awaited_once_with("Please use `$join` to add me to the channel 😘")

    async def test_track_resolution_error_is_reported(self, cog, make_ctx):
        ctx = make_ctx()
        error = commands.CommandInvokeError(TrackResolutionError("{weird} query"))

        await cog.cog_command_error(ctx, error)

        ctx.send.assert_awaited_once_with(
            DiscordUIMessages.ERROR_TRACK_NOT_FOUND.format(query="{weird} query")
        )

    async def test_other_errors_are_left_to_the_bot(self, cog, make_ctx):
        ctx = make_ctx()

        await cog.cog_command_error(ctx, commands.CommandInvokeError(ValueError("boom")))

        ctx.send.assert_not_awaited()

    async def test_commands_are_guild_only(self, cog, make_ctx):
        ctx = make_ctx()
        ctx.guild = None

        assert await cog.cog_check(ctx) is False

    async def test_setup_adds_cog(self, container):
        bot = MagicMock()
        bot.container = container
        bot.add_cog = AsyncMock()

        await setup(bot)

        assert isinstance(bot.add_cog.await_args.args[0], MusicCog)

    async def test_setup_requires_container(self):
        bot = MagicMock(spec=["add_cog"])

        with pytest.raises(RuntimeError):
            await setup(bot)
