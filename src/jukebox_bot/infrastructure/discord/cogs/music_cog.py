"""Prefix-command music cog delegating to the playback session manager."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from discord.ext import commands

from jukebox_bot.domain.shared.constants import CommandNames
from jukebox_bot.domain.shared.exceptions import PlaybackError
from jukebox_bot.domain.shared.messages import DiscordUIMessages, ErrorMessages, LogTemplates
from jukebox_bot.infrastructure.discord.guards.voice_guards import (
    get_member,
    member_voice_channel,
)
from jukebox_bot.utils.reply import chunk_lines, render_prefix, truncate

if TYPE_CHECKING:
    from ....application.services.playback_service import PlaybackSessionManager
    from ....config.container import Container

logger = logging.getLogger(__name__)

Context = commands.Context[Any]


class MusicCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @property
    def manager(self) -> PlaybackSessionManager:
        return self.container.playback_manager

    def _prefix(self, ctx: Context) -> str:
        return ctx.prefix or self.container.settings.discord.command_prefix

    async def cog_check(self, ctx: Context) -> bool:
        # Music commands only make sense inside a guild.
        return ctx.guild is not None

    async def cog_command_error(self, ctx: Context, error: Exception) -> None:
        original = getattr(error, "original", error)
        if not isinstance(original, PlaybackError):
            return

        logger.info(
            LogTemplates.PLAYBACK_ERROR,
            getattr(ctx.guild, "id", None),
            original.code,
        )
        await ctx.send(render_prefix(original.message, self._prefix(ctx)))

    # ─────────────────────────────────────────────────────────────────
    # Voice connection
    # ─────────────────────────────────────────────────────────────────

    @commands.command(name=CommandNames.JOIN)
    async def join(self, ctx: Context) -> None:
        assert ctx.guild is not None

        channel = member_voice_channel(get_member(ctx))
        await self.manager.join(ctx.guild.id, channel, announcer=ctx.channel)

        assert channel is not None
        await ctx.send(DiscordUIMessages.ACTION_JOINED.format(channel=channel.name))

    @commands.command(name=CommandNames.LEAVE)
    async def leave(self, ctx: Context) -> None:
        assert ctx.guild is not None

        await self.manager.leave(ctx.guild.id)
        await ctx.send(DiscordUIMessages.ACTION_LEFT)

    # ─────────────────────────────────────────────────────────────────
    # Play / queue
    # ─────────────────────────────────────────────────────────────────

    @commands.command(name=CommandNames.PLAY)
    async def play(self, ctx: Context, *, query: str | None = None) -> None:
        assert ctx.guild is not None

        if member_voice_channel(get_member(ctx)) is None:
            await ctx.reply(DiscordUIMessages.ERROR_LISTEN_WITHOUT_JOINING)
            return

        query = (query or "").strip()
        if not query:
            await ctx.send(render_prefix(DiscordUIMessages.ERROR_MISSING_QUERY, self._prefix(ctx)))
            return

        result = await self.manager.enqueue_and_maybe_start(
            ctx.guild.id, query, announcer=ctx.channel
        )

        # A started track was already announced as "now playing".
        if not result.started:
            await ctx.send(DiscordUIMessages.TRACK_QUEUED.format(title=truncate(result.track.title)))

    @commands.command(name=CommandNames.QUEUE)
    async def queue(self, ctx: Context) -> None:
        assert ctx.guild is not None

        entries = self.manager.inspect_queue(ctx.guild.id)
        if not entries:
            await ctx.send(DiscordUIMessages.QUEUE_EMPTY)
            return

        lines = (
            DiscordUIMessages.QUEUE_ENTRY.format(position=e.position, title=e.track.title)
            for e in entries
        )
        for chunk in chunk_lines(lines):
            await ctx.send(chunk)

    # ─────────────────────────────────────────────────────────────────
    # Stream controls
    # ─────────────────────────────────────────────────────────────────

    @commands.command(name=CommandNames.PAUSE)
    async def pause(self, ctx: Context) -> None:
        assert ctx.guild is not None

        if await self.manager.pause(ctx.guild.id):
            await ctx.send(DiscordUIMessages.ACTION_PAUSED)

    @commands.command(name=CommandNames.RESUME)
    async def resume(self, ctx: Context) -> None:
        assert ctx.guild is not None

        if await self.manager.resume(ctx.guild.id):
            await ctx.send(DiscordUIMessages.ACTION_RESUMED)

    @commands.command(name=CommandNames.SKIP)
    async def skip(self, ctx: Context) -> None:
        assert ctx.guild is not None

        if await self.manager.skip(ctx.guild.id):
            await ctx.send(DiscordUIMessages.ACTION_SKIPPED)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(MusicCog(bot, container))
