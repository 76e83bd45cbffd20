"""Discord event listeners for gateway, guild and voice-state lifecycle logging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from jukebox_bot.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)


class EventCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container
        self._resumed_logged_once = False

    # ─────────────────────────────────────────────────────────────────
    # Gateway
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_connect(self) -> None:
        logger.info(LogTemplates.GATEWAY_CONNECTED)

    @commands.Cog.listener()
    async def on_disconnect(self) -> None:
        logger.warning(LogTemplates.GATEWAY_DISCONNECTED)

    @commands.Cog.listener()
    async def on_resumed(self) -> None:
        if not self._resumed_logged_once:
            logger.info(LogTemplates.GATEWAY_RESUMED)
            self._resumed_logged_once = True

    # ─────────────────────────────────────────────────────────────────
    # Guilds
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_guild_join(self, guild: discord.Guild) -> None:
        logger.info(LogTemplates.GUILD_JOINED, guild.name, guild.id)

    @commands.Cog.listener()
    async def on_guild_remove(self, guild: discord.Guild) -> None:
        logger.info(LogTemplates.GUILD_LEFT, guild.name, guild.id)

    # ─────────────────────────────────────────────────────────────────
    # Voice
    # ─────────────────────────────────────────────────────────────────

    @commands.Cog.listener()
    async def on_voice_state_update(
        self,
        member: discord.Member,
        before: discord.VoiceState,
        after: discord.VoiceState,
    ) -> None:
        """Log when the bot itself is dropped from voice (kicked or moved out).

        The session is left alone; its voice handle now reports DISCONNECTED,
        so the next play asks for a re-join.
        """
        if self.bot.user is None or member.id != self.bot.user.id:
            return
        if before.channel is not None and after.channel is None:
            logger.info(LogTemplates.VOICE_DISCONNECTED, member.guild.id)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(EventCog(bot, container))
