"""Listener that answers chat messages matching the keyword reply table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from jukebox_bot.domain.replies.entities import ReplyMode
from jukebox_bot.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)


class KeywordCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot or message.guild is None:
            return
        if not self.container.settings.replies.enabled:
            return

        rules = self.container.keyword_matcher.match(message.content)
        if not rules:
            return

        guild_id = message.guild.id
        for rule in rules:
            logger.debug(LogTemplates.KEYWORD_MATCHED, rule.pattern, guild_id)
            try:
                if rule.mode is ReplyMode.REPLY:
                    await message.reply(rule.response)
                else:
                    await message.channel.send(rule.response)
            except Exception as exc:
                logger.error(LogTemplates.KEYWORD_REPLY_FAILED, guild_id, exc)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(KeywordCog(bot, container))
