"""Voice-channel guard functions for prefix commands.

Free functions taking the command context, so any cog can use them.
"""

from __future__ import annotations

from typing import Any

import discord
from discord.ext import commands


def get_member(ctx: commands.Context[Any]) -> discord.Member | None:
    """The invoking guild member, or None for DMs and webhook authors."""
    if ctx.guild is None:
        return None
    author = ctx.author
    return author if isinstance(author, discord.Member) else None


def member_voice_channel(
    member: discord.Member | None,
) -> discord.VoiceChannel | discord.StageChannel | None:
    """The voice channel the member is currently connected to, if any."""
    if member is None or member.voice is None:
        return None
    return member.voice.channel
