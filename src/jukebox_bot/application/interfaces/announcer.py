"""Port for posting playback notifications back to a text channel."""

from __future__ import annotations

from typing import Any, Protocol


class Announcer(Protocol):
    """Anything with an async ``send``; ``discord.abc.Messageable`` satisfies it."""

    async def send(self, content: str, /) -> Any:
        ...
