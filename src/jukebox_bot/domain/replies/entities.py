"""Keyword reply rules."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from jukebox_bot.domain.shared.types import NonEmptyStr


class MatchMode(Enum):
    """How a rule's pattern is compared with the message content."""

    CONTAINS = "contains"
    EXACT = "exact"


class ReplyMode(Enum):
    """How the response is delivered."""

    SEND = "send"  # plain message in the same channel
    REPLY = "reply"  # threaded reply to the triggering message


class KeywordReply(BaseModel):
    """One ``pattern -> response`` rule."""

    model_config = ConfigDict(frozen=True)

    pattern: NonEmptyStr
    response: NonEmptyStr
    match: MatchMode = MatchMode.CONTAINS
    mode: ReplyMode = ReplyMode.SEND

    def matches(self, content: str) -> bool:
        if self.match is MatchMode.EXACT:
            return content == self.pattern
        return self.pattern in content
