"""Matching chat messages against the keyword reply table."""

from __future__ import annotations

from collections.abc import Iterable

from jukebox_bot.domain.replies.catalog import DEFAULT_KEYWORD_REPLIES
from jukebox_bot.domain.replies.entities import KeywordReply


class KeywordReplyMatcher:
    """Stateless matcher over an ordered rule table.

    Every rule is checked independently, so one message can fire several
    replies; they come back in table order.
    """

    def __init__(self, rules: Iterable[KeywordReply] | None = None) -> None:
        self._rules: tuple[KeywordReply, ...] = (
            tuple(rules) if rules is not None else DEFAULT_KEYWORD_REPLIES
        )

    @property
    def rules(self) -> tuple[KeywordReply, ...]:
        return self._rules

    def match(self, content: str) -> list[KeywordReply]:
        if not content:
            return []
        return [rule for rule in self._rules if rule.matches(content)]
