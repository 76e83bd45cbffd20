"""
Replies Bounded Context

Fixed keyword → response rules applied to ordinary chat messages.
"""

from jukebox_bot.domain.replies.catalog import DEFAULT_KEYWORD_REPLIES
from jukebox_bot.domain.replies.entities import KeywordReply, MatchMode, ReplyMode
from jukebox_bot.domain.replies.services import KeywordReplyMatcher

__all__ = [
    "DEFAULT_KEYWORD_REPLIES",
    "KeywordReply",
    "KeywordReplyMatcher",
    "MatchMode",
    "ReplyMode",
]
