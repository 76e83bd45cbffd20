"""Utility functions for formatting Discord messages."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cache

from jukebox_bot.domain.shared.constants import LimitConstants


@cache
def truncate(text: str, max_length: int = LimitConstants.TITLE_TRUNCATION) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"


def render_prefix(message: str, prefix: str) -> str:
    """Fill the ``{prefix}`` slot of a user-facing message.

    ``str.replace`` rather than ``format`` so braces in other parts of the
    message (a search query, say) are left alone.
    """
    return message.replace("{prefix}", prefix)


def chunk_lines(
    lines: Iterable[str], max_length: int = LimitConstants.MESSAGE_MAX_LENGTH
) -> list[str]:
    """Join lines with newlines into as few messages as fit under ``max_length``.

    A single line longer than the limit is truncated to fit.
    """
    chunks: list[str] = []
    current = ""
    for line in lines:
        line = truncate(line, max_length)
        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > max_length:
            chunks.append(current)
            current = line
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks
