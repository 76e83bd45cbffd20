"""Reusable Pydantic Annotated types for domain-wide validation.

Constrained types are defined here once so models can annotate fields
directly::

    from jukebox_bot.domain.shared.types import HttpUrlStr, TrackTitleStr

    class Track(BaseModel):
        title: TrackTitleStr
        source_url: HttpUrlStr
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

DiscordSnowflake = Annotated[int, Field(gt=0, lt=2**64)]
"""Positive integer that fits a Discord snowflake (1 … 2^64-1)."""

NonNegativeInt = Annotated[int, Field(ge=0)]

PositiveInt = Annotated[int, Field(gt=0)]

NonNegativeFloat = Annotated[float, Field(ge=0.0)]

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

TrackTitleStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Track title: 1-500 characters."""

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""

CommandPrefixStr = Annotated[str, Field(min_length=1, max_length=5)]
"""Bot command prefix: 1-5 characters."""

QueuePositionInt = Annotated[int, Field(ge=1)]
"""One-based position of a track in the pending queue."""
