"""Pydantic models for yt-dlp data and options.

These parse the loosely-typed dicts yt-dlp returns, cache extraction results,
and type the options handed to ``YoutubeDL``.
"""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jukebox_bot.domain.shared.types import (
    HttpUrlStr,
    NonEmptyStr,
    NonNegativeFloat,
    PositiveInt,
)

CACHE_TTL: Final[int] = 3600
CACHE_MAX_SIZE: Final[int] = 500
DEFAULT_RETRIES: Final[int] = 3
DEFAULT_SOCKET_TIMEOUT: Final[int] = 10
LOG_URL_TRUNCATE: Final[int] = 60
UNKNOWN_TITLE: Final[str] = "Unknown Title"


class AudioFormatInfo(BaseModel):
    """A single format entry from yt-dlp extraction."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: NonEmptyStr | None = None
    acodec: NonEmptyStr | None = None
    vcodec: NonEmptyStr | None = None

    @property
    def is_audio_only(self) -> bool:
        return self.acodec not in (None, "none") and self.vcodec in (None, "none")


class YtDlpTrackInfo(BaseModel):
    """Trimmed yt-dlp extraction result.

    Extra fields are ignored; before-validators turn empty or non-string
    values from yt-dlp into None instead of failing.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    webpage_url: HttpUrlStr | None = None
    url: NonEmptyStr | None = None
    title: NonEmptyStr = UNKNOWN_TITLE
    acodec: NonEmptyStr | None = None
    vcodec: NonEmptyStr | None = None
    formats: list[AudioFormatInfo] = Field(default_factory=list)

    @field_validator("webpage_url", "url", "acodec", "vcodec", mode="before")
    @classmethod
    def _coerce_empty_to_none(cls, v: Any) -> str | None:
        if not isinstance(v, str) or not v.strip():
            return None
        return v

    @field_validator("webpage_url", mode="before")
    @classmethod
    def _drop_non_http(cls, v: Any) -> str | None:
        if isinstance(v, str) and not v.startswith(("http://", "https://")):
            return None
        return v

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            return UNKNOWN_TITLE
        return v.strip()

    @field_validator("formats", mode="before")
    @classmethod
    def _coerce_formats(cls, v: Any) -> list[Any]:
        if not isinstance(v, list):
            return []
        return [f for f in v if isinstance(f, dict)]

    @property
    def selected_is_audio_only(self) -> bool:
        """Whether the top-level ``url`` (chosen by the format selector) has no video."""
        return self.url is not None and self.acodec not in (None, "none") and (
            self.vcodec in (None, "none")
        )


class CacheEntry(BaseModel):
    """Cached yt-dlp extraction result with its insertion time."""

    model_config = ConfigDict(frozen=True)

    info: YtDlpTrackInfo | None = None
    cached_at: NonNegativeFloat


class YtDlpOpts(BaseModel):
    """Typed yt-dlp options passed to ``YoutubeDL``."""

    model_config = ConfigDict(frozen=True)

    quiet: bool = True
    no_warnings: bool = True
    noprogress: bool = True
    noplaylist: bool = True
    default_search: NonEmptyStr = "ytsearch"
    forceipv4: bool = True
    retries: PositiveInt = DEFAULT_RETRIES
    socket_timeout: PositiveInt = DEFAULT_SOCKET_TIMEOUT
    format: NonEmptyStr | None = None
    skip_download: bool = True
