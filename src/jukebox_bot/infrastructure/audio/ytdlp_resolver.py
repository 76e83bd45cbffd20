"""AudioResolver implementation using yt-dlp for URL lookup and search."""

from __future__ import annotations

import asyncio
import logging
import re
import time
from typing import Any, Final, cast

from pydantic import ValidationError
from yt_dlp import YoutubeDL

from jukebox_bot.application.interfaces.audio_resolver import AudioResolver
from jukebox_bot.config.settings import AudioSettings
from jukebox_bot.domain.music.entities import Track
from jukebox_bot.domain.shared.exceptions import TrackResolutionError
from jukebox_bot.domain.shared.messages import ErrorMessages, LogTemplates
from jukebox_bot.infrastructure.audio.models import (
    CACHE_MAX_SIZE,
    CACHE_TTL,
    LOG_URL_TRUNCATE,
    AudioFormatInfo,
    CacheEntry,
    YtDlpOpts,
    YtDlpTrackInfo,
)

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH: Final[int] = 500

_info_cache: dict[str, CacheEntry] = {}

URL_PATTERNS: Final[list[re.Pattern[str]]] = [
    re.compile(r"https?://"),
    re.compile(r"www\."),
]


def clear_info_cache() -> None:
    _info_cache.clear()


class YtDlpResolver(AudioResolver):
    """Looks up track metadata and audio-only stream URLs with yt-dlp.

    yt-dlp is blocking, so every extraction runs in a worker thread. Results
    are cached per URL for ``CACHE_TTL`` seconds, which lets the stream lookup
    at playback time reuse the metadata fetched when the track was queued.
    """

    def __init__(self, settings: AudioSettings | None = None) -> None:
        self._settings = settings or AudioSettings()
        self._base_opts = YtDlpOpts(format=self._settings.ytdlp_format)

    def _get_opts(self, **overrides: Any) -> YtDlpOpts:
        if overrides:
            return self._base_opts.model_copy(update=overrides)
        return self._base_opts

    def is_url(self, query: str) -> bool:
        return any(p.match(query.strip()) for p in URL_PATTERNS)

    # ── Public API ─────────────────────────────────────────────────────

    async def resolve(self, query: str) -> Track:
        query = query.strip()
        logger.debug(LogTemplates.YTDLP_RESOLVING, query[:LOG_URL_TRUNCATE])

        if self.is_url(query):
            info = await asyncio.to_thread(self._extract_info_sync, query)
            if info is None:
                raise TrackResolutionError(query, ErrorMessages.NO_URL_IN_INFO_DICT)
        else:
            results = await asyncio.to_thread(self._search_sync, query, 1)
            if not results:
                raise TrackResolutionError(query, ErrorMessages.EMPTY_SEARCH_RESULT)
            info = results[0]

        return self._info_to_track(query, info)

    async def audio_stream_url(self, track: Track) -> str:
        info = await asyncio.to_thread(self._extract_info_sync, track.source_url)
        if info is None:
            raise TrackResolutionError(
                track.source_url,
                ErrorMessages.NO_AUDIO_STREAM.format(url=track.source_url),
            )

        stream_url = self._extract_stream_url(info)
        if stream_url is None:
            raise TrackResolutionError(
                track.source_url,
                ErrorMessages.NO_AUDIO_STREAM.format(url=track.source_url),
            )
        return stream_url

    # ── Conversion ─────────────────────────────────────────────────────

    def _info_to_track(self, query: str, info: YtDlpTrackInfo) -> Track:
        source_url = info.webpage_url
        if source_url is None and query.startswith(("http://", "https://")):
            source_url = query
        if source_url is None:
            raise TrackResolutionError(query, ErrorMessages.NO_URL_IN_INFO_DICT)

        try:
            return Track(title=info.title[:TITLE_MAX_LENGTH], source_url=source_url)
        except ValidationError as exc:
            raise TrackResolutionError(query, str(exc)) from exc

    def _extract_stream_url(self, info: YtDlpTrackInfo) -> str | None:
        if info.selected_is_audio_only:
            return info.url
        from_formats = self._extract_stream_from_formats(info.formats)
        if from_formats is not None:
            return from_formats
        # Muxed fallback; ffmpeg drops the video track with -vn.
        if info.url and info.acodec != "none":
            return info.url
        return None

    @staticmethod
    def _extract_stream_from_formats(formats: list[AudioFormatInfo]) -> str | None:
        """Pick the last (best) audio-only format, else the last one with audio."""
        audio_only = [f for f in formats if f.is_audio_only and f.url]
        if audio_only:
            return audio_only[-1].url
        with_audio = [f for f in formats if f.acodec not in (None, "none") and f.url]
        if with_audio:
            return with_audio[-1].url
        return None

    @staticmethod
    def _parse_info(data: dict[str, Any]) -> YtDlpTrackInfo:
        return YtDlpTrackInfo.model_validate(data)

    # ── Blocking yt-dlp calls (run in a worker thread) ─────────────────

    def _remember(self, key: str, info: YtDlpTrackInfo | None, now: float) -> None:
        _info_cache[key] = CacheEntry(info=info, cached_at=now)

        if len(_info_cache) > CACHE_MAX_SIZE:
            expired = [k for k, entry in _info_cache.items() if now - entry.cached_at >= CACHE_TTL]
            for k in expired:
                _info_cache.pop(k, None)
            if expired:
                logger.debug(LogTemplates.CACHE_EXPIRED_CLEANED, len(expired))

    def _extract_info_sync(self, url: str) -> YtDlpTrackInfo | None:
        now = time.time()
        cached = _info_cache.get(url)
        if cached is not None:
            if now - cached.cached_at < CACHE_TTL:
                logger.debug(LogTemplates.CACHE_HIT_URL, url[:LOG_URL_TRUNCATE])
                return cached.info
            _info_cache.pop(url, None)

        try:
            with YoutubeDL(params=cast(Any, self._get_opts().model_dump())) as ydl:
                data = ydl.extract_info(url, download=False)
            result = self._parse_info(dict(data)) if isinstance(data, dict) else None
        except Exception:
            logger.exception(LogTemplates.YTDLP_FAILED_EXTRACT_INFO, url[:LOG_URL_TRUNCATE])
            return None

        self._remember(url, result, now)
        return result

    def _search_sync(self, query: str, limit: int = 1) -> list[YtDlpTrackInfo]:
        try:
            with YoutubeDL(params=cast(Any, self._get_opts().model_dump())) as ydl:
                data = ydl.extract_info(f"ytsearch{limit}:{query}", download=False)
            entries = data.get("entries", []) if isinstance(data, dict) else []
            if not isinstance(entries, list):
                return []
            results = [self._parse_info(dict(e)) for e in entries if isinstance(e, dict)]
        except Exception:
            logger.exception(LogTemplates.YTDLP_FAILED_SEARCH, query[:LOG_URL_TRUNCATE])
            return []

        now = time.time()
        for info in results:
            if info.webpage_url:
                self._remember(info.webpage_url, info, now)
        return results
