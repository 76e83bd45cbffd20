"""Audio infrastructure - yt-dlp resolver and its data models."""

from jukebox_bot.infrastructure.audio.models import (
    AudioFormatInfo,
    CacheEntry,
    YtDlpOpts,
    YtDlpTrackInfo,
)
from jukebox_bot.infrastructure.audio.ytdlp_resolver import YtDlpResolver

__all__ = [
    "AudioFormatInfo",
    "CacheEntry",
    "YtDlpOpts",
    "YtDlpResolver",
    "YtDlpTrackInfo",
]
