"""Discord jukebox bot: per-guild YouTube playback queues and keyword replies."""

__version__ = "0.1.0"
