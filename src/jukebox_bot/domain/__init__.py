# ruff: noqa: N999
"""
Domain Layer

Pure business logic organized by bounded contexts:
- shared/: exceptions, message catalogs, constants, constrained types
- music/: tracks, guild sessions and playback state
- replies/: keyword reply rules
"""

from jukebox_bot.domain.shared.exceptions import DomainError, PlaybackError

__all__ = [
    "DomainError",
    "PlaybackError",
]
