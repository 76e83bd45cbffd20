#!/usr/bin/env python3
"""Process entry point: configure logging, build the container, run the bot."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jukebox_bot.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from jukebox_bot.config.settings import Settings

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"
_FALLBACK_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_FALLBACK_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def _read_logging_config(path: Path) -> dict[str, Any] | None:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return None


def setup_logging(log_level: str = "INFO") -> None:
    """Apply ``logging_config.json``, or a plain console format if it is unusable.

    The root level always follows ``log_level`` so the JSON file only has to
    describe handlers and per-library overrides.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    config = _read_logging_config(_LOGGING_CONFIG_PATH)

    applied = False
    if config is not None:
        try:
            logging.config.dictConfig(config)
            applied = True
        except ValueError:
            pass

    if not applied:
        logging.basicConfig(level=level, format=_FALLBACK_FORMAT, datefmt=_FALLBACK_DATEFMT)
        logger.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, _LOGGING_CONFIG_PATH)

    logging.getLogger().setLevel(level)


def _effective_log_level(settings: Settings) -> str:
    return "DEBUG" if settings.debug is True else settings.log_level


def main() -> int:
    from jukebox_bot.config.settings import get_settings

    settings = get_settings()
    setup_logging(_effective_log_level(settings))

    token = settings.discord.token.get_secret_value()
    if not token:
        logger.error(ErrorMessages.DISCORD_TOKEN_REQUIRED)
        return 1

    from jukebox_bot.config.container import create_container
    from jukebox_bot.infrastructure.discord.bot import create_bot

    logger.info(LogTemplates.BOT_STARTING, settings.environment)
    bot = create_bot(create_container(settings), settings)

    try:
        bot.run_with_graceful_shutdown(token)
    except KeyboardInterrupt:
        logger.info(LogTemplates.BOT_KEYBOARD_INTERRUPT)
    except Exception as e:
        logger.exception(LogTemplates.BOT_FATAL_ERROR, e)
        return 1
    else:
        logger.info(LogTemplates.BOT_STOPPED)
    return 0


def cli() -> None:
    """``jukebox-bot`` console script."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
