"""Console log formatter with per-level ANSI colors."""

from __future__ import annotations

import logging
import os
import sys
from typing import IO


class ColoredFormatter(logging.Formatter):
    """Colors the level name of each record when writing to a terminal.

    Colors are skipped when ``NO_COLOR`` is set or the target stream is not a
    TTY, so log files and CI output stay plain.
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[90m",  # grey
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        *,
        stream: IO[str] | None = None,
        use_color: bool | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._stream = stream
        self._use_color_override = use_color

    def _use_color(self) -> bool:
        if self._use_color_override is not None:
            return self._use_color_override
        if os.environ.get("NO_COLOR") is not None:
            return False
        stream = self._stream or sys.stdout
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno)
        if color is None or not self._use_color():
            return super().format(record)

        # Copy so other handlers sharing the record keep the plain level name.
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)
