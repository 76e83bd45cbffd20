"""Tests for ColoredFormatter."""

import logging
from io import StringIO

import pytest

from jukebox_bot.utils.logging import ColoredFormatter

FMT = "%(levelname)s | %(message)s"


def _record(level: int, message: str = "hello") -> logging.LogRecord:
    return logging.makeLogRecord(
        {"name": "jukebox", "levelno": level, "levelname": logging.getLevelName(level), "msg": message}
    )


def _tty() -> StringIO:
    stream = StringIO()
    stream.isatty = lambda: True  # type: ignore[method-assign]
    return stream


class TestColoredFormatter:
    @pytest.mark.parametrize("level", sorted(ColoredFormatter.COLORS))
    def test_level_name_is_colored_on_tty(self, level, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ColoredFormatter(FMT, stream=_tty())

        output = fmt.format(_record(level))

        assert output.startswith(ColoredFormatter.COLORS[level])
        assert ColoredFormatter.RESET in output
        assert output.endswith("| hello")

    def test_plain_when_not_a_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ColoredFormatter(FMT, stream=StringIO())

        assert fmt.format(_record(logging.INFO)) == "INFO | hello"

    def test_no_color_env_disables_colors(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        fmt = ColoredFormatter(FMT, stream=_tty())

        assert fmt.format(_record(logging.ERROR)) == "ERROR | hello"

    def test_explicit_override_wins(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        fmt = ColoredFormatter(FMT, stream=StringIO(), use_color=True)

        assert "\033[" in fmt.format(_record(logging.WARNING))

    def test_unknown_level_is_plain(self):
        fmt = ColoredFormatter(FMT, use_color=True)
        record = _record(25)

        assert "\033[" not in fmt.format(record)

    def test_original_record_is_untouched(self):
        """Should leave the record plain for other handlers."""
        fmt = ColoredFormatter(FMT, use_color=True)
        record = _record(logging.INFO)

        fmt.format(record)

        assert record.levelname == "INFO"
