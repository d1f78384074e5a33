"""
log.py

Responsibility: All user-visible terminal output of a run.

- Progress steps print in blue, created files in green, to stdout.
- Warnings (non-fatal artifact/commit failures) print in yellow and fatal
  errors in red, to stderr.
- Debug lines (the git argv being run) only show with `--verbose`.
- Setting NO_COLOR disables styling.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import IntEnum

from rich.console import Console
from rich.text import Text


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40


@dataclass(frozen=True)
class _Channel:
    style: str
    stderr: bool


_CHANNELS = {
    LogLevel.DEBUG: _Channel("dim", stderr=False),
    LogLevel.INFO: _Channel("blue", stderr=False),
    LogLevel.SUCCESS: _Channel("green", stderr=False),
    LogLevel.WARNING: _Channel("yellow", stderr=True),
    LogLevel.ERROR: _Channel("bold red", stderr=True),
}

_threshold = LogLevel.INFO


def set_level(name: str) -> None:
    """Set the lowest level that is printed ("debug", "info", ...)."""
    global _threshold
    _threshold = LogLevel[name.strip().upper()]


def is_enabled(level: LogLevel) -> bool:
    return level >= _threshold


def _print(renderable: Text | str, *, stderr: bool) -> None:
    Console(
        file=sys.stderr if stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=bool(os.environ.get("NO_COLOR")),
    ).print(renderable)


def _log(level: LogLevel, message: str, style: str | None) -> None:
    if not is_enabled(level):
        return
    channel = _CHANNELS[level]
    _print(Text(message, style=channel.style if style is None else style), stderr=channel.stderr)


def markup(message: str) -> None:
    """Print rich markup to stdout at any level (usage text)."""
    _print(message, stderr=False)


def debug(message: str, *, style: str | None = None) -> None:
    _log(LogLevel.DEBUG, message, style)


def info(message: str, *, style: str | None = None) -> None:
    _log(LogLevel.INFO, message, style)


def success(message: str, *, style: str | None = None) -> None:
    _log(LogLevel.SUCCESS, message, style)


def warning(message: str, *, style: str | None = None) -> None:
    _log(LogLevel.WARNING, message, style)


def error(message: str, *, style: str | None = None) -> None:
    _log(LogLevel.ERROR, message, style)
