"""Levelled logging that writes one JSON object per line to stdout."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from .json_utils import escape


class Level(IntEnum):
    """Log severity levels."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


_min_level: int = Level.DEBUG


def set_min_level(level: int) -> None:
    """Suppress debug, info and warn messages below level."""
    global _min_level
    _min_level = level


def _level_name(level: int) -> str:
    try:
        return Level(level).name
    except ValueError:
        return "UNKNOWN"


def _timestamp() -> str:
    now = datetime.now()
    return f"{now:%Y/%m/%d %H:%M:%S}:{now.microsecond // 1000:03d}"


def format_event(level: int, context: str | None, message: str, *args: object) -> str:
    """Return the JSON line for a log event, formatting message with args."""
    content = message % args
    return (
        f'{{ "timestamp": "{_timestamp()}", "level": "{_level_name(level)}", '
        f'"context": "{escape(context)}", "content": "{escape(content)}" }}'
    )


def _log(level: Level, context: str | None, message: str, args: tuple) -> None:
    print(format_event(level, context, message, *args))


def debug(context: str | None, message: str, *args: object) -> None:
    """Log at DEBUG level."""
    if _min_level > Level.DEBUG:
        return
    _log(Level.DEBUG, context, message, args)


def info(context: str | None, message: str, *args: object) -> None:
    """Log at INFO level."""
    if _min_level > Level.INFO:
        return
    _log(Level.INFO, context, message, args)


def warn(context: str | None, message: str, *args: object) -> None:
    """Log at WARN level."""
    if _min_level > Level.WARN:
        return
    _log(Level.WARN, context, message, args)


def error(context: str | None, message: str, *args: object) -> None:
    """Log at ERROR level; never suppressed."""
    _log(Level.ERROR, context, message, args)