"""Shared helpers: number formatting, character classes, trimming and logging."""

from __future__ import annotations

import enum
import sys

_UINT64_MASK = (1 << 64) - 1


class LogLevel(enum.IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    ERROR = 2


def int2str(num: int) -> str:
    """Render an unsigned 64-bit integer in decimal."""
    return str(int(num) & _UINT64_MASK)


def double2str(num: float) -> str:
    """Render a floating point number with six fractional digits."""
    return f"{float(num):f}"


def is_letter(ch: str) -> bool:
    """Return True for an ASCII letter."""
    return len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z")


def is_digit(ch: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_letter_or_digit(ch: str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_letter(ch) or is_digit(ch)


def is_identifier_char(ch: str) -> bool:
    """Return True for an ASCII letter, digit or underscore."""
    return is_letter_or_digit(ch) or ch == "_"


def is_identifier_start(ch: str) -> bool:
    """Return True for an ASCII letter or underscore."""
    return is_letter(ch) or ch == "_"


def trim(text: str) -> str:
    """Remove leading and trailing spaces.

    A string made only of spaces is returned unchanged.
    """
    if not text.strip(" "):
        return text
    return text.strip(" ")


def log_message(level: LogLevel | int, message: str) -> None:
    """Write a message: errors go to standard output, the rest to standard error."""
    stream = sys.stdout if level == LogLevel.ERROR else sys.stderr
    print(message, file=stream)