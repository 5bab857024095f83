"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character; standard output by default."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string; standard output by default."""
    _target(stream).write(s)


def putendl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; standard output by default."""
    _target(stream).write(s + "\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal; standard output by default."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))