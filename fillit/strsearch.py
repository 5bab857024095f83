"""String length, character search, substring search and comparison.

Strings are treated as C-style text: anything from the first NUL
character onwards is ignored. Positions are returned as indices into
the string, or None where nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _cstr(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``, or None.

    Searching for NUL gives the index of the terminator, i.e. the length.
    """
    ch = _char(c)
    text = _cstr(s)
    if ch == _NUL:
        return len(text)
    pos = text.find(ch)
    return None if pos < 0 else pos


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``, or None.

    Searching for NUL gives the index of the terminator, i.e. the length.
    """
    ch = _char(c)
    text = _cstr(s)
    if ch == _NUL:
        return len(text)
    pos = text.rfind(ch)
    return None if pos < 0 else pos


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle gives 0."""
    pos = _cstr(haystack).find(_cstr(needle))
    return None if pos < 0 else pos


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`strstr`, but the match must lie within the first ``length`` characters."""
    if length < 0:
        raise ValueError(f"negative length {length}")
    target = _cstr(needle)
    if not target:
        return 0
    pos = _cstr(haystack)[:length].find(target)
    return None if pos < 0 else pos


def _compare(s1: str, s2: str, limit: Optional[int]) -> int:
    a = _cstr(s1)[:limit]
    b = _cstr(s2)[:limit]
    for x, y in zip_longest(a, b, fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing characters, or 0 if the strings are equal."""
    return _compare(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError(f"negative length {n}")
    return _compare(s1, s2, n)


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True if both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return strcmp(s1, s2) == 0


def strnequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True if both strings are given and their first ``n`` characters match."""
    if s1 is None or s2 is None:
        return False
    return strncmp(s1, s2, n) == 0