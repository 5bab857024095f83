"""Building new strings: copying, joining, slicing, trimming, splitting, mapping.

Strings are treated as C-style text: anything from the first NUL character
onwards is ignored. Every function returns a new string rather than
modifying its argument.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

_NUL = "\0"
_BLANKS = " \n\t"


def _cstr(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _single(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"negative {name} {value}")


def strncpy(src: str, n: int) -> str:
    """Exactly ``n`` characters: the start of ``src``, padded with NULs."""
    _non_negative("length", n)
    head = _cstr(src)[:n]
    return head + _NUL * (n - len(head))


def strcat(dest: str, src: str) -> str:
    """``src`` appended to ``dest``."""
    return _cstr(dest) + _cstr(src)


def strncat(dest: str, src: str, n: int) -> str:
    """At most ``n`` characters of ``src`` appended to ``dest``."""
    if n <= 0:
        return _cstr(dest)
    return _cstr(dest) + _cstr(src)[:n]


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    The result, counting its terminator, never exceeds ``size``. Returns the
    result and the length the full concatenation would have had; when
    ``size`` is 0 or smaller than ``dest``, ``dest`` is returned unchanged
    with ``size`` plus the length of ``src``.
    """
    _non_negative("size", size)
    head = _cstr(dest)
    tail = _cstr(src)
    if size == 0 or len(head) > size:
        return head, size + len(tail)
    room = max(0, size - 1 - len(head))
    return head + tail[:room], len(head) + len(tail)


def strsub(s: Optional[str], start: int, length: int) -> Optional[str]:
    """The ``length`` characters of ``s`` beginning at ``start``; None if ``s`` is None."""
    if s is None:
        return None
    _non_negative("start", start)
    _non_negative("length", length)
    text = _cstr(s)
    if start + length > len(text):
        raise IndexError(
            f"substring [{start}, {start + length}) runs past a string of length {len(text)}"
        )
    return text[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """``s1`` followed by ``s2``; None if either is None."""
    if s1 is None or s2 is None:
        return None
    return _cstr(s1) + _cstr(s2)


def strtrim(s: Optional[str]) -> Optional[str]:
    """``s`` without leading and trailing spaces, newlines and tabs."""
    if s is None:
        return None
    return _cstr(s).strip(_BLANKS)


def strsplit(s: Optional[str], c: str) -> Optional[List[str]]:
    """The non-empty pieces of ``s`` between occurrences of ``c``."""
    if s is None:
        return None
    sep = _single(c)
    return [piece for piece in _cstr(s).split(sep) if piece]


def _mapped_char(value: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"mapping function must return one character, got {value!r}")
    return value


def strmap(s: Optional[str], f: Callable[[str], str]) -> Optional[str]:
    """A new string made of ``f`` applied to each character of ``s``."""
    if s is None:
        return None
    return "".join(_mapped_char(f(ch)) for ch in _cstr(s))


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """Like :func:`strmap`, with each character's index passed to ``f`` first."""
    if s is None:
        return None
    return "".join(_mapped_char(f(i, ch)) for i, ch in enumerate(_cstr(s)))


def striter(s: Optional[str], f: Optional[Callable[[str], Optional[str]]]) -> Optional[str]:
    """Call ``f`` on each character of ``s``.

    Where ``f`` returns a character, it replaces the one it was given; a
    return of None keeps the original. Without ``f`` the text is unchanged.
    """
    if s is None:
        return None
    text = _cstr(s)
    if f is None:
        return text
    out = []
    for ch in text:
        replacement = f(ch)
        out.append(ch if replacement is None else _mapped_char(replacement))
    return "".join(out)


def striteri(
    s: Optional[str], f: Optional[Callable[[int, str], Optional[str]]]
) -> Optional[str]:
    """Like :func:`striter`, with each character's index passed to ``f`` first."""
    if s is None:
        return None
    text = _cstr(s)
    if f is None:
        return text
    out = []
    for i, ch in enumerate(text):
        replacement = f(i, ch)
        out.append(ch if replacement is None else _mapped_char(replacement))
    return "".join(out)