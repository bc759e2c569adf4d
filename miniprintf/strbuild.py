"""Building new strings from existing ones: slicing, joining, trimming, splitting, mapping.

Strings are treated as terminated by their first NUL character, if any.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

from miniprintf.strsearch import strdup, strlen

_NUL_VALUES = ("\0", 0)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end of ``s`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + 1 > strlen(s):
        return ""
    return strdup(s)[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``s``."""
    return strdup(s).strip(strdup(chars))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("sep must be exactly one character")
    return [word for word in strdup(s).split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(strdup(s)))


def striteri(s: MutableSequence[Any], func: Callable[[int, MutableSequence[Any]], None]) -> None:
    """Call ``func(index, s)`` for each element of ``s`` before its first NUL.

    ``func`` may change ``s`` in place; the terminator is checked again
    before every call.
    """
    index = 0
    while index < len(s) and s[index] not in _NUL_VALUES:
        func(index, s)
        index += 1