"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from miniprintf.formatting import itoa


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character; an integer is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("put_char expects exactly one character")
        ch = c
    elif isinstance(c, int):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected a character, got {type(c).__name__}")
    _stream(stream).write(ch)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string as is."""
    _stream(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    _stream(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write ``n`` in decimal, taken as a 32-bit signed integer."""
    _stream(stream).write(itoa(n))