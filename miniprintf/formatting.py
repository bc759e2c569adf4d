"""Printf-style formatting for the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

_INT_BITS = 32
_PTR_BITS = 64
_NULL_STRING = "(null)"


def _to_unsigned(n: int, bits: int) -> int:
    return n & ((1 << bits) - 1)


def _to_signed(n: int, bits: int) -> int:
    n = _to_unsigned(n, bits)
    if n >= 1 << (bits - 1):
        n -= 1 << bits
    return n


def _require_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def itoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit signed integer."""
    return str(_to_signed(_require_int(n), _INT_BITS))


def format_unsigned(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit unsigned integer."""
    return str(_to_unsigned(_require_int(n), _INT_BITS))


def format_hex(n: int, upper: bool = False) -> str:
    """Return ``n`` as 32-bit unsigned hexadecimal, without prefix."""
    value = _to_unsigned(_require_int(n), _INT_BITS)
    return format(value, "X" if upper else "x")


def format_pointer(n: Any) -> str:
    """Return an address as ``0x`` followed by lower-case hex digits.

    ``None`` stands for a null address; any object other than an integer
    is represented by its identity.
    """
    if n is None:
        address = 0
    elif isinstance(n, int):
        address = n
    else:
        address = id(n)
    return "0x" + format(_to_unsigned(address, _PTR_BITS), "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_to_unsigned(_require_int(value), 8))


def _format_string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": format_pointer,
    "d": itoa,
    "i": itoa,
    "u": format_unsigned,
    "x": lambda v: format_hex(v, upper=False),
    "X": lambda v: format_hex(v, upper=True),
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        # Unknown conversions produce nothing and consume no argument.
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return handler(value)


def sformat(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    values = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sformat(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)