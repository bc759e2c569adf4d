"""Byte-buffer operations: fill, search, copy, move, compare and allocate."""

from __future__ import annotations

from collections.abc import Sized


def _check_count(n: int, *buffers: Sized) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_count(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def memchr(buf: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if dst == src or n == 0:
        return buf
    if src + n > len(buf) or dst + n > len(buf):
        raise ValueError("region lies outside the buffer")
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first differing bytes, or 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)