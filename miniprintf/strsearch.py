"""String length, comparison, search and bounded copying.

Strings are treated as terminated by their first NUL character, if any.
Positions are returned as indices, with ``None`` for "not found".
"""

from __future__ import annotations

_NUL = "\0"


def _terminated(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _char_code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected exactly one character")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c - 256 if c >= 256 else c
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Return the length of ``s`` up to its first NUL character."""
    return len(_terminated(s))


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL character."""
    return _terminated(s)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, with a
    missing character counting as 0, or 0 when the compared parts match.
    """
    a_text = _terminated(s1)
    b_text = _terminated(s2)
    for i in range(max(n, 0)):
        a = ord(a_text[i]) if i < len(a_text) else 0
        b = ord(b_text[i]) if i < len(b_text) else 0
        if a != b or not a:
            return a - b
    return 0


def strchr(s: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL gives the index of the terminator.
    """
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.find(chr(code)) if 0 < code <= 0x10FFFF else -1
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``s``.

    Searching for NUL gives the index of the terminator.
    """
    text = _terminated(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code)) if 0 < code <= 0x10FFFF else -1
    return None if index < 0 else index


def strnstr(hay: str, needle: str, n: int) -> int | None:
    """Return the index of ``needle`` in the first ``n`` characters of ``hay``.

    An empty needle is found at index 0.
    """
    text = _terminated(hay)
    wanted = _terminated(needle)
    if not wanted:
        return 0
    j = 0
    while j < len(text) and j + len(wanted) <= n:
        if text.startswith(wanted, j):
            return j
        j += 1
    return None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the copied text and the full length of ``src``.
    """
    text = _terminated(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation
    would have had.
    """
    head = _terminated(dst)
    tail = _terminated(src)
    if size == 0:
        return head, len(tail)
    if size < len(head):
        return head, size + len(tail)
    room = max(size - 1 - len(head), 0)
    appended = tail[:room]
    result = head + appended
    return result, len(result) + len(tail) - len(appended)