"""A small printf-style formatter with character, string, byte-buffer and linked-list helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "demo",
    "formatting",
    "linkedlist",
    "memory",
    "output",
    "strbuild",
    "strsearch",
]