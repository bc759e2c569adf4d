"""Show the formatter next to the standard formatting for a few sample values."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from miniprintf.formatting import printf

_UINT_MAX = 0xFFFFFFFF


def _compare(out: TextIO, fmt: str, args: tuple[Any, ...], reference: str) -> None:
    text = f"Real function: {reference}\n"
    out.write(text)
    out.write(f"Real function returns: {len(text)}\n\n")
    count = printf(f"Your function: {fmt}\n", *args, file=out)
    out.write(f"Your function returns: {count}\n\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the comparison run to standard output."""
    parser = argparse.ArgumentParser(
        description="Compare the formatter's output with standard formatting."
    )
    parser.parse_args(argv)
    out = sys.stdout

    text = "This is a test"
    out.write("-.- String Test -.-\n")
    _compare(out, "%s", (text,), "%s" % text)

    a = 123456789
    out.write("-.- Decimal Test -.-\n")
    _compare(out, "%d", (a,), "%d" % a)

    target = object()
    out.write("-.- Pointer Test -.-\n")
    _compare(out, "%p", (target,), "%#x" % id(target))

    out.write("-.- Hexadecimal Test -.-\n")
    _compare(out, "%x", (a,), "%x" % a)
    _compare(out, "%X", (a * 2,), "%X" % (a * 2))

    out.write("-.- Unsigned Test -.-\n")
    _compare(out, "%u", (_UINT_MAX,), "%u" % _UINT_MAX)

    out.write("-.- NULL String Test -.-\n")
    _compare(out, "NULL %s NULL", (None,), "NULL %s NULL" % "(null)")
    return 0


if __name__ == "__main__":
    sys.exit(main())