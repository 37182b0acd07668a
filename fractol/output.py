"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: str, stream: TextIO) -> None:
    """Write a string as is."""
    stream.write(s)


def put_endl(s: str, stream: TextIO) -> None:
    """Write a string followed by a newline."""
    stream.write(s)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    stream.write(str(n))