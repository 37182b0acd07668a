"""Byte-buffer helpers with C-library style semantics on ``bytearray`` objects.

Offsets and lengths are counted in bytes. Searches that fail return ``None``.
Requests that reach past the end of a buffer raise :class:`IndexError`.
"""

from __future__ import annotations

from collections.abc import Sequence


def _check_length(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _check_span(size: int, offset: int, length: int) -> None:
    _check_length("offset", offset)
    _check_length("length", length)
    if offset + length > size:
        raise IndexError(
            f"span of {length} bytes at offset {offset} exceeds buffer of {size} bytes"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_span(len(buffer), 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def memcpy(dst: bytearray, src: Sequence[int] | bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span(len(dst), 0, n)
    _check_span(len(src), 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buffer`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled: the result is as if the source bytes were
    first copied aside.
    """
    _check_span(len(buffer), src, length)
    _check_span(len(buffer), dst, length)
    if dst != src:
        buffer[dst : dst + length] = buffer[src : src + length]
    return buffer


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``c`` (modulo 256) in ``data[:n]``."""
    _check_span(len(data), 0, n)
    index = data.find(c & 0xFF, 0, n)
    return index if index >= 0 else None


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_span(len(a), 0, n)
    _check_span(len(b), 0, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    _check_length("count", count)
    _check_length("size", size)
    return bytearray(count * size)