"""String helpers with C-library style semantics expressed on Python strings.

Positions are returned as indexes rather than pointers. A search that fails
returns ``None``. Searching for the NUL character matches the position just
past the end of the string, where a terminator would sit.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _as_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or ``None``."""
    ch = _as_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or ``None``."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    _check_size("n", n)
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the difference at the first mismatch."""
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters of ``haystack``."""
    _check_size("length", length)
    if not needle:
        return 0
    if not haystack:
        return None
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had.
    """
    _check_size("size", size)
    used = min(len(dest), size)
    total = used + len(src)
    if size == 0 or used >= size:
        return dest, total
    return dest + src[: size - 1 - used], total


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [part for part in s.split(sep) if part]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every character in place with ``func(index, char)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)