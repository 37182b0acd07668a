"""Conversions between decimal text and numbers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LONG_BITS = 64
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _skip(text: str, chars: frozenset[str] | str) -> int:
    pos = 0
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def _peek(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def atodbl(text: str) -> float:
    """Parse a leading decimal number such as ``-1.25`` and return it as a float.

    Leading whitespace is skipped and trailing text is ignored. A number that
    starts with a bare ``.`` (no sign) yields ``0.0``.
    """
    pos = _skip(text, _WHITESPACE)
    if _peek(text, pos) == ".":
        return 0.0
    sign = 1
    if _peek(text, pos) in ("-", "+") and _peek(text, pos):
        if text[pos] == "-":
            sign = -1
        pos += 1

    integer_part = 0
    while _is_digit(_peek(text, pos)):
        integer_part = integer_part * 10 + int(text[pos])
        pos += 1

    fractional_part = 0.0
    if _peek(text, pos) == ".":
        pos += 1
        divisor = 1.0
        while _is_digit(_peek(text, pos)):
            divisor *= 10
            fractional_part += int(text[pos]) / divisor
            pos += 1

    return sign * (integer_part + fractional_part)


def atoi(text: str) -> int:
    """Parse a whole string as a 32-bit signed integer.

    Leading spaces and one sign are accepted. Any other non-digit character
    makes the result ``0``. A value outside the 32-bit range raises
    :class:`OverflowError`.
    """
    pos = _skip(text, " ")
    sign = 1
    if _peek(text, pos) in ("-", "+") and _peek(text, pos):
        if text[pos] == "-":
            sign = -1
        pos += 1
    if _peek(text, pos) in ("-", "+") and _peek(text, pos):
        return 0

    limit = INT_MAX if sign == 1 else -INT_MIN
    total = 0
    for ch in text[pos:]:
        if not _is_digit(ch):
            return 0
        total = total * 10 + int(ch)
        if total > limit:
            raise OverflowError(f"{text!r} does not fit in a 32-bit integer")
    return sign * total


def _wrap_long(value: int) -> int:
    value &= (1 << _LONG_BITS) - 1
    if value >= 1 << (_LONG_BITS - 1):
        value -= 1 << _LONG_BITS
    return value


def atol(text: str) -> int:
    """Parse text as a 64-bit integer the way the original helper does.

    Leading spaces and one sign are accepted. Characters after the sign are
    not validated, a negative sign always yields ``0``, and the result wraps
    to the 64-bit signed range.
    """
    pos = _skip(text, " ")
    if _peek(text, pos) in ("-", "+") and _peek(text, pos):
        if text[pos] == "-":
            return 0
        pos += 1
    total = 0
    for ch in text[pos:]:
        total = _wrap_long(total * 10 + (ord(ch) - ord("0")))
    return total


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)