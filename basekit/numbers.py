"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading whitespace is skipped and a single '+' or '-' is honoured;
    parsing stops at the first non-digit. Text without digits yields 0.
    A value outside the 32-bit signed range raises OverflowError.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    value = 0
    limit = -INT_MIN if negative else INT_MAX
    while pos < length and "0" <= text[pos] <= "9":
        value = 10 * value + (ord(text[pos]) - ord("0"))
        if value > limit:
            raise OverflowError(f"integer out of 32-bit range in {text!r}")
        pos += 1
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)