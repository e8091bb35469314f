"""Write characters, strings and numbers to file descriptors.

Every function returns the number of bytes written. A failing write raises
OSError, and an invalid argument raises ValueError.
"""

from __future__ import annotations

import os
from typing import Optional, Union

from basekit.numbers import INT_MAX, INT_MIN

DECIMAL = "0123456789"
NULL_TEXT = "(null)"

TextLike = Union[str, bytes, bytearray]


def _write(fd: int, data: bytes) -> int:
    """Write all of data to fd and return its length."""
    view = memoryview(data)
    written = 0
    while written < len(data):
        written += os.write(fd, view[written:])
    return written


def _encode(s: TextLike) -> bytes:
    if isinstance(s, str):
        return s.encode("utf-8")
    return bytes(s)


def _check_base(base: str) -> None:
    if len(base) <= 1:
        raise ValueError(f"base {base!r} needs at least two digits")
    if "+" in base or "-" in base:
        raise ValueError(f"base {base!r} must not contain a sign")
    if len(set(base)) != len(base):
        raise ValueError(f"base {base!r} has repeated digits")


def _digits(n: int, base: str) -> str:
    radix = len(base)
    out = []
    while True:
        n, rest = divmod(n, radix)
        out.append(base[rest])
        if n == 0:
            break
    return "".join(reversed(out))


def putchar_fd(c: Union[int, str], fd: int) -> int:
    """Write one character to fd; an int is written as the byte c mod 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return _write(fd, c.encode("utf-8"))
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return _write(fd, bytes([c & 0xFF]))


def putstr_fd(s: Optional[TextLike], fd: int) -> int:
    """Write s to fd; None is written as "(null)"."""
    if s is None:
        s = NULL_TEXT
    return _write(fd, _encode(s))


def putendl_fd(s: Optional[TextLike], fd: int) -> int:
    """Write s followed by a newline to fd."""
    count = putstr_fd(s, fd)
    return count + _write(fd, b"\n")


def write_nb(n: int, base: str, fd: int) -> int:
    """Write the non-negative integer n to fd using the digits of base."""
    if n < 0:
        raise ValueError(f"write_nb expects a non-negative number, got {n}")
    if len(base) <= 1:
        raise ValueError(f"base {base!r} needs at least two digits")
    return _write(fd, _digits(n, base).encode("utf-8"))


def putnb_base_fd(n: int, base: str, fd: int) -> int:
    """Write the integer n to fd in the given base, with a leading '-' if negative.

    The base must have at least two distinct digits and no sign characters.
    """
    _check_base(base)
    if n < 0:
        return _write(fd, b"-") + write_nb(-n, base, fd)
    return write_nb(n, base, fd)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the 32-bit signed integer n to fd in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return putnb_base_fd(n, DECIMAL, fd)