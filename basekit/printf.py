"""A small printf writing to standard output.

Supported conversions: %c %s %p %d %i %u %x %X and %%.
"""

from __future__ import annotations

from typing import Any

from basekit.output import NULL_TEXT, putstr_fd

STDOUT = 1
NIL_TEXT = "(nil)"

_UINT_MASK = 0xFFFFFFFF


def _as_int32(n: int) -> int:
    return ((n + 2**31) & _UINT_MASK) - 2**31


def _as_uint32(n: int) -> int:
    return n & _UINT_MASK


def _render_char(value: Any) -> bytes:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value.encode("utf-8")
    return bytes([int(value) & 0xFF])


def _render_str(value: Any) -> bytes:
    if value is None:
        value = NULL_TEXT
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value).encode("utf-8")


def _render_pointer(value: Any) -> bytes:
    if value is None or value == 0:
        return NIL_TEXT.encode("ascii")
    address = value if isinstance(value, int) else id(value)
    return f"0x{address:x}".encode("ascii")


def _render(conversion: str, value: Any) -> bytes:
    if conversion == "c":
        return _render_char(value)
    if conversion == "s":
        return _render_str(value)
    if conversion == "p":
        return _render_pointer(value)
    if conversion in "di":
        return str(_as_int32(int(value))).encode("ascii")
    if conversion == "u":
        return str(_as_uint32(int(value))).encode("ascii")
    if conversion == "x":
        return f"{_as_uint32(int(value)):x}".encode("ascii")
    return f"{_as_uint32(int(value)):X}".encode("ascii")


def _format(fmt: str, args: tuple[Any, ...]) -> bytes:
    pieces: list[bytes] = []
    remaining = iter(args)
    pos = 0
    while True:
        mark = fmt.find("%", pos)
        if mark < 0:
            pieces.append(fmt[pos:].encode("utf-8"))
            break
        pieces.append(fmt[pos:mark].encode("utf-8"))
        if mark + 1 >= len(fmt):
            raise ValueError("format string ends with a lone '%'")
        conversion = fmt[mark + 1]
        if conversion == "%":
            pieces.append(b"%")
        elif conversion in "cspdiuxX":
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{conversion}") from None
            pieces.append(_render(conversion, value))
        else:
            raise ValueError(f"unsupported conversion %{conversion}")
        pos = mark + 2
    return b"".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Format args according to fmt, write the result to standard output, return the byte count.

    Integers for %d and %i wrap to 32-bit signed, for %u %x %X to 32-bit
    unsigned. A None string prints "(null)" and a None or zero pointer "(nil)".
    An unknown conversion or a trailing '%' raises ValueError before anything
    is written; too few arguments raise TypeError.
    """
    if fmt is None:
        raise ValueError("format must not be None")
    return putstr_fd(_format(fmt, args), STDOUT)