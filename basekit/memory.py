"""Byte-buffer helpers: fill, copy, compare and search."""

from __future__ import annotations

from typing import Optional, Union

INT_MAX = 2**31 - 1

BytesLike = Union[bytes, bytearray, memoryview]


def _check(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"length {n} exceeds buffer of size {length}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check(n, len(buf))
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    Requests of INT_MAX bytes or more raise MemoryError.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    if nmemb >= INT_MAX or size >= INT_MAX or nmemb * size >= INT_MAX:
        raise MemoryError(f"allocation of {nmemb} x {size} bytes refused")
    return bytearray(nmemb * size)


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c (mod 256) among the first n, or None."""
    _check(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair, else 0."""
    _check(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first n bytes of src into dest and return dest."""
    _check(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes within buf from src_offset to dest_offset; regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check(n, len(buf) - dest_offset, len(buf) - src_offset)
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with c (mod 256) and return buf."""
    _check(n, len(buf))
    buf[:n] = bytes([c & 0xFF]) * n
    return buf