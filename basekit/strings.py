"""String helpers: searching, comparing, slicing, splitting and joining.

Text functions work on ``str``. The bounded copy functions ``strlcpy`` and
``strlcat`` write into fixed-size ``bytearray`` buffers that hold
NUL-terminated byte strings.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _c_bytes(data: BytesLike) -> bytes:
    """Return the bytes of data up to, not including, the first NUL."""
    raw = bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def strlen(s: Union[str, BytesLike, None]) -> int:
    """Return the length of s.

    None has length 0. For a byte buffer the length stops at the first NUL.
    """
    if s is None:
        return 0
    if isinstance(s, str):
        return len(s)
    return len(_c_bytes(s))


def split(s: str, c: CharLike) -> list[str]:
    """Split s on the separator character c, dropping empty pieces."""
    sep = _char(c)
    return [piece for piece in s.split(sep) if piece]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first c in s, or None.

    Searching for NUL returns the index of the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last c in s, or None.

    Searching for NUL returns the index of the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of s1 and s2.

    Returns the difference of the code points at the first mismatch, the end
    of a string counting as code point 0; returns 0 when they agree.
    """
    if n < 0:
        raise ValueError(f"negative length {n}")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"negative length {length}")
    if not needle:
        return 0
    if length < len(needle):
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: Union[str, BytesLike]) -> Union[str, bytes]:
    """Return a copy of s; a byte buffer is copied up to its first NUL."""
    if isinstance(s, str):
        return s[:]
    return _c_bytes(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start past the end of s yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Return s1 followed by s2; None counts as an empty string."""
    return (s1 or "") + (s2 or "")


def strtrim(s: str, charset: str) -> str:
    """Return s without leading and trailing characters that occur in charset."""
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of f(index, char) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: Optional[MutableSequence[Any]], f: Callable[[int, Any], Any]) -> None:
    """Replace each item of chars, in place, with f(index, item)."""
    if chars is None:
        return
    for index, item in enumerate(chars):
        chars[index] = f(index, item)


def strlcpy(dest: bytearray, src: BytesLike, size: int) -> int:
    """Copy src into dest as a NUL-terminated string of at most size bytes in all.

    Returns the length of src, so a result of size or more means the copy
    was truncated. Nothing is written when size is 0.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    data = _c_bytes(src)
    if size == 0:
        return len(data)
    count = min(len(data), size - 1)
    if len(dest) < count + 1:
        raise ValueError(f"destination of {len(dest)} bytes cannot hold {count + 1}")
    dest[:count] = data[:count]
    dest[count] = 0
    return len(data)


def strlcat(dest: bytearray, src: BytesLike, size: int) -> int:
    """Append src to the NUL-terminated string in dest, keeping the total within size bytes.

    Returns the length the full result would have had: the length of the
    string in dest plus the length of src, or size plus the length of src
    when size does not exceed the string already in dest.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    data = _c_bytes(src)
    dest_len = strlen(dest)
    if size <= dest_len:
        return size + len(data)
    count = min(len(data), size - dest_len - 1)
    end = dest_len + count
    if len(dest) < end + 1:
        raise ValueError(f"destination of {len(dest)} bytes cannot hold {end + 1}")
    dest[dest_len:end] = data[:count]
    dest[end] = 0
    return dest_len + len(data)