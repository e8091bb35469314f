"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 4095


class LineReader:
    """Buffered line reader over a raw file descriptor.

    Lines are returned as bytes and keep their trailing newline; the last
    line of the input may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()
        self._searched = 0

    def _take(self, end: int) -> bytes:
        line = bytes(self._pending[:end])
        del self._pending[:end]
        self._searched = 0
        return line

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once the input is exhausted.

        A read error discards any buffered data and raises OSError.
        """
        while True:
            newline = self._pending.find(b"\n", self._searched)
            if newline >= 0:
                return self._take(newline + 1)
            self._searched = len(self._pending)
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                self._searched = 0
                raise
            if not chunk:
                if self._pending:
                    return self._take(len(self._pending))
                return None
            self._pending += chunk

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from fd, or None at end of input.

    Buffered data is kept per descriptor between calls and dropped once the
    descriptor reaches its end or fails.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line