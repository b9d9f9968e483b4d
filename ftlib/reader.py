"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 10


class LineReader:
    """Reads lines from a file descriptor in chunks of buffer_size bytes."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must be non-negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        if b"\n" in self._pending:
            return
        while True:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                return
            self._pending += chunk
            if b"\n" in chunk:
                return

    def readline(self) -> str | None:
        """Next line with its newline kept, or None at end of input."""
        try:
            self._fill()
        except OSError:
            self._pending.clear()
            raise
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Next line of fd, keeping unread data per descriptor between calls; None at end."""
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.readline()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line