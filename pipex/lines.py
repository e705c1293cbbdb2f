"""Line-by-line reading from raw file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 3


class LineReader:
    """Reads newline-terminated lines from a file descriptor.

    Lines are returned as bytes including their trailing newline; the
    final line may lack one. ``None`` marks the end of input.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._buffer = bytearray()

    def _read(self, size: int) -> bytes:
        try:
            return os.read(self.fd, size)
        except OSError:
            self._buffer.clear()
            raise

    def read_line(self) -> bytes | None:
        """Return the next line, or ``None`` at end of input.

        Raises ``OSError`` if the descriptor cannot be read; any pending
        data is discarded.
        """
        self._read(0)
        while b"\n" not in self._buffer:
            chunk = self._read(self.buffer_size)
            if not chunk:
                break
            self._buffer += chunk
        if not self._buffer:
            return None
        cut = self._buffer.find(b"\n")
        end = len(self._buffer) if cut < 0 else cut + 1
        line = bytes(self._buffer[:end])
        del self._buffer[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of ``fd``, keeping leftover data per descriptor.

    Returns ``None`` at end of input, for a negative descriptor, or when
    reading fails.
    """
    if fd < 0:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        line = None
    if line is None:
        _readers.pop(fd, None)
    return line