"""Reading a file descriptor one line at a time.

A :class:`LineReader` keeps what it has read past the last returned line
separately for each file descriptor, so several descriptors can be read
in turn without losing data.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 42
MAX_FD = 1024


class LineReader:
    """Reads lines from file descriptors in chunks of ``buffer_size`` bytes."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line of ``fd``, newline included, or None at end of file.

        The last line is returned without a newline when the data does not
        end with one. A read error discards what was buffered for ``fd``
        and propagates.
        """
        if fd < 0 or fd > MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        buffer = self._pending.pop(fd, b"")
        while b"\n" not in buffer:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                return buffer or None
            buffer += chunk
        line, _, rest = buffer.partition(b"\n")
        if rest:
            self._pending[fd] = rest
        return line + b"\n"


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of ``fd`` using a shared reader, or None at end of file."""
    return _default_reader.read_line(fd)


def iter_lines(fd: int) -> Iterator[bytes]:
    """Yield the remaining lines of ``fd`` through the shared reader."""
    while (line := get_next_line(fd)) is not None:
        yield line