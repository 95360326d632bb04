"""Read a file descriptor one line at a time without consuming past the line."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = ["LineReader"]

# One byte per read so nothing beyond the current line is taken from a shared
# descriptor such as standard input.
_BUFFER_SIZE = 1
_MAX_FD = 1024


class LineReader:
    """Yield the lines of a file descriptor, each keeping its trailing newline."""

    def __init__(self, fd: int) -> None:
        if fd < 0 or fd > _MAX_FD:
            raise ValueError(f"invalid file descriptor: {fd}")
        self.fd = fd
        self._pending = bytearray()

    def _fill(self) -> None:
        """Read until a newline is buffered or the descriptor reports end of file."""
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, _BUFFER_SIZE)
            if not chunk:
                return
            self._pending.extend(chunk)

    def next_line(self) -> str | None:
        """Return the next line, newline included, or ``None`` at end of input."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:cut])
        del self._pending[:cut]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line