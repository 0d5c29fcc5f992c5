"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


def _newline(data: str | bytes) -> str | bytes:
    return b"\n" if isinstance(data, bytes) else "\n"


def _cut_at_nul(data: AnyStr) -> AnyStr:
    nul = b"\0" if isinstance(data, bytes) else "\0"
    return data.split(nul, 1)[0]


class LineReader(Generic[AnyStr]):
    """Return lines of a text or binary stream, each with its newline if it had one.

    The stream is read ``buffer_size`` units at a time; a negative size is
    treated as zero, which reads nothing. Within each chunk read, a NUL
    character and whatever follows it are dropped.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        self.stream = stream
        self.buffer_size = max(buffer_size, 0)
        self._buffer: AnyStr | None = None

    def _fill(self) -> AnyStr | None:
        buffer = self._buffer
        while buffer is None or _newline(buffer) not in buffer:
            try:
                chunk = self.stream.read(self.buffer_size)
            except OSError:
                self._buffer = None
                raise
            if not chunk:
                break
            chunk = _cut_at_nul(chunk)
            buffer = chunk if buffer is None else buffer + chunk
        return buffer

    def read_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` at end of stream."""
        buffer = self._fill()
        if not buffer:
            self._buffer = None
            return None
        newline_at = buffer.find(_newline(buffer))
        end = len(buffer) if newline_at < 0 else newline_at + 1
        line, rest = buffer[:end], buffer[end:]
        self._buffer = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``."""
    yield from LineReader(stream, buffer_size)