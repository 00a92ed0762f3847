"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 1


def _newline(sample: str | bytes) -> str | bytes:
    return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream in chunks of ``buffer_size``.

    Each line keeps its terminating newline; the final line of a stream
    may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream is exhausted."""
        pending = self._pending
        while pending is None or _newline(pending) not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        end = pending.find(_newline(pending))
        if end == -1:
            self._pending = None
            return pending
        self._pending = pending[end + 1:] or None
        return pending[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` in order."""
    yield from LineReader(stream, buffer_size)