"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Data is pulled from the stream in chunks of ``buffer_size`` until a chunk
    holds a newline or the stream is exhausted; what is left after the line
    stays buffered for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        self._stream = stream
        self._size = buffer_size
        self._pending: AnyStr | None = None

    def _fill(self) -> AnyStr:
        pending = self._pending
        while True:
            chunk = self._stream.read(self._size)
            if chunk is None:
                chunk = pending[:0] if pending is not None else ""
            if pending is None:
                pending = chunk[:0]
            pending += chunk
            newline = "\n" if isinstance(chunk, str) else b"\n"
            if not chunk or newline in chunk:
                return pending

    def next_line(self) -> AnyStr | None:
        """Return the next line, newline included, or None at the end.

        A read error drops the buffered data and propagates.
        """
        if self._size <= 0:
            self._pending = None
            return None
        try:
            pending = self._fill()
        except OSError:
            self._pending = None
            raise
        if not pending:
            self._pending = None
            return None
        newline = "\n" if isinstance(pending, str) else b"\n"
        index = pending.find(newline)
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[: index + 1], pending[index + 1:]
        self._pending = rest or None
        return line

    def reset(self) -> None:
        """Discard any data read ahead of the last returned line."""
        self._pending = None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line