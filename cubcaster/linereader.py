"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from os import PathLike
from typing import IO, AnyStr, Generic, Iterator, Optional, Union

_FILE_BUFFER_SIZE = 4096


class LineReader(Generic[AnyStr]):
    """Hand out the lines of a stream, each with its newline if it had one.

    Reads happen ``buffer_size`` characters (or bytes) at a time.  Text
    that was read past the end of a line is kept for the next call.  A
    final line without a newline is returned as it is, and ``None``
    marks the end of the stream.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        pending = self._pending
        newline = None
        while True:
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                if newline in pending:
                    return pending
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                return pending
            pending = chunk if pending is None else pending + chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        pending = self._fill()
        if not pending:
            self._pending = None
            return None
        newline = "\n" if isinstance(pending, str) else b"\n"
        end = pending.find(newline)
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1 :] or None
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path: Union[str, PathLike]) -> Iterator[str]:
    """Yield the lines of a text file, line endings kept untouched."""
    with open(path, encoding="utf-8", newline="") as stream:
        yield from LineReader(stream, _FILE_BUFFER_SIZE)