"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 42
MAX_BUFFER_SIZE = 1_000_000


class LineReader(Generic[AnyStr]):
    """Return successive lines of a file descriptor or readable stream.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, source: int | IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(source, int) and source < 0:
            raise ValueError("file descriptor must not be negative")
        self._source = source
        self._buffer_size = min(buffer_size, MAX_BUFFER_SIZE)
        self._stash: AnyStr | None = None

    def _read_chunk(self) -> AnyStr:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)  # type: ignore[return-value]
        return self._source.read(self._buffer_size)

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, bytes) else "\n"  # type: ignore[return-value]

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream is exhausted."""
        stash = self._stash
        while True:
            if stash is not None and self._newline(stash) in stash:
                break
            chunk = self._read_chunk()
            stash = chunk if stash is None else stash + chunk
            if not chunk:
                break
        if not stash:
            self._stash = None
            return None
        cut = stash.find(self._newline(stash))
        if cut < 0:
            self._stash = None
            return stash
        line, rest = stash[: cut + 1], stash[cut + 1 :]
        self._stash = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line