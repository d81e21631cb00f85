"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 32


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, newline kept.

    The stream is read ``buffer_size`` characters (or bytes) at a time; what
    lies past the returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def _fill(self) -> AnyStr | None:
        stash = self._stash
        while True:
            if stash is not None:
                eol = b"\n" if isinstance(stash, (bytes, bytearray)) else "\n"
                if eol in stash:
                    break
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._stash = None
                raise
            if not chunk:
                break
            stash = chunk if stash is None else stash + chunk
        return stash

    @staticmethod
    def _split(stash: AnyStr) -> tuple[AnyStr, AnyStr | None]:
        """Cut ``stash`` after its first newline; the rest is None when empty or absent."""
        eol = b"\n" if isinstance(stash, (bytes, bytearray)) else "\n"
        pos = stash.find(eol)  # type: ignore[arg-type]
        if pos < 0:
            return stash, None
        rest = stash[pos + 1:]
        return stash[:pos + 1], (rest or None)

    def readline(self) -> AnyStr | None:
        """Return the next line with its newline, the unterminated remainder, or None at the end."""
        stash = self._fill()
        if not stash:
            self._stash = None
            return None
        line, rest = self._split(stash)
        self._stash = rest
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line