from collections.abc import Iterator
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Final, TypeAlias

from bitstring import ConstBitStream, ReadError

ByteSource: TypeAlias = bytes | bytearray | memoryview | str | PathLike | BinaryIO

CHUNK_SIZE: Final[int] = 8192


class ByteReaderError(RuntimeError):
    """Raised when the underlying stream ends in the middle of a byte."""


class ByteReader:
    """Sequential byte access over a :class:`bitstring.ConstBitStream`.

    Accepts in-memory bytes, a filesystem path (memory-mapped lazily by
    bitstring) or a binary stream exposing ``read()``. Errors raised while
    opening or reading the source propagate unchanged.
    """

    def __init__(self, source: ByteSource) -> None:
        self._bs = self._open(source)

    @staticmethod
    def _open(source: ByteSource) -> ConstBitStream:
        match source:
            case bytes() | bytearray() | memoryview():
                return ConstBitStream(bytes(source))
            case str() | PathLike():
                path = Path(source)
                if path.stat().st_size == 0:
                    # an empty file cannot be memory-mapped
                    return ConstBitStream()
                return ConstBitStream(filename=str(path))
            case _ if hasattr(source, "read"):
                return ConstBitStream(source.read())
            case _:
                raise TypeError(f"Unsupported byte source: {type(source).__name__}")

    @property
    def pos(self) -> int:
        """Current read position in *bytes*."""
        return self._bs.pos // 8

    @property
    def len(self) -> int:
        """Total length of the source in *bytes*."""
        return self._bs.len // 8

    def chunks(self, size: int = CHUNK_SIZE) -> Iterator[bytes]:
        """Yield the remaining bytes in chunks of at most *size*."""
        while (remaining := self.len - self.pos) > 0:
            try:
                yield self._bs.read(f"bytes:{min(size, remaining)}")
            except ReadError as err:
                raise ByteReaderError("unexpected end of stream") from err

    def __iter__(self) -> Iterator[int]:
        for chunk in self.chunks():
            yield from chunk
