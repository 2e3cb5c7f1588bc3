"""Byte to display character mapping.

ANSI art for the IBM PC is almost always code page 437, artworks for the
Commodore Amiga use ISO-8859-1, and modern terminal captures are UTF-8.
"""

import codecs
from typing import Final, Protocol


class Charset(Protocol):
    def decode(self, byte: int) -> str:
        """Return the character for *byte*, or "" while a multi-byte code point is incomplete."""
        ...

    def flush(self) -> str:
        """Return what an incomplete trailing code point decodes to at end of input."""
        ...


class CodecCharset:
    """Single-byte charset backed by a Python codec."""

    __slots__ = ("encoding", "_table")

    def __init__(self, encoding: str) -> None:
        self.encoding = codecs.lookup(encoding).name
        self._table = bytes(range(256)).decode(self.encoding, errors="replace")
        if len(self._table) != 256:
            raise ValueError(f"{encoding} is not a single-byte encoding")

    def decode(self, byte: int) -> str:
        return self._table[byte]

    def flush(self) -> str:
        return ""

    def __repr__(self) -> str:
        return f"CodecCharset({self.encoding!r})"


class Utf8Charset:
    """Incremental UTF-8 charset, invalid sequences become U+FFFD."""

    __slots__ = ("_decoder",)

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def decode(self, byte: int) -> str:
        return self._decoder.decode(bytes((byte,)))

    def flush(self) -> str:
        return self._decoder.decode(b"", final=True)

    def __repr__(self) -> str:
        return "Utf8Charset()"


CP437: Final[CodecCharset] = CodecCharset("cp437")
ISO8859_1: Final[CodecCharset] = CodecCharset("latin-1")


def charset_for(name: str | None) -> Charset:
    """Return a charset for a codec name; None or any UTF-8 alias gives UTF-8."""
    if name is None or codecs.lookup(name).name == "utf-8":
        return Utf8Charset()
    return CodecCharset(name)
