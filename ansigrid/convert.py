"""One-call conversions from an ANSI byte stream.

These helpers assume IBM code page 437 with control bytes shown as glyphs,
which is what MS-DOS era ANSI art expects. Use :class:`AnsiDecoder` directly
for any other combination.
"""

import io
from typing import BinaryIO, TextIO

from .byte_reader import ByteSource
from .charset import CP437, Charset
from .decoder import AnsiDecoder, DecoderConfig
from .markup import HtmlMarkup, TextMarkup
from .palette import PaletteName
from .policy import ControlBytePolicy
from .renderer import render
from .screen import Screen


def _config(
    width: int, strict: bool, palette: PaletteName, charset: Charset | None
) -> DecoderConfig:
    return DecoderConfig(
        width=width,
        strict=strict,
        palette=palette,
        charset=charset,
        control_bytes=ControlBytePolicy.GLYPH,
    )


def decode(source: ByteSource, config: DecoderConfig | None = None) -> Screen:
    """Decode *source* into a screen of styled cells."""
    return AnsiDecoder(config).read(source)


def to_html(
    source: ByteSource,
    width: int = 80,
    *,
    strict: bool = False,
    palette: PaletteName = PaletteName.CGA16,
    charset: Charset | None = CP437,
) -> str:
    """Return the HTML fragment for the ANSI encoded text in *source*.

    Raises:
        AnsiDecodeError: Malformed input when *strict* is set
    """
    decoder = AnsiDecoder(_config(width, strict, palette, charset))
    screen = decoder.read(source)
    return render(screen, HtmlMarkup(decoder.palette))


def to_text(
    source: ByteSource,
    width: int = 80,
    *,
    strict: bool = False,
    charset: Charset | None = CP437,
) -> str:
    """Return the characters of *source* with every escape sequence applied."""
    screen = AnsiDecoder(_config(width, strict, PaletteName.CGA16, charset)).read(source)
    return render(screen, TextMarkup())


def write_html(source: ByteSource, stream: BinaryIO | TextIO, width: int = 80) -> int:
    """Write the HTML fragment for *source* to *stream*.

    Binary streams receive UTF-8. Returns the number of bytes written.
    """
    data = to_html(source, width).encode("utf-8")
    if isinstance(stream, io.TextIOBase):
        stream.write(data.decode("utf-8"))
    else:
        stream.write(data)
    return len(data)
