"""Byte-level ANSI/VT100 decoder.

Bytes are classified one at a time: printable bytes are written to the screen
through the charset, a handful of C0 controls have dedicated handlers, and
``ESC [`` sequences are collected by :class:`CsiParser` and dispatched either
to the cursor/erase command table or to the SGR resolver.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum
from logging import getLogger
from typing import ClassVar, TypeAlias

from .attribute import DEFAULT_ATTRIBUTE, Attribute
from .byte_reader import ByteReader, ByteSource
from .charset import Charset, Utf8Charset
from .control_codes import ControlCode, CsiByte, CsiCommand
from .cursor_commands import CURSOR_COMMANDS, PERMISSIVE_FALLBACKS
from .errors import (
    AnsiDecodeError,
    LineLimitError,
    ParameterCountError,
    UnknownControlError,
    UnknownCsiError,
    UnknownEscapeError,
    SequenceTooLongError,
    UnsupportedParameterError,
)
from .palette import Palette, PaletteName
from .policy import ControlBytePolicy, DecodePolicy
from .screen import DEFAULT_WIDTH, Screen
from .sequence_parser import CsiParser, CsiSequence, is_parameter_byte
from .sgr import apply_sgr

ControlHandler: TypeAlias = Callable[[int], None]


class _State(IntEnum):
    GROUND = 0
    ESCAPE = 1
    CSI = 2
    DISCARD = 3


@dataclass(frozen=True, slots=True)
class DecoderConfig:
    """Settings for one decode session.

    Attributes:
        width: Columns before an automatic wrap, 80 when not positive
        strict: Raise on malformed or unsupported input instead of skipping it
        palette: Named 16-color table used for 4-bit and low 8-bit colors
        charset: Byte to character mapping, UTF-8 when None
        control_bytes: Treatment of unhandled C0 control bytes
        max_sequence_length: Longest accepted CSI body, unbounded when None
        max_lines: Largest screen height, unbounded when None
        max_columns: Largest cursor column, unbounded when None
    """

    width: int = DEFAULT_WIDTH
    strict: bool = False
    palette: PaletteName = PaletteName.CGA16
    charset: Charset | None = None
    control_bytes: ControlBytePolicy = ControlBytePolicy.IGNORE
    max_sequence_length: int | None = None
    max_lines: int | None = None
    max_columns: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0:
            object.__setattr__(self, "width", DEFAULT_WIDTH)
        object.__setattr__(self, "palette", PaletteName(self.palette))
        object.__setattr__(self, "control_bytes", ControlBytePolicy(self.control_bytes))
        for name in ("max_sequence_length", "max_lines", "max_columns"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")


class AnsiDecoder:
    """Interprets an ANSI byte stream into a :class:`Screen`.

    A decoder holds the state of a single session and is not meant to be
    shared between threads; use one instance per stream.
    """

    _logger: ClassVar = getLogger(__name__)

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self.config = config or DecoderConfig()
        self.policy = DecodePolicy(self.config.strict, self.config.control_bytes)
        self.palette = Palette(self.config.palette)
        self.charset: Charset = self.config.charset or Utf8Charset()
        self.screen = Screen(
            self.config.width, self.config.max_lines, self.config.max_columns
        )
        self.attribute: Attribute = DEFAULT_ATTRIBUTE
        self.finished = False
        self._parser = CsiParser(self.config.strict, self.config.max_sequence_length)
        self._state = _State.GROUND
        self._offset = 0
        self._init_control_handlers()

    def _init_control_handlers(self) -> None:
        """Initialize handlers for the C0 bytes with a fixed meaning"""
        self.control_handlers: dict[int, ControlHandler] = {
            ControlCode.NUL: self._handle_ignored,
            ControlCode.CR: self._handle_ignored,
            ControlCode.LF: self._handle_lf,
            ControlCode.SUB: self._handle_sub,
            ControlCode.ESC: self._handle_esc,
        }

    # ------------------------------------------------------------------ #
    # Input                                                              #
    # ------------------------------------------------------------------ #
    def read(self, source: ByteSource) -> Screen:
        """Decode every byte of *source* and return the finished screen.

        Raises:
            AnsiDecodeError: Malformed input in strict mode
            OSError: The source could not be read
        """
        reader = ByteReader(source)
        self._logger.debug("Decoding %d bytes", reader.len)
        for byte in reader:
            if not self.push_byte(byte):
                break
        return self.close()

    def feed(self, data: Iterable[int]) -> bool:
        """Decode a chunk of bytes; returns False once the session has ended."""
        for byte in data:
            if not self.push_byte(byte):
                return False
        return True

    def close(self) -> Screen:
        """End the session. A sequence cut short by the end of input is dropped.

        A code point cut short by the end of input is written as U+FFFD.
        """
        if self._state is not _State.GROUND:
            self._logger.debug("Input ended inside an escape sequence at byte %d", self._offset)
            self._state = _State.GROUND
            self._parser.reset()
        if not self.finished:
            self._flush_charset()
            self._logger.debug(
                "Decoded %d bytes into %d lines", self._offset, len(self.screen)
            )
        self.finished = True
        return self.screen

    def push_byte(self, byte: int) -> bool:
        """Process one byte; returns False once the session has ended."""
        if self.finished:
            return False
        self._offset += 1
        try:
            match self._state:
                case _State.GROUND:
                    self._push_ground(byte)
                case _State.ESCAPE:
                    self._push_escape(byte)
                case _State.CSI:
                    self._push_csi(byte)
                case _State.DISCARD:
                    self._push_discard(byte)
        except LineLimitError as err:
            self.finished = True
            self.policy.report(err)
        return not self.finished

    # ------------------------------------------------------------------ #
    # Tokenizer states                                                   #
    # ------------------------------------------------------------------ #
    def _push_ground(self, byte: int) -> None:
        if byte >= ControlCode.SP:
            self._write(byte)
            return
        handler = self.control_handlers.get(byte)
        if handler is not None:
            handler(byte)
            return
        match self.policy.control_bytes:
            case ControlBytePolicy.BLANK:
                self.screen.write(" ", self.attribute)
            case ControlBytePolicy.GLYPH:
                self._write(byte)
            case _:
                self.policy.report(UnknownControlError(byte))

    def _push_escape(self, byte: int) -> None:
        if byte == CsiByte.INTRODUCER:
            self._parser.reset()
            self._state = _State.CSI
            return
        self._state = _State.GROUND
        self.policy.report(UnknownEscapeError(byte))

    def _push_csi(self, byte: int) -> None:
        try:
            sequence = self._parser.push_byte(byte)
        except SequenceTooLongError as err:
            # the rest of the body is dropped up to its command byte
            self._state = _State.DISCARD if is_parameter_byte(byte) else _State.GROUND
            self.policy.report(err)
            return
        except AnsiDecodeError as err:
            self._state = _State.GROUND
            self.policy.report(err)
            return
        if sequence is not None:
            self._state = _State.GROUND
            self.dispatch(sequence)

    def _push_discard(self, byte: int) -> None:
        if not is_parameter_byte(byte):
            self._state = _State.GROUND

    def _write(self, byte: int) -> None:
        for char in self.charset.decode(byte):
            self.screen.write(char, self.attribute)

    def _flush_charset(self) -> None:
        try:
            for char in self.charset.flush():
                self.screen.write(char, self.attribute)
        except LineLimitError as err:
            self.policy.report(err)

    # ------------------------------------------------------------------ #
    # Control handlers                                                   #
    # ------------------------------------------------------------------ #
    def _handle_ignored(self, byte: int) -> None:
        """Handle NUL and CR, which produce no output"""

    def _handle_lf(self, byte: int) -> None:
        """Handle Line Feed: first column of the next line"""
        self.screen.newline()

    def _handle_sub(self, byte: int) -> None:
        """Handle the MS-DOS end-of-file marker; the rest of the input is discarded"""
        self._logger.debug("End-of-file marker at byte %d", self._offset)
        self.close()

    def _handle_esc(self, byte: int) -> None:
        """Handle Escape: the next byte selects the sequence type"""
        self._state = _State.ESCAPE

    # ------------------------------------------------------------------ #
    # Command dispatch                                                   #
    # ------------------------------------------------------------------ #
    def dispatch(self, sequence: CsiSequence) -> None:
        """Route a parsed CSI sequence to the SGR resolver or the cursor commands."""
        if sequence.private:
            self._logger.debug("Discarded private sequence %s", sequence)
            return
        if sequence.command == CsiCommand.SGR:
            self.attribute = apply_sgr(sequence.params, self.attribute, self.palette)
            return

        handler = CURSOR_COMMANDS.get(sequence.command)
        if handler is None:
            self.policy.report(UnknownCsiError(sequence.command))
            return
        try:
            handler(self.screen, sequence.params)
        except (ParameterCountError, UnsupportedParameterError) as err:
            self.policy.report(err)
            fallback = PERMISSIVE_FALLBACKS.get(sequence.command)
            if fallback is not None:
                fallback(self.screen, sequence.params)
