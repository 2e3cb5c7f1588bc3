from dataclasses import dataclass
from logging import getLogger
from typing import ClassVar

from .control_codes import CsiByte
from .errors import MissingParameterError, SequenceTooLongError


def is_parameter_byte(byte: int) -> bool:
    """True for bytes that continue a CSI body; anything else is the command byte."""
    return 0x30 <= byte <= 0x39 or byte in (
        CsiByte.SEPARATOR,
        CsiByte.PRIVATE,
        CsiByte.SPACE,
    )


@dataclass(frozen=True, slots=True)
class CsiSequence:
    """A parsed Control Sequence Introducer body.

    Attributes:
        params: Parameters in order, None for an omitted parameter
        command: The final byte
        private: True when a '?' marker was present
    """

    params: tuple[int | None, ...]
    command: int
    private: bool = False

    def __str__(self) -> str:
        body = ";".join("" if p is None else str(p) for p in self.params)
        marker = "?" if self.private else ""
        return f"ESC[{marker}{body}{chr(self.command)}"


class CsiParser:
    """Incremental parser for the bytes following ``ESC [``.

    Bytes are pushed one at a time; a :class:`CsiSequence` is returned once
    the command byte arrives, after which the parser is ready for the next
    sequence.
    """

    _logger: ClassVar = getLogger(__name__)

    def __init__(self, strict: bool = False, max_length: int | None = None) -> None:
        self.strict = strict
        self.max_length = max_length
        self.reset()

    def reset(self) -> None:
        self._params: list[int | None] = []
        self._value: int | None = None
        self._private = False
        self._length = 0

    def push_byte(self, byte: int) -> CsiSequence | None:
        """Consume one byte of the sequence body.

        Returns:
            The completed sequence when *byte* is the command byte, None otherwise

        Raises:
            MissingParameterError: ';' without digits, strict mode only
            SequenceTooLongError: The body exceeded ``max_length``
        """
        self._length += 1
        if self.max_length is not None and self._length > self.max_length:
            self.reset()
            raise SequenceTooLongError(self.max_length)

        if 0x30 <= byte <= 0x39:
            digit = byte - 0x30
            self._value = digit if self._value is None else self._value * 10 + digit
            return None

        match byte:
            case CsiByte.SEPARATOR:
                self._commit()
                return None
            case CsiByte.PRIVATE:
                self._private = True
                return None
            case CsiByte.SPACE:
                return None

        # command byte
        if self._value is not None:
            self._params.append(self._value)
        elif self._params:
            # trailing ';' before the command byte
            self._omit()
        sequence = CsiSequence(tuple(self._params), byte, self._private)
        self.reset()
        self._logger.debug("Parsed %s", sequence)
        return sequence

    def _commit(self) -> None:
        if self._value is None:
            self._omit()
            return
        self._params.append(self._value)
        self._value = None

    def _omit(self) -> None:
        if self.strict:
            position = len(self._params)
            self.reset()
            raise MissingParameterError(position)
        self._params.append(None)
