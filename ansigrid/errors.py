from collections.abc import Sequence


def _format_params(params: Sequence[int | None]) -> str:
    return "[" + ";".join("" if p is None else str(p) for p in params) + "]"


class AnsiDecodeError(RuntimeError):
    """Base class for anomalies found in an ANSI byte stream."""


class UnknownEscapeError(AnsiDecodeError):
    """Raised when the byte after ESC does not introduce a CSI sequence."""

    def __init__(self, byte: int) -> None:
        super().__init__(f"unrecognized ESC sequence after ESC: {byte:#04x}")
        self.byte = byte


class MissingParameterError(AnsiDecodeError):
    """Raised when ';' is encountered without a preceding parameter."""

    def __init__(self, position: int) -> None:
        super().__init__(f"encountered ';' without parameter at index {position}")
        self.position = position


class ParameterCountError(AnsiDecodeError):
    """Raised when a CSI command receives a parameter count it does not accept."""

    def __init__(self, command: str, expected: str, params: Sequence[int | None]) -> None:
        super().__init__(
            f"{command}: expected {expected} parameters: {_format_params(params)}"
        )
        self.command = command
        self.params = tuple(params)


class UnsupportedParameterError(AnsiDecodeError):
    """Raised when an erase command receives a mode it does not recognise."""

    def __init__(self, command: str, params: Sequence[int | None]) -> None:
        super().__init__(f"{command}: unrecognised parameters: {_format_params(params)}")
        self.command = command
        self.params = tuple(params)


class UnknownCsiError(AnsiDecodeError):
    """Raised for a CSI final byte with no handler."""

    def __init__(self, command: int) -> None:
        super().__init__(f"unrecognized CSI final byte: {chr(command)!r}")
        self.command = command


class UnknownControlError(AnsiDecodeError):
    """Raised for a C0 control byte outside the handled set."""

    def __init__(self, byte: int) -> None:
        super().__init__(f"unrecognized control byte: {byte:#04x}")
        self.byte = byte


class SequenceTooLongError(AnsiDecodeError):
    """Raised when a CSI body exceeds the configured length limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"CSI sequence longer than {limit} bytes")
        self.limit = limit


class LineLimitError(AnsiDecodeError):
    """Raised when the screen would grow past the configured line limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"screen exceeds {limit} lines")
        self.limit = limit
