from dataclasses import dataclass
from enum import Enum, unique
from logging import getLogger
from typing import ClassVar

from .errors import AnsiDecodeError, LineLimitError, SequenceTooLongError


@unique
class ControlBytePolicy(str, Enum):
    """How C0 control bytes outside the handled set are treated."""

    IGNORE = "ignore"
    BLANK = "blank"
    GLYPH = "glyph"


@dataclass(frozen=True, slots=True)
class DecodePolicy:
    """Single point where anomalies are either raised or logged and skipped.

    In strict mode every reported error aborts the session. In permissive
    mode the error is logged and the caller carries on with its best-effort
    interpretation.
    """

    strict: bool = False
    control_bytes: ControlBytePolicy = ControlBytePolicy.IGNORE

    _logger: ClassVar = getLogger(__name__)

    def report(self, error: AnsiDecodeError) -> None:
        if self.strict:
            raise error
        if isinstance(error, (LineLimitError, SequenceTooLongError)):
            self._logger.warning("Resource limit reached: %s", error)
        else:
            self._logger.debug("Ignored: %s", error)
