"""Shared helpers for the command line tools - logging setup and input selection."""

from __future__ import annotations
import logging
import sys
from enum import Enum, unique
from pathlib import Path
from typing import BinaryIO, Final

from ansigrid.byte_reader import ByteSource
from ansigrid.charset import Charset, charset_for

STDIN_MARKER: Final[str] = "-"


# ------------------------------------------------------------------
# Logging
# ------------------------------------------------------------------
@unique
class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_int(self) -> int:
        return getattr(logging, self.value)


def setup_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.to_int(),
        format="%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
    )


# ------------------------------------------------------------------
# IO helpers
# ------------------------------------------------------------------
def input_source(path: str | Path) -> ByteSource:
    """Return *path* as a decoder source, or the stdin buffer for '-'."""
    if str(path) == STDIN_MARKER:
        return sys.stdin.buffer
    return Path(path)


def output_stream(path: str | Path | None) -> BinaryIO:
    """Open *path* for binary writing, or return the stdout buffer for None/'-'."""
    if path is None or str(path) == STDIN_MARKER:
        return sys.stdout.buffer
    return Path(path).open("wb")


def charset_option(name: str) -> Charset:
    """Resolve a ``--charset`` value; 'utf-8' selects incremental UTF-8."""
    try:
        return charset_for(name)
    except (LookupError, ValueError) as err:
        raise ValueError(f"Unsupported charset: {name}") from err
