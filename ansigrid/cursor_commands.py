"""Cursor movement and erase commands.

Each handler is a transition over the screen for one CSI final byte. Handlers
raise :class:`ParameterCountError` or :class:`UnsupportedParameterError` and
leave the screen untouched when the parameters are not acceptable; whether
that aborts the decode is decided by the caller's policy.
"""

from collections.abc import Callable, Sequence
from typing import Final, TypeAlias

from .control_codes import CsiCommand
from .errors import ParameterCountError, UnsupportedParameterError
from .screen import Screen

Params: TypeAlias = Sequence[int | None]
CommandHandler: TypeAlias = Callable[[Screen, Params], None]


def _arg(value: int | None, default: int) -> int:
    return default if value is None else value


def _count(params: Params, default: int, command: str) -> int:
    """Return the single optional count parameter of a movement command."""
    match len(params):
        case 0:
            return default
        case 1:
            return _arg(params[0], default)
        case _:
            raise ParameterCountError(command, "0 or 1", params)


def _erase_mode(params: Params, command: str) -> int:
    match len(params):
        case 0:
            return 0
        case 1:
            return _arg(params[0], 0)
        case _:
            raise ParameterCountError(command, "0 or 1", params)


def cursor_up(screen: Screen, params: Params) -> None:
    """CUU: move the cursor up."""
    screen.move_by(dy=-_count(params, 1, "CUU A"))


def cursor_down(screen: Screen, params: Params) -> None:
    """CUD: move the cursor down, extending the screen."""
    screen.move_by(dy=_count(params, 1, "CUD B"))


def cursor_forward(screen: Screen, params: Params) -> None:
    """CUF: move the cursor right."""
    screen.move_by(dx=_count(params, 1, "CUF C"))


def cursor_back(screen: Screen, params: Params) -> None:
    """CUB: move the cursor left."""
    screen.move_by(dx=-_count(params, 1, "CUB D"))


def cursor_next_line(screen: Screen, params: Params) -> None:
    """CNL: move down and to the first column."""
    n = _count(params, 1, "CNL E")
    screen.move_to(0, screen.cursor.y + n)


def cursor_previous_line(screen: Screen, params: Params) -> None:
    """CPL: move up and to the first column."""
    n = _count(params, 1, "CPL F")
    screen.move_to(0, screen.cursor.y - n)


def cursor_horizontal_absolute(screen: Screen, params: Params) -> None:
    """CHA: move to a 1-based column on the current line."""
    if len(params) != 1:
        raise ParameterCountError("CHA G", "1", params)
    screen.move_to(x=_arg(params[0], 1) - 1)


def cursor_position(screen: Screen, params: Params) -> None:
    """CUP/HVP: move to a 1-based row and column."""
    match len(params):
        case 0:
            screen.move_to(0, 0)
        case 2:
            row, col = params
            screen.move_to(_arg(col, 1) - 1, _arg(row, 1) - 1)
        case _:
            raise ParameterCountError("CUP H/f", "0 or 2", params)


def cursor_position_row_only(screen: Screen, params: Params) -> None:
    """Permissive reading of a single-parameter CUP as a row, column 0."""
    if len(params) == 1:
        screen.move_to(0, _arg(params[0], 1) - 1)


def erase_in_display(screen: Screen, params: Params) -> None:
    """ED: erase part or all of the screen.

    0 erases from the cursor to the end of the screen, 1 from the top of the
    screen through the cursor, 2 the entire screen and homes the cursor like
    MS-DOS ANSI.SYS.
    """
    match _erase_mode(params, "ED J"):
        case 0:
            screen.truncate_line()
            screen.truncate_below()
        case 1:
            screen.clear_above()
            screen.blank_line_through_cursor()
        case 2:
            screen.clear_all()
            screen.move_to(0, 0)
        case _:
            raise UnsupportedParameterError("ED J", params)


def erase_in_line(screen: Screen, params: Params) -> None:
    """EL: erase part or all of the current line."""
    match _erase_mode(params, "EL K"):
        case 0:
            screen.truncate_line()
        case 1:
            screen.blank_line_through_cursor()
        case 2:
            screen.clear_line()
        case _:
            raise UnsupportedParameterError("EL K", params)


def save_cursor_position(screen: Screen, params: Params) -> None:
    """SCP (SCOSC): save the cursor position."""
    if params:
        raise ParameterCountError("SCP s", "0", params)
    screen.save_cursor()


def restore_cursor_position(screen: Screen, params: Params) -> None:
    """RCP (SCORC): restore the saved cursor position."""
    if params:
        raise ParameterCountError("RCP u", "0", params)
    screen.restore_cursor()


CURSOR_COMMANDS: Final[dict[CsiCommand, CommandHandler]] = {
    CsiCommand.CUU: cursor_up,
    CsiCommand.CUD: cursor_down,
    CsiCommand.CUF: cursor_forward,
    CsiCommand.CUB: cursor_back,
    CsiCommand.CNL: cursor_next_line,
    CsiCommand.CPL: cursor_previous_line,
    CsiCommand.CHA: cursor_horizontal_absolute,
    CsiCommand.CUP: cursor_position,
    CsiCommand.HVP: cursor_position,
    CsiCommand.ED: erase_in_display,
    CsiCommand.EL: erase_in_line,
    CsiCommand.SCP: save_cursor_position,
    CsiCommand.RCP: restore_cursor_position,
}

# Best-effort readings applied in permissive mode after a handler rejected
# its parameters.
PERMISSIVE_FALLBACKS: Final[dict[CsiCommand, CommandHandler]] = {
    CsiCommand.CUP: cursor_position_row_only,
    CsiCommand.HVP: cursor_position_row_only,
}
