"""Cursor and growable screen buffer."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final, TypeAlias

from .attribute import BLANK_CELL, Attribute, Cell
from .errors import LineLimitError

Line: TypeAlias = list[Cell]

DEFAULT_WIDTH: Final[int] = 80


@dataclass(slots=True)
class Cursor:
    """Cursor position and the saved-cursor slot, all zero based."""

    x: int = 0
    y: int = 0
    saved_x: int = 0
    saved_y: int = 0

    def save(self) -> None:
        self.saved_x, self.saved_y = self.x, self.y


class Screen:
    """Lines of cells written by the decoder.

    The screen starts with a single empty line and only grows at the tail.
    Cells beyond the end of a line are implicitly blank. With *max_columns*
    set, cursor movement stops at the last allowed column.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        max_lines: int | None = None,
        max_columns: int | None = None,
    ) -> None:
        self.width = width if width > 0 else DEFAULT_WIDTH
        self.max_lines = max_lines
        self.max_columns = max_columns
        self.lines: list[Line] = [[]]
        self.cursor = Cursor()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __getitem__(self, y: int) -> Line:
        return self.lines[y]

    @property
    def current_line(self) -> Line:
        return self.lines[self.cursor.y]

    def ensure_line(self, y: int) -> Line:
        """Extend the screen so that line *y* exists and return it.

        Raises:
            LineLimitError: The screen would exceed ``max_lines``
        """
        if self.max_lines is not None and y >= self.max_lines:
            raise LineLimitError(self.max_lines)
        while y >= len(self.lines):
            self.lines.append([])
        return self.lines[y]

    def move_to(self, x: int | None = None, y: int | None = None) -> None:
        """Set x and/or y, clamping to the screen; None leaves a coordinate unchanged."""
        if x is not None:
            if self.max_columns is not None:
                x = min(x, self.max_columns - 1)
            self.cursor.x = max(0, x)
        if y is not None:
            self.cursor.y = max(0, y)
        self.ensure_line(self.cursor.y)

    def move_by(self, dx: int = 0, dy: int = 0) -> None:
        self.move_to(self.cursor.x + dx, self.cursor.y + dy)

    def newline(self) -> None:
        self.move_to(0, self.cursor.y + 1)

    def save_cursor(self) -> None:
        self.cursor.save()

    def restore_cursor(self) -> None:
        self.move_to(self.cursor.saved_x, self.cursor.saved_y)

    def write(self, char: str, attribute: Attribute) -> None:
        """Overwrite the cell under the cursor and advance, wrapping at the width."""
        x = self.cursor.x
        line = self.ensure_line(self.cursor.y)
        if len(line) < x:
            line.extend([BLANK_CELL] * (x - len(line)))
        cell = Cell(char, attribute)
        if x < len(line):
            line[x] = cell
        else:
            line.append(cell)
        self.cursor.x = x + 1
        if self.cursor.x >= self.width:
            self.newline()

    # ------------------------------------------------------------------ #
    # Erase primitives                                                   #
    # ------------------------------------------------------------------ #
    def truncate_line(self) -> None:
        """Drop the cells of the current line from the cursor onward."""
        del self.current_line[self.cursor.x :]

    def truncate_below(self) -> None:
        """Drop every line after the current one."""
        del self.lines[self.cursor.y + 1 :]

    def blank_line_through_cursor(self) -> None:
        """Blank the current line from column 0 through the cursor inclusive."""
        line = self.current_line
        if self.cursor.x >= len(line):
            line.clear()
            return
        line[: self.cursor.x + 1] = [BLANK_CELL] * (self.cursor.x + 1)

    def clear_line(self) -> None:
        self.current_line.clear()

    def clear_above(self) -> None:
        for line in self.lines[: self.cursor.y]:
            line.clear()

    def clear_all(self) -> None:
        for line in self.lines:
            line.clear()

    def text(self) -> str:
        """Return the characters of every line joined with newlines."""
        return "\n".join("".join(cell.char for cell in line) for line in self.lines)
