from dataclasses import dataclass, replace
from typing import Final, Self

from .palette import Color


@dataclass(frozen=True, slots=True)
class Attribute:
    """Styling for a single character cell.

    Attributes:
        fg: Foreground color, None for the terminal default
        bg: Background color, None for the terminal default
        bold: Rendered as the bright variant of the foreground color
        underline: Underline text decoration
        inverse: Swap foreground and background when rendering
    """

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    underline: bool = False
    inverse: bool = False

    def evolve(self, **changes) -> Self:
        return replace(self, **changes)


DEFAULT_ATTRIBUTE: Final[Attribute] = Attribute()


@dataclass(frozen=True, slots=True)
class Cell:
    """A display character and the attribute it was written with."""

    char: str
    attribute: Attribute = DEFAULT_ATTRIBUTE


BLANK_CELL: Final[Cell] = Cell(" ")
