"""Color values and the named 16-color palettes.

The ANSI standard never fixed the RGB values of its 4-bit colors, so each
system picked its own. Two common tables are provided: the IBM Color Graphics
Adapter set used by MS-DOS ANSI art, and the xterm set.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, unique
from typing import Final, Self

CHANNEL_MAX: Final[int] = 255
BASE_COLORS: Final[int] = 8
PALETTE_SIZE: Final[int] = 16
CUBE_FIRST: Final[int] = 16
CUBE_LAST: Final[int] = 231
GRAY_FIRST: Final[int] = 232
GRAY_LAST: Final[int] = 255


def clamp(value: int, low: int = 0, high: int = CHANNEL_MAX) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True, slots=True)
class Color:
    """A resolved RGB color."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> Self:
        """Parse ``rgb`` or ``rrggbb`` with an optional leading ``#``."""
        digits = value.removeprefix("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            raise ValueError(f"Invalid hex color: {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @property
    def hex(self) -> str:
        """CSS hex notation, shortened to three digits when lossless."""
        channels = (self.r, self.g, self.b)
        if all(c % 0x11 == 0 for c in channels):
            return "#" + "".join(f"{c // 0x11:x}" for c in channels)
        return "#" + "".join(f"{c:02x}" for c in channels)

    def __str__(self) -> str:
        return self.hex


def _table(*values: str) -> tuple[Color, ...]:
    return tuple(Color.from_hex(v) for v in values)


# black, red, green, yellow, blue, magenta, cyan, white, then the bright set
CGA_COLORS: Final[tuple[Color, ...]] = _table(
    "000", "a00", "0a0", "a50", "00a", "a0a", "0aa", "aaa",
    "555", "f55", "5f5", "ff5", "55f", "f5f", "5ff", "fff",
)

XTERM_COLORS: Final[tuple[Color, ...]] = _table(
    "000", "800000", "008000", "808000", "000080", "800080", "008080", "c0c0c0",
    "808080", "f00", "0f0", "ff0", "00f", "f0f", "0ff", "fff",
)


@unique
class PaletteName(str, Enum):
    CGA16 = "cga"
    XTERM16 = "xterm"


PALETTE_TABLES: Final[dict[PaletteName, tuple[Color, ...]]] = {
    PaletteName.CGA16: CGA_COLORS,
    PaletteName.XTERM16: XTERM_COLORS,
}


def cube_rgb(index: int) -> Color:
    """Return the 6x6x6 color cube entry for xterm indices 16-231."""
    c = index - CUBE_FIRST
    steps = (c // 36, (c % 36) // 6, c % 6)
    return Color(*(0 if v == 0 else 55 + v * 40 for v in steps))


def gray_rgb(index: int) -> Color:
    """Return the grayscale ramp entry for xterm indices 232-255."""
    level = clamp(8 + (index - GRAY_FIRST) * 10)
    return Color(level, level, level)


def xterm_rgb(index: int) -> Color | None:
    """Return the RGB value of a non-system xterm color (16-255).

    Indices below 16 depend on the palette and return None, as do
    out-of-range values.
    """
    if CUBE_FIRST <= index <= CUBE_LAST:
        return cube_rgb(index)
    if GRAY_FIRST <= index <= GRAY_LAST:
        return gray_rgb(index)
    return None


def truecolor(params: Sequence[int], i: int) -> Color | None:
    """Build a color from ``params[i + 2:i + 5]`` of a ``38;2;r;g;b`` selector.

    Each channel is clamped to 0-255. Returns None when the list is too short.
    """
    if len(params) < i + 5:
        return None
    r, g, b = params[i + 2 : i + 5]
    return Color(clamp(r), clamp(g), clamp(b))


class Palette:
    """A read-only table of 16 colors, 8 base slots followed by 8 bright ones."""

    __slots__ = ("_name", "_colors")

    def __init__(self, name: PaletteName = PaletteName.CGA16) -> None:
        self._name = PaletteName(name)
        self._colors = PALETTE_TABLES[self._name]

    @property
    def name(self) -> PaletteName:
        return self._name

    @property
    def colors(self) -> tuple[Color, ...]:
        return self._colors

    @property
    def default_fg(self) -> Color:
        return self._colors[7]

    @property
    def default_bg(self) -> Color:
        return self._colors[0]

    @property
    def bright_white(self) -> Color:
        return self._colors[15]

    def basic(self, code: int, bright: bool = False) -> Color | None:
        """Return base slot *code* (0-7), or its bright variant."""
        if not 0 <= code < BASE_COLORS:
            return None
        return self._colors[code + BASE_COLORS if bright else code]

    def xterm(self, index: int) -> Color | None:
        """Resolve an 8-bit color index against this palette."""
        if 0 <= index < BASE_COLORS:
            return self.basic(index)
        if BASE_COLORS <= index < PALETTE_SIZE:
            return self.basic(index - BASE_COLORS, bright=True)
        return xterm_rgb(index)

    def bright_variant(self, color: Color) -> Color:
        """Swap a base slot color for its bright slot.

        Colors that are not one of the 8 base slots are returned unchanged.
        """
        try:
            slot = self._colors.index(color)
        except ValueError:
            return color
        if slot < BASE_COLORS:
            return self._colors[slot + BASE_COLORS]
        return color

    def __repr__(self) -> str:
        return f"Palette({self._name.name})"
