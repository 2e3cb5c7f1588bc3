"""Select Graphic Rendition (``ESC [ ... m``) resolution.

SGR is deliberately forgiving: unknown codes and malformed extended color
selectors are skipped in both permissive and strict mode, so that newer
terminal features degrade to plain text instead of aborting a decode.
"""

from collections.abc import Sequence
from logging import getLogger

from .attribute import DEFAULT_ATTRIBUTE, Attribute
from .control_codes import ExtendedColorMode, SgrCode
from .palette import Color, Palette, truecolor

_logger = getLogger(__name__)


def _normalize(params: Sequence[int | None]) -> list[int]:
    # an omitted SGR parameter defaults to 0
    return [0 if p is None else p for p in params]


def _extended_color(params: list[int], i: int, palette: Palette) -> tuple[Color | None, int]:
    """Resolve a ``38``/``48`` selector starting at ``params[i]``.

    Returns the color (None when the selector is malformed) and the index of
    the last parameter the selector consumed.
    """
    if i + 1 >= len(params):
        return None, i
    mode = params[i + 1]
    if mode == ExtendedColorMode.INDEXED:
        if i + 2 >= len(params):
            return None, len(params) - 1
        return palette.xterm(params[i + 2]), i + 2
    if mode == ExtendedColorMode.TRUECOLOR:
        color = truecolor(params, i)
        if color is None:
            return None, len(params) - 1
        return color, i + 4
    # unknown mode, the introducer and the mode are consumed
    return None, i + 1


def apply_sgr(
    params: Sequence[int | None], current: Attribute, palette: Palette
) -> Attribute:
    """Apply SGR parameters to *current* and return the resulting attribute."""
    if not params:
        return DEFAULT_ATTRIBUTE

    values = _normalize(params)
    attr = current
    i = 0
    while i < len(values):
        p = values[i]
        match p:
            case SgrCode.RESET:
                attr = DEFAULT_ATTRIBUTE
            case SgrCode.BOLD:
                attr = attr.evolve(bold=True)
            case SgrCode.NOT_BOLD | SgrCode.NOT_BOLD_FAINT:
                attr = attr.evolve(bold=False)
            case SgrCode.UNDERLINE:
                attr = attr.evolve(underline=True)
            case SgrCode.NOT_UNDERLINE:
                attr = attr.evolve(underline=False)
            case SgrCode.INVERSE:
                attr = attr.evolve(inverse=True)
            case SgrCode.NOT_INVERSE:
                attr = attr.evolve(inverse=False)
            case SgrCode.DEFAULT_FG:
                attr = attr.evolve(fg=None)
            case SgrCode.DEFAULT_BG:
                attr = attr.evolve(bg=None)
            case _ if SgrCode.FG_FIRST <= p <= SgrCode.FG_LAST:
                attr = attr.evolve(fg=palette.basic(p - SgrCode.FG_FIRST))
            case _ if SgrCode.BG_FIRST <= p <= SgrCode.BG_LAST:
                attr = attr.evolve(bg=palette.basic(p - SgrCode.BG_FIRST))
            case _ if SgrCode.BRIGHT_FG_FIRST <= p <= SgrCode.BRIGHT_FG_LAST:
                attr = attr.evolve(
                    fg=palette.basic(p - SgrCode.BRIGHT_FG_FIRST, bright=True)
                )
            case _ if SgrCode.BRIGHT_BG_FIRST <= p <= SgrCode.BRIGHT_BG_LAST:
                attr = attr.evolve(
                    bg=palette.basic(p - SgrCode.BRIGHT_BG_FIRST, bright=True)
                )
            case SgrCode.SET_FG | SgrCode.SET_BG:
                color, i = _extended_color(values, i, palette)
                if color is None:
                    _logger.debug("Skipped malformed extended color: %s", values)
                elif p == SgrCode.SET_FG:
                    attr = attr.evolve(fg=color)
                else:
                    attr = attr.evolve(bg=color)
            case _:
                pass
        i += 1
    return attr
