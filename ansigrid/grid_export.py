"""JSON view of a decoded screen for programmatic consumers."""

from typing import Any

import orjson

from .attribute import Cell
from .palette import Color
from .screen import Screen


def _hex(color: Color | None) -> str | None:
    return None if color is None else color.hex


def _cell_to_dict(cell: Cell) -> dict[str, Any]:
    attr = cell.attribute
    return {
        "char": cell.char,
        "fg": _hex(attr.fg),
        "bg": _hex(attr.bg),
        "bold": attr.bold,
        "underline": attr.underline,
        "inverse": attr.inverse,
    }


def screen_to_dict(screen: Screen) -> dict[str, Any]:
    """Return the screen as ``{"width", "lines"}`` with one dict per cell."""
    return {
        "width": screen.width,
        "lines": [[_cell_to_dict(cell) for cell in line] for line in screen],
    }


def screen_to_json_bytes(screen: Screen, *, opts: int | None = None) -> bytes:
    """Serialize :func:`screen_to_dict` with *orjson*.

    ``OPT_APPEND_NEWLINE`` is enabled by default; pass *opts* to override.
    """
    if opts is None:
        opts = orjson.OPT_APPEND_NEWLINE
    return orjson.dumps(screen_to_dict(screen), option=opts)
