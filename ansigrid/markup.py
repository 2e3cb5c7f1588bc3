"""Output formats for rendered style runs."""

import html
from enum import Enum, unique
from typing import Protocol

from .attribute import Attribute
from .palette import Color, Palette, PaletteName


@unique
class OutputFormat(str, Enum):
    HTML = "html"
    TEXT = "text"


class Markup(Protocol):
    def escape(self, text: str) -> str: ...

    def style(self, attribute: Attribute) -> str: ...

    def run(self, attribute: Attribute, text: str) -> str: ...

    def document(self, body: str) -> str: ...


def _fg(color: Color) -> str:
    return f"color:{color.hex};"


def _bg(color: Color) -> str:
    return f"background-color:{color.hex};"


class HtmlMarkup:
    """Inline-styled ``<span>`` elements inside a ``<div>``.

    Inverse video swaps the effective colors here rather than when the
    attribute is set, and bold is shown as the bright palette variant of the
    foreground color, the way DOS-era terminals displayed it.
    """

    def __init__(self, palette: Palette | None = None) -> None:
        self.palette = palette or Palette(PaletteName.CGA16)

    def escape(self, text: str) -> str:
        return html.escape(text)

    def style(self, attribute: Attribute) -> str:
        fg, bg = attribute.fg, attribute.bg
        if attribute.inverse:
            # defaults are resolved first so reversed default text stays visible
            fg, bg = (
                bg if bg is not None else self.palette.default_bg,
                fg if fg is not None else self.palette.default_fg,
            )

        parts: list[str] = []
        if attribute.bold:
            parts.append(
                _fg(
                    self.palette.bright_variant(fg)
                    if fg is not None
                    else self.palette.bright_white
                )
            )
        else:
            parts.append(_fg(fg if fg is not None else self.palette.default_fg))
        if bg is not None:
            parts.append(_bg(bg))
        if attribute.underline:
            parts.append("text-decoration:underline;")
        return "".join(parts)

    def run(self, attribute: Attribute, text: str) -> str:
        style = html.escape(self.style(attribute))
        return f'<span style="{style}">{self.escape(text)}</span>'

    def document(self, body: str) -> str:
        style = _fg(self.palette.default_fg) + _bg(self.palette.default_bg)
        return f'<div style="{style}">{body}</div>'


class TextMarkup:
    """Plain characters without styling."""

    def escape(self, text: str) -> str:
        return text

    def style(self, attribute: Attribute) -> str:
        return ""

    def run(self, attribute: Attribute, text: str) -> str:
        return text

    def document(self, body: str) -> str:
        return body


def markup_for(output_format: OutputFormat | str, palette: Palette | None = None) -> Markup:
    match OutputFormat(output_format):
        case OutputFormat.HTML:
            return HtmlMarkup(palette)
        case OutputFormat.TEXT:
            return TextMarkup()
