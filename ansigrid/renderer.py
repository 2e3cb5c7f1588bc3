from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .attribute import Attribute, Cell
from .markup import Markup
from .screen import Screen


@dataclass(frozen=True, slots=True)
class Run:
    """Consecutive cells sharing one attribute."""

    attribute: Attribute
    text: str


def iter_runs(line: Iterable[Cell]) -> Iterator[Run]:
    """Group *line* into maximal runs of equal attributes.

    Each cell is compared to the previous one only.
    """
    current: Attribute | None = None
    chars: list[str] = []
    for cell in line:
        if chars and cell.attribute != current:
            yield Run(current, "".join(chars))
            chars = []
        current = cell.attribute
        chars.append(cell.char)
    if chars:
        yield Run(current, "".join(chars))


def render_line(line: Iterable[Cell], markup: Markup) -> str:
    """Render one line; an empty line renders as an empty string."""
    return "".join(markup.run(run.attribute, run.text) for run in iter_runs(line))


def render_lines(screen: Screen, markup: Markup) -> list[str]:
    return [render_line(line, markup) for line in screen]


def render(screen: Screen, markup: Markup) -> str:
    """Render the whole screen wrapped in the markup's document element."""
    return markup.document("\n".join(render_lines(screen, markup)))
