"""Tests for ansigrid.sgr.apply_sgr."""

from ansigrid.attribute import DEFAULT_ATTRIBUTE, Attribute
from ansigrid.palette import Color, Palette
from ansigrid.sgr import apply_sgr

RED = Color.from_hex("a00")


def test_empty_parameters_reset(cga: Palette) -> None:
    current = Attribute(fg=RED, bold=True)
    assert apply_sgr([], current, cga) == DEFAULT_ATTRIBUTE


def test_omitted_parameter_means_reset(cga: Palette) -> None:
    assert apply_sgr([None], Attribute(bold=True), cga) == DEFAULT_ATTRIBUTE


def test_flags_and_colors(cga: Palette) -> None:
    attr = apply_sgr([1, 4, 7, 31, 42], DEFAULT_ATTRIBUTE, cga)
    assert attr == Attribute(
        fg=RED, bg=Color.from_hex("0a0"), bold=True, underline=True, inverse=True
    )


def test_flags_off(cga: Palette) -> None:
    current = Attribute(bold=True, underline=True, inverse=True)
    assert apply_sgr([22, 24, 27], current, cga) == DEFAULT_ATTRIBUTE
    assert apply_sgr([21], Attribute(bold=True), cga) == DEFAULT_ATTRIBUTE


def test_default_colors(cga: Palette) -> None:
    current = Attribute(fg=RED, bg=RED, bold=True)
    assert apply_sgr([39, 49], current, cga) == Attribute(bold=True)


def test_bright_colors(cga: Palette) -> None:
    attr = apply_sgr([90, 107], DEFAULT_ATTRIBUTE, cga)
    assert attr.fg.hex == "#555"
    assert attr.bg.hex == "#fff"


def test_indexed_color(cga: Palette) -> None:
    assert apply_sgr([38, 5, 93], DEFAULT_ATTRIBUTE, cga).fg.hex == "#8700ff"
    assert apply_sgr([48, 5, 1], DEFAULT_ATTRIBUTE, cga).bg == RED


def test_truecolor(cga: Palette) -> None:
    assert apply_sgr([48, 2, 10, 20, 30], DEFAULT_ATTRIBUTE, cga).bg == Color(10, 20, 30)


def test_codes_after_extended_color_still_apply(cga: Palette) -> None:
    attr = apply_sgr([38, 2, 1, 2, 3, 4], DEFAULT_ATTRIBUTE, cga)
    assert attr.fg == Color(1, 2, 3)
    assert attr.underline


def test_malformed_extended_color_is_skipped(cga: Palette) -> None:
    current = Attribute(fg=RED)
    assert apply_sgr([38, 5], current, cga) == current
    assert apply_sgr([38, 2, 1, 2], current, cga) == current
    assert apply_sgr([38], current, cga) == current


def test_unknown_mode_skips_selector_and_mode(cga: Palette) -> None:
    attr = apply_sgr([38, 7, 32], DEFAULT_ATTRIBUTE, cga)
    assert not attr.inverse
    assert attr.fg.hex == "#0a0"
    assert apply_sgr([48, 4, 32], DEFAULT_ATTRIBUTE, cga) == Attribute(fg=cga.basic(2))


def test_unknown_codes_are_ignored(cga: Palette) -> None:
    assert apply_sgr([5, 1], DEFAULT_ATTRIBUTE, cga) == Attribute(bold=True)
