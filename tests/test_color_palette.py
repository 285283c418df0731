# tests/test_color_palette.py
"""
ColorPalette & palette expansion
================================

Does: Validate basic-palette construction (empty/duplicate rejection, flexible
      input), truncation for small sizes, block expansion with reference
      palettes, brightness ordering, stalls, and HTML swatches.
"""

from __future__ import annotations

import importlib

import pytest

from color_palette_generator.palette.color import (
    ColorPalette,
    HTMLColor,
    InvalidPaletteError,
)

expansion = importlib.import_module("color_palette_generator.palette.logic.expansion")

RGB = ["#ff0000", "#00ff00", "#0000ff"]


# ──────────────────────────────────────────────────────────────────────────────
# Construction
# ──────────────────────────────────────────────────────────────────────────────
def test_basic_palette_from_mixed_strings():
    palette = ColorPalette.from_value(["#ff0000", "#00ff00", "rgba(0,0,255,0.50)"])
    assert palette.basic_colors == [
        HTMLColor(255, 0, 0),
        HTMLColor(0, 255, 0),
        HTMLColor(0, 0, 255, 0.5),
    ]
    assert str(palette) == "[#ff0000, #00ff00, rgba(0, 0, 255, 0.5)]"
    assert palette.to_string(force_rgba=True).startswith("[rgba(255, 0, 0, 1), ")


def test_basic_palette_from_delimited_string_and_palette():
    palette = ColorPalette.from_value("#ff0000; #00ff00 | #0000ff")
    assert len(palette) == 3
    assert ColorPalette.from_value(palette) == palette


@pytest.mark.parametrize(
    "value",
    [[], "", None, ["#ff0000", "#00ff00", "#ff0000"], ["nope", "!!!"], ["#f00", "#ff0000"]],
)
def test_invalid_basic_palette(value):
    with pytest.raises(InvalidPaletteError):
        ColorPalette.from_value(value)


def test_invalid_palette_error_is_value_error():
    with pytest.raises(ValueError):
        ColorPalette([])


def test_basic_colors_is_a_copy():
    palette = ColorPalette.from_value(RGB)
    palette.basic_colors.append(HTMLColor(1, 1, 1))
    assert len(palette) == 3
    assert list(palette) == palette.basic_colors


# ──────────────────────────────────────────────────────────────────────────────
# Truncation
# ──────────────────────────────────────────────────────────────────────────────
def test_small_sizes_return_prefix_unchanged():
    palette = ColorPalette.from_value(["#ff0000", "#00ff00", "rgba(0,0,255, 0.5)"])
    assert palette.generate_palette(1) == [HTMLColor(255, 0, 0)]
    assert palette.generate_palette(2) == [HTMLColor(255, 0, 0), HTMLColor(0, 255, 0)]
    assert palette.generate_palette(3) == palette.basic_colors
    assert palette.generate_palette(0) == []
    assert palette.generate_palette(-2) == []


def test_truncation_keeps_order_even_if_not_sorted():
    palette = ColorPalette.from_value(["#000000", "#ffffff", "#808080"])
    assert palette.generate_html_palette(2) == ["#000000", "#ffffff"]


# ──────────────────────────────────────────────────────────────────────────────
# Expansion (reference palettes)
# ──────────────────────────────────────────────────────────────────────────────
def test_expand_rgb():
    palette = ColorPalette.from_value(RGB)
    assert palette.generate_html_palette(6) == [
        "#ff6161", "#ff0000", "#00ff00", "#0000ff", "#a80000", "#00a800",
    ]
    assert palette.generate_html_palette(9) == [
        "#ff6161", "#61ff61", "#6161ff",
        "#ff0000", "#00ff00", "#0000ff",
        "#a80000", "#00a800", "#0000a8",
    ]


def test_expand_with_alpha_color():
    palette = ColorPalette.from_value(["#ff0000", "rgba(0,255,0, 0.50)", "#0000ff"])
    assert palette.generate_html_palette(6) == [
        "#ff6161", "#ff0000", "rgba(0, 255, 0, 0.5)", "#0000ff", "#a80000", "rgba(0, 168, 0, 0.5)",
    ]


@pytest.mark.parametrize(
    "size, expected",
    [
        (3, ["#ff0000", "#00ff00", "#a80000"]),
        (4, ["#ff6161", "#ff0000", "#00ff00", "#a80000"]),
        (5, ["#ff6161", "#ff0000", "#00ff00", "#a80000", "#00a800"]),
        (6, ["#ff6161", "#61ff61", "#ff0000", "#00ff00", "#a80000", "#00a800"]),
        (7, ["#ff6161", "#61ff61", "#ff0000", "#00ff00", "#a80000", "#00a800", "#510000"]),
        (8, ["#ffc2c2", "#ff6161", "#61ff61", "#ff0000", "#00ff00", "#a80000", "#00a800", "#510000"]),
    ],
)
def test_expand_two_colors(size, expected):
    assert ColorPalette.from_value(["#ff0000", "#00ff00"]).generate_html_palette(size) == expected


def test_module_function_matches_method():
    basics = HTMLColor.parse_list(RGB)
    assert expansion.generate_palette(basics, 7) == ColorPalette(basics).generate_palette(7)


# ──────────────────────────────────────────────────────────────────────────────
# Properties
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("size", range(4, 16))
def test_expansion_reaches_size_and_is_sorted(size):
    out = ColorPalette.from_value(RGB).generate_palette(size)
    assert len(out) == size
    brightness = [c.brightness for c in out]
    assert brightness == sorted(brightness, reverse=True)
    for basic in HTMLColor.parse_list(RGB):
        assert basic in out


def test_expansion_is_deterministic():
    palette = ColorPalette.from_value(["#336699", "#cc9933", "#999999"])
    assert palette.generate_palette(11) == palette.generate_palette(11)


def test_expansion_stalls_when_blocks_run_out_of_headroom():
    # each primary block holds at most 4 generated colors
    assert len(ColorPalette.from_value(RGB).generate_palette(20)) == 15


def test_expansion_stall_single_grey():
    out = ColorPalette.from_value(["#505050"]).generate_html_palette(10)
    assert out == ["#c2c2c2", "#898989", "#505050"]


# ──────────────────────────────────────────────────────────────────────────────
# HTML swatches
# ──────────────────────────────────────────────────────────────────────────────
def test_as_html_defaults():
    html = ColorPalette.from_value(["#ff0000"]).as_html()
    assert html == (
        '<div style=""><div style="display: inline-block ; background-color: #ff0000 ; '
        'margin: 5px ; width: 20px ; height: 20px"></div></div>'
    )


def test_as_html_sizes_follow_each_other():
    html = ColorPalette.from_value(RGB).as_html(color_height=10, inline_block=True)
    assert html.startswith('<div style="display: inline-block ;">')
    assert html.count("width: 10px ; height: 10px") == 3
    assert "background-color: #0000ff" in html
