"""
html.py.

Does: Render a row of color swatches as an HTML snippet.
Used by: ColorPalette.as_html and the demo CLI (--html).
"""

from __future__ import annotations

from collections.abc import Iterable

from color_palette_generator.palette.color.html_color import HTMLColor

__all__ = ["palette_as_html"]

_SWATCH = (
    '<div style="display: inline-block ; background-color: {color} ; '
    'margin: {margin}px ; width: {width}px ; height: {height}px"></div>'
)


def palette_as_html(
    colors: Iterable[HTMLColor],
    color_width: int | None = None,
    color_height: int | None = None,
    color_margin: int = 5,
    inline_block: bool = False,
) -> str:
    """Does: One swatch <div> per color inside an outer <div>.

    Width and height default to each other, then to 20px.
    """
    if color_width is None:
        color_width = color_height
    if color_width is None:
        color_width = 20
    if color_height is None:
        color_height = color_width

    style_display = "display: inline-block ;" if inline_block else ""
    swatches = "".join(
        _SWATCH.format(color=c, margin=color_margin, width=color_width, height=color_height)
        for c in colors
    )
    return f'<div style="{style_display}">{swatches}</div>'
