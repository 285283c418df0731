"""
color.
=====

Does: Color value type and the validated basic palette built from it.
Exports: HTMLColor, ColorRangeError, parse_color, ColorPalette, InvalidPaletteError
"""

from .html_color import ColorRangeError, HTMLColor, parse_color
from .color_palette import ColorPalette, InvalidPaletteError

__all__ = [
    "HTMLColor",
    "ColorRangeError",
    "parse_color",
    "ColorPalette",
    "InvalidPaletteError",
]
