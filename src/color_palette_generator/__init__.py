"""
color_palette_generator
=======================

Does: Root package. Expands a few basic colors into an ordered palette of N
      distinct colors, and resolves named color schemes to a requested size.
Returns: Re-exports the public palette API.
Used by: `from color_palette_generator import ColorPalette, StandardColorGenerator`.
"""

from .palette import (
    ColorGenerator,
    ColorGeneratorFromBasicPalette,
    ColorPalette,
    ColorRangeError,
    HTMLColor,
    InvalidPaletteError,
    InvalidSchemeTableError,
    SchemeColorGenerator,
    StandardColorGenerator,
    generate_palette,
    get_standard_schemes,
    load_scheme_table,
    parse_color,
)

__all__: list[str] = [
    "ColorGenerator",
    "ColorGeneratorFromBasicPalette",
    "ColorPalette",
    "ColorRangeError",
    "HTMLColor",
    "InvalidPaletteError",
    "InvalidSchemeTableError",
    "SchemeColorGenerator",
    "StandardColorGenerator",
    "generate_palette",
    "get_standard_schemes",
    "load_scheme_table",
    "parse_color",
]
__docformat__ = "google"
