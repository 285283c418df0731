"""
palette.
=======

Does: Aggregate the color value type, basic palettes, palette expansion,
      scheme tables and color generators.
Used By: Chart/legend code assigning a distinct color per series or category.
"""

# color first: color_palette pulls in logic.expansion, which needs html_color
from .color import (
    ColorPalette,
    ColorRangeError,
    HTMLColor,
    InvalidPaletteError,
    parse_color,
)
from .logic import generate_palette
from .schemes import (
    InvalidSchemeTableError,
    get_standard_schemes,
    load_scheme_table,
)
from .generators import (
    ColorGenerator,
    ColorGeneratorFromBasicPalette,
    SchemeColorGenerator,
    StandardColorGenerator,
)

__all__ = [
    # color
    "HTMLColor",
    "ColorRangeError",
    "parse_color",
    "ColorPalette",
    "InvalidPaletteError",
    # logic
    "generate_palette",
    # schemes
    "InvalidSchemeTableError",
    "get_standard_schemes",
    "load_scheme_table",
    # generators
    "ColorGenerator",
    "ColorGeneratorFromBasicPalette",
    "SchemeColorGenerator",
    "StandardColorGenerator",
]
