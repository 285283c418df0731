"""
generators.
==========

Does: ColorGenerator capability and its two variants (scheme table and
      basic palette).
"""

from .base import ColorGenerator, GenerateColorFunction
from .basic_palette import DISABLED_BRIGHTEN_AMOUNT, ColorGeneratorFromBasicPalette
from .scheme import SchemeColorGenerator, StandardColorGenerator

__all__ = [
    "ColorGenerator",
    "GenerateColorFunction",
    "ColorGeneratorFromBasicPalette",
    "DISABLED_BRIGHTEN_AMOUNT",
    "SchemeColorGenerator",
    "StandardColorGenerator",
]
