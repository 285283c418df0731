"""
basic_palette.py.

Does: ColorGenerator backed by one basic palette, expanding it per requested
      size (memoized) and deriving disabled colors from a lightened grey scale.
Used by: Chart callers that bring their own seed colors; the demo CLI.
"""

from __future__ import annotations

import logging
from typing import Any

from color_palette_generator.palette.color.color_palette import ColorPalette
from color_palette_generator.palette.color.html_color import HTMLColor
from color_palette_generator.palette.generators.base import ColorGenerator

__all__ = ["ColorGeneratorFromBasicPalette", "DISABLED_BRIGHTEN_AMOUNT"]

log = logging.getLogger(__name__)

DISABLED_BRIGHTEN_AMOUNT = 32


class ColorGeneratorFromBasicPalette(ColorGenerator):
    """Generates palettes of any size from a basic ColorPalette."""

    def __init__(self, basic_palette: ColorPalette):
        self._basic_palette = basic_palette
        self._cached_palettes: dict[int, list[HTMLColor]] = {}

    @classmethod
    def from_value(cls, basic_colors: Any) -> ColorGeneratorFromBasicPalette:
        """Accept a ColorPalette or anything ColorPalette.from_value accepts."""
        if isinstance(basic_colors, ColorPalette):
            return cls(basic_colors)
        return cls(ColorPalette.from_value(basic_colors))

    @property
    def basic_palette(self) -> ColorPalette:
        return self._basic_palette

    def clear_cache(self) -> None:
        self._cached_palettes.clear()

    def get_cached_palette(self, size: int) -> list[HTMLColor]:
        """generate_palette(size), computed once per size until clear_cache()."""
        palette = self._cached_palettes.get(size)
        if palette is None:
            log.debug("Palette cache MISS: size=%d", size)
            palette = self._cached_palettes[size] = self.generate_palette(size)
        return palette

    def generate_palette(self, size: int) -> list[HTMLColor]:
        """Uncached expansion; see get_cached_palette."""
        return self._basic_palette.generate_palette(size)

    def generate_palette_as_strings(self, size: int) -> list[str]:
        return [str(c) for c in self.generate_palette(size)]

    def generate_palette_as_color_palette(self, size: int) -> ColorPalette:
        return ColorPalette(self.generate_palette(size))

    def _color_at(self, index: int, total: int) -> HTMLColor:
        if total < 1:
            raise ValueError(f"total must be >= 1 to pick a palette color, got {total}")
        palette = self.get_cached_palette(total)
        return palette[index % len(palette)]

    def generate_color(self, name: str, index: int, total: int) -> str:
        return str(self._color_at(index, total))

    def generate_disabled_color(self, name: str, index: int, total: int) -> str:
        """Grey scale of the regular color, lightened when headroom allows."""
        grey = self._color_at(index, total).grey_scale()
        return str(grey.brighter(DISABLED_BRIGHTEN_AMOUNT) or grey)
