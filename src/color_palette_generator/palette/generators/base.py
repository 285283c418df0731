"""
base.py.

Does: Define the color-generator capability: a color (and a disabled variant)
      for the Nth of T named entries, plus batch helpers mapping keys to colors.
Used by: SchemeColorGenerator, ColorGeneratorFromBasicPalette, chart callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Hashable
from typing import TypeVar

__all__ = ["ColorGenerator", "GenerateColorFunction"]

K = TypeVar("K", bound=Hashable)

# (name, index, total) -> color string
GenerateColorFunction = Callable[[str, int, int], str]


class ColorGenerator(ABC):
    """Color generator for chart series/categories."""

    @abstractmethod
    def generate_color(self, name: str, index: int, total: int) -> str:
        """
        Does: Pick a color for entry `index` (0-based) of `total` entries.
              `name` is the series/category label, for generators that care.
        Returns: HTML color string.
        """

    @abstractmethod
    def generate_disabled_color(self, name: str, index: int, total: int) -> str:
        """Same as generate_color, for a disabled entry."""

    def build_colors(self, keys: Iterable[K]) -> dict[K, str]:
        """Map every key to generate_color(str(key), position, len(keys))."""
        return self.build_colors_from_function(keys, self.generate_color)

    def build_disabled_colors(self, keys: Iterable[K]) -> dict[K, str]:
        """Map every key to generate_disabled_color(str(key), position, len(keys))."""
        return self.build_colors_from_function(keys, self.generate_disabled_color)

    @staticmethod
    def build_colors_from_function(
        keys: Iterable[K], generate_color_function: GenerateColorFunction
    ) -> dict[K, str]:
        """
        Does: Call `generate_color_function` once per key, by position.
              A repeated key keeps the color of its last position.
        Returns: dict[key, color string] in first-seen key order.
        """
        keys = list(keys)
        total = len(keys)
        colors: dict[K, str] = {}
        for index, key in enumerate(keys):
            colors[key] = generate_color_function(str(key), index, total)
        return colors
