"""
color_palette.py
================

Does: Hold a validated basic palette (non-empty, no duplicates, ordered) and
      expose palette expansion and formatting on top of it.
Used By: ColorGeneratorFromBasicPalette, the demo CLI.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from color_palette_generator.palette.color.html_color import HTMLColor
from color_palette_generator.palette.logic.expansion import generate_palette
from color_palette_generator.palette.render.html import palette_as_html

__all__ = ["ColorPalette", "InvalidPaletteError"]


class InvalidPaletteError(ValueError):
    """Raise when a basic palette is empty or repeats a color."""


class ColorPalette:
    """Ordered, duplicate-free basic colors to expand from."""

    def __init__(self, basic_colors: Sequence[HTMLColor]):
        colors = list(basic_colors)
        if not colors:
            raise InvalidPaletteError("Empty basic_colors")
        if len(set(colors)) < len(colors):
            raise InvalidPaletteError(
                f"Duplicated colors in basic_colors list: {[str(c) for c in colors]}"
            )
        self._basic_colors = colors

    @classmethod
    def from_value(cls, basic_colors: Any) -> ColorPalette:
        """
        Does: Build from another ColorPalette, a sequence of colors/strings, or
              a ';'/'|' delimited string. Tokens that are not colors are dropped
              before validation.
        Raises: InvalidPaletteError, ColorRangeError.
        """
        if isinstance(basic_colors, ColorPalette):
            return cls(basic_colors.basic_colors)
        return cls(HTMLColor.parse_list(basic_colors))

    @property
    def basic_colors(self) -> list[HTMLColor]:
        return list(self._basic_colors)

    def __len__(self) -> int:
        return len(self._basic_colors)

    def __iter__(self) -> Iterator[HTMLColor]:
        return iter(self._basic_colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorPalette):
            return NotImplemented
        return self._basic_colors == other._basic_colors

    __hash__ = None  # type: ignore[assignment]

    def generate_palette(self, size: int) -> list[HTMLColor]:
        """Expanded (or truncated) palette of `size` colors."""
        return generate_palette(self._basic_colors, size)

    def generate_html_palette(self, size: int) -> list[str]:
        """Same as generate_palette, as color strings."""
        return [str(c) for c in self.generate_palette(size)]

    def as_html(
        self,
        color_width: int | None = None,
        color_height: int | None = None,
        color_margin: int = 5,
        inline_block: bool = False,
    ) -> str:
        return palette_as_html(
            self._basic_colors,
            color_width=color_width,
            color_height=color_height,
            color_margin=color_margin,
            inline_block=inline_block,
        )

    def to_string(self, force_rgba: bool = False) -> str:
        return "[" + ", ".join(c.to_string(force_rgba) for c in self._basic_colors) + "]"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ColorPalette({self.to_string()})"
