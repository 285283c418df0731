"""
html_color.py
=============

Does: Immutable RGB(+alpha) color value: parse HTML/CSS color text, format it
      back, and derive brighter/darker/grey-scale variants with simple linear
      channel arithmetic.
Used By: ColorPalette, palette expansion, the basic-palette generator and the
         scheme generator's callers.
Returns: HTMLColor instances, or None when text is not a color.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from typing import Any

import webcolors

from color_palette_generator.general.token import to_flat_list_of_strings

__all__ = [
    "HTMLColor",
    "ColorRangeError",
    "parse_color",
    "BRIGHTER_CEILING",
    "DARKER_FLOOR",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Calibration ──────────────────────────────────────────────────────────────
# Headroom is measured against these fixed levels, not against 0/255.
BRIGHTER_CEILING = 195
DARKER_FLOOR = 80
MIN_AMOUNT_CAP = 10

# ── Grammars (tried in this order, first match wins; ASCII digits only) ──────
COLOR_PATTERN_RGBA = re.compile(
    r"^(?:rgba?)?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,?\s*(\d+(?:\.\d+)?)?\s*\)",
    re.ASCII,
)
COLOR_PATTERN_HEX3 = re.compile(r"^#?([0-9a-f]{3})$")
COLOR_PATTERN_HEX6 = re.compile(r"^#?([0-9a-f]{6})$")
COLOR_PATTERN_ARGS = re.compile(
    r"^\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,?\s*(\d+(?:\.\d+)?)?\s*",
    re.ASCII,
)


class ColorRangeError(ValueError):
    """Raise when a channel or alpha value is outside its legal range."""


def _check_in_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ColorRangeError(f"'{name}' not in range {low} .. {high}: {value}")


def _check_channel(name: str, value: Any) -> int:
    """Channels are whole numbers in 0..255; bools and fractions are rejected."""
    if (
        isinstance(value, bool)
        or not isinstance(value, numbers.Real)
        or not math.isfinite(value)
        or value != int(value)
    ):
        raise ColorRangeError(f"'{name}' is not an integer channel value: {value!r}")
    _check_in_range(name, value, 0, 255)
    return int(value)


def _check_alpha(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise ColorRangeError(f"'alpha' is not a finite number: {value!r}")
    _check_in_range("alpha", value, 0, 1)
    return value


def _clip(n: int) -> int:
    return 0 if n < 0 else 255 if n > 255 else n


def _change_amount(space: int) -> int:
    """Tiered default step for a given headroom."""
    if space > 16:
        return 8 + (space - 8) // 4
    if space > 8:
        return 4 + (space - 4) // 2
    if space > 4:
        return space // 2
    return space


class HTMLColor:
    """Color in `red`, `green`, `blue` (0..255) and optional `alpha` (0..1).

    Instances never change; every transform returns a new color. Equality is
    structural over all four fields, so an absent alpha and an alpha of 1.0
    are different colors. Ordering (`<`, `compare_to`) is by brightness,
    brighter first.
    """

    __slots__ = ("_red", "_green", "_blue", "_alpha")

    def __init__(self, red: int, green: int, blue: int, alpha: float | None = None):
        object.__setattr__(self, "_red", _check_channel("red", red))
        object.__setattr__(self, "_green", _check_channel("green", green))
        object.__setattr__(self, "_blue", _check_channel("blue", blue))
        object.__setattr__(self, "_alpha", None if alpha is None else _check_alpha(alpha))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ── Channels ─────────────────────────────────────────────────────────────
    @property
    def red(self) -> int:
        return self._red

    @property
    def green(self) -> int:
        return self._green

    @property
    def blue(self) -> int:
        return self._blue

    @property
    def alpha(self) -> float | None:
        return self._alpha

    @property
    def has_alpha(self) -> bool:
        """True when alpha is present and not 1."""
        return self._alpha is not None and self._alpha != 1

    @property
    def brightness(self) -> int:
        return (self._red + self._green + self._blue) // 3

    # ── Parsing ──────────────────────────────────────────────────────────────
    @classmethod
    def from_string(cls, color: str | None) -> HTMLColor | None:
        """
        Does: Parse `#rgb`, `#rrggbb` (with or without '#'), `rgb(r,g,b)`,
              `rgba(r,g,b,a)`, `(r,g,b[,a])` or bare `r,g,b[,a]`.
        Returns: HTMLColor, or None when no grammar matches.
        Raises: ColorRangeError when a grammar matches but a value is out of range.
        """
        if color is None:
            return None
        text = str(color).strip().lower()
        if not text:
            return None

        m = COLOR_PATTERN_RGBA.match(text)
        if m:
            return cls._from_groups(m)

        m = COLOR_PATTERN_HEX3.match(text) or COLOR_PATTERN_HEX6.match(text)
        if m:
            rgb = webcolors.hex_to_rgb("#" + m.group(1))
            return cls(rgb.red, rgb.green, rgb.blue)

        m = COLOR_PATTERN_ARGS.match(text)
        if m:
            return cls._from_groups(m)

        log.debug("Not a color: %r", color)
        return None

    @classmethod
    def _from_groups(cls, m: re.Match[str]) -> HTMLColor:
        r, g, b, a = m.groups()
        return cls(int(r), int(g), int(b), float(a) if a is not None else None)

    @classmethod
    def parse_list(cls, value: Any) -> list[HTMLColor]:
        """
        Does: Flatten `value` (list, ';'/'|' delimited string, ...) and parse
              each token, dropping tokens that are not colors.
        Returns: list[HTMLColor] in input order.
        """
        colors: list[HTMLColor] = []
        for token in to_flat_list_of_strings(value):
            color = cls.from_string(token)
            if color is not None:
                colors.append(color)
        return colors

    def copy_with(
        self,
        red: int | None = None,
        green: int | None = None,
        blue: int | None = None,
        alpha: float | None = None,
    ) -> HTMLColor:
        """Copy of this color with the given fields replaced."""
        return HTMLColor(
            self._red if red is None else red,
            self._green if green is None else green,
            self._blue if blue is None else blue,
            self._alpha if alpha is None else alpha,
        )

    # ── Formatting ───────────────────────────────────────────────────────────
    def to_string(self, force_rgba: bool = False) -> str:
        """`#rrggbb` when opaque, else `rgba(r, g, b, a)`."""
        if self.has_alpha or force_rgba:
            a = self._alpha if self._alpha is not None else 1
            return f"rgba({self._red}, {self._green}, {self._blue}, {a})"
        return webcolors.rgb_to_hex((self._red, self._green, self._blue))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._alpha is None:
            return f"HTMLColor({self._red}, {self._green}, {self._blue})"
        return f"HTMLColor({self._red}, {self._green}, {self._blue}, {self._alpha})"

    # ── Equality & ordering ──────────────────────────────────────────────────
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HTMLColor):
            return NotImplemented
        return (
            self._red == other._red
            and self._green == other._green
            and self._blue == other._blue
            and self._alpha == other._alpha
        )

    def __hash__(self) -> int:
        return hash((self._red, self._green, self._blue, self._alpha))

    def compare_to(self, other: HTMLColor) -> int:
        """Negative when self is brighter than other, positive when darker."""
        return (other.brightness > self.brightness) - (other.brightness < self.brightness)

    def __lt__(self, other: HTMLColor) -> bool:
        if not isinstance(other, HTMLColor):
            return NotImplemented
        return self.compare_to(other) < 0

    # ── Brightness arithmetic ────────────────────────────────────────────────
    def brighter_space(self) -> int:
        """Headroom left for brightening."""
        return BRIGHTER_CEILING - min(self._red, self._green, self._blue)

    def darker_space(self) -> int:
        """Headroom left for darkening."""
        return max(self._red, self._green, self._blue) - DARKER_FLOOR

    def brighter(
        self, amount: int | None = None, default: HTMLColor | None = None
    ) -> HTMLColor | None:
        """
        Does: Add `amount` (derived from headroom when omitted) to every channel.
        Returns: New color, or `default` when there is no usable headroom.
        """
        step = self._resolve_amount(self.brighter_space(), amount, default)
        if step is None:
            return default
        return self._shift(step)

    def darker(
        self, amount: int | None = None, default: HTMLColor | None = None
    ) -> HTMLColor | None:
        """
        Does: Subtract `amount` (derived from headroom when omitted) from every channel.
        Returns: New color, or `default` when there is no usable headroom.
        """
        step = self._resolve_amount(self.darker_space(), amount, default)
        if step is None:
            return default
        return self._shift(-step)

    @staticmethod
    def _resolve_amount(
        space: int, amount: int | None, default: HTMLColor | None
    ) -> int | None:
        # None means "give up and return the default".
        if default is not None and space <= 2:
            return None
        if amount is None:
            amount = _change_amount(space)
        min_amount = min(int(amount / 2), MIN_AMOUNT_CAP)
        if space < amount:
            if space < min_amount:
                return None
            amount = space
        return amount

    def _shift(self, delta: int) -> HTMLColor:
        return HTMLColor(
            _clip(self._red + delta),
            _clip(self._green + delta),
            _clip(self._blue + delta),
            self._alpha,
        )

    def grey_scale(self) -> HTMLColor:
        """Each channel replaced by the rounded mean of the three; alpha kept."""
        m = round((self._red + self._green + self._blue) / 3)
        return HTMLColor(m, m, m, self._alpha)


def parse_color(color: str | None) -> HTMLColor | None:
    """Shortcut for HTMLColor.from_string."""
    return HTMLColor.from_string(color)
