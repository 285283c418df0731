"""
scheme.py
=========

Does: Resolve a scheme name plus a size against a table of curated color
      lists, with cascading fallback (sized exact names, case-insensitive
      substring scan, table default) and per-instance memoization.
Used By: Chart callers needing curated colors; StandardColorGenerator.
Returns: Ordered lists of color strings; never None.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence

from color_palette_generator.general.utils.log import debug
from color_palette_generator.palette.generators.base import ColorGenerator
from color_palette_generator.palette.schemes.standard import (
    DEFAULT_MAIN_SCHEME,
    InvalidSchemeTableError,
    get_standard_schemes,
    validate_scheme_table,
)

__all__ = [
    "SchemeColorGenerator",
    "StandardColorGenerator",
    "DISABLED_SUFFIX",
    "MAX_SCHEME_SIZE",
    "MIN_SCHEME_SIZE",
]

log = logging.getLogger(__name__)

DISABLED_SUFFIX = "Disabled"
# Sized variants probed are name3 .. name15.
MIN_SCHEME_SIZE = 3
MAX_SCHEME_SIZE = 15

_TRAILING_DIGITS = re.compile(r"\d+$")


class SchemeColorGenerator(ColorGenerator):
    """Color generator over a table of named schemes.

    The table maps a scheme name to an ordered list of HTML colors. Sized
    variants share a prefix and end in their length ("brewer.Paired5").
    The table is checked once (InvalidSchemeTableError when empty or when a
    scheme is not a non-empty list of strings), then only read; resolutions
    are cached per `name:size`.
    """

    def __init__(self, schemes: Mapping[str, Sequence[str]], main_scheme: str):
        validate_scheme_table(schemes)
        self._schemes = schemes
        self.main_scheme = main_scheme
        self._resolved_cache: dict[str, list[str]] = {}

    @property
    def scheme_names(self) -> list[str]:
        return list(self._schemes.keys())

    @property
    def default_scheme_name(self) -> str:
        """First non-disabled scheme name, without its size suffix."""
        for key in self._schemes:
            if "disabled" not in key:
                return _TRAILING_DIGITS.sub("", key)
        raise InvalidSchemeTableError("Scheme table has only disabled schemes")

    @property
    def default_disabled_scheme_name(self) -> str:
        """First disabled/grey/gray scheme name, without its size suffix.

        Falls back to default_scheme_name when the table has none.
        """
        for key in self._schemes:
            lowered = key.lower()
            if "disabled" in lowered or "grey" in lowered or "gray" in lowered:
                return _TRAILING_DIGITS.sub("", key)
        return self.default_scheme_name

    def get_default_scheme_colors(self, size: int) -> list[str]:
        return self.get_scheme_colors(self.default_scheme_name, size)

    def get_default_disabled_scheme_colors(self, size: int) -> list[str]:
        return self.get_scheme_colors(self.default_disabled_scheme_name, size)

    def get_scheme_colors(self, scheme_name: str, size: int) -> list[str]:
        """Colors of `scheme_name` best matching `size` (see _resolve)."""
        return self._get_scheme_colors_cached(scheme_name, size, disabled=False)

    def get_disabled_scheme_colors(self, scheme_name: str, size: int) -> list[str]:
        """Colors of `<scheme_name>Disabled`, or the default disabled scheme."""
        return self._get_scheme_colors_cached(
            f"{scheme_name}{DISABLED_SUFFIX}", size, disabled=True
        )

    def clear_cache(self) -> None:
        self._resolved_cache.clear()

    def _get_scheme_colors_cached(self, scheme_name: str, size: int, disabled: bool) -> list[str]:
        cache_key = f"{scheme_name}:{size}"
        cached = self._resolved_cache.get(cache_key)
        if cached is not None:
            return cached

        colors = self._resolve(scheme_name, size)
        if colors is None:
            log.debug("Scheme %r (size %d) not found, using default", scheme_name, size)
            debug(f"no scheme for {cache_key}, falling back to default", topic="schemes")
            colors = (
                self.get_default_disabled_scheme_colors(size)
                if disabled
                else self.get_default_scheme_colors(size)
            )

        self._resolved_cache[cache_key] = colors
        return colors

    def _resolve(self, scheme_name: str, size: int) -> list[str] | None:
        """
        Does: 1) exact lookup of name, name<size..15>, name<size-1..3>;
              2) else a case-insensitive substring scan of the table for each
                 of those candidates, bare name last. Every candidate rescans
                 and overwrites, so the last candidate with any match decides.
        Returns: list[str] or None.
        """
        keys = [scheme_name]
        keys.extend(f"{scheme_name}{i}" for i in range(size, MAX_SCHEME_SIZE + 1))
        keys.extend(f"{scheme_name}{i}" for i in range(size - 1, MIN_SCHEME_SIZE - 1, -1))

        for key in keys:
            if key in self._schemes:
                return list(self._schemes[key])

        lowered = [k.lower() for k in keys]
        lowered.append(lowered.pop(0))

        colors: list[str] | None = None
        for key in lowered:
            for scheme_key in self._schemes:
                if key in scheme_key.lower():
                    colors = list(self._schemes[scheme_key])
                    break
        return colors

    def generate_color(self, name: str, index: int, total: int) -> str:
        colors = self.get_scheme_colors(self.main_scheme, total)
        return colors[index % len(colors)]

    def generate_disabled_color(self, name: str, index: int, total: int) -> str:
        colors = self.get_disabled_scheme_colors(self.main_scheme, total)
        return colors[index % len(colors)]


class StandardColorGenerator(SchemeColorGenerator):
    """SchemeColorGenerator over the bundled ColorBrewer-derived table."""

    def __init__(self, main_scheme: str = DEFAULT_MAIN_SCHEME):
        super().__init__(get_standard_schemes(), main_scheme)
