"""
standard.py
===========

Does: Load and validate scheme tables ({scheme name: [color, ...]}) from JSON
      data files, and expose the bundled ColorBrewer-derived table.
Used By: StandardColorGenerator, the demo CLI, callers with custom tables.
Returns: Read-only mappings of scheme name to a tuple of color strings.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from color_palette_generator.general.utils.load_config import load_config

__all__ = [
    "InvalidSchemeTableError",
    "SchemeTable",
    "STANDARD_SCHEMES_FILE",
    "DEFAULT_MAIN_SCHEME",
    "validate_scheme_table",
    "load_scheme_table",
    "get_standard_schemes",
]

log = logging.getLogger(__name__)

SchemeTable = Mapping[str, tuple[str, ...]]

# ColorBrewer: https://github.com/axismaps/colorbrewer/ (Apache License 2.0)
STANDARD_SCHEMES_FILE = "standard_schemes"
DEFAULT_MAIN_SCHEME = "brewer.Paired"

_PACKAGE_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


class InvalidSchemeTableError(ValueError):
    """Raise when a scheme table is empty or not {str: [str, ...]}."""


def validate_scheme_table(data: Mapping[str, Any]) -> dict[str, tuple[str, ...]]:
    """
    Does: Check that `data` maps non-empty names to non-empty lists of strings,
          keeping the table's key order.
    Returns: dict[str, tuple[str, ...]].
    Raises: InvalidSchemeTableError.
    """
    if not data:
        raise InvalidSchemeTableError("Empty scheme table")
    table: dict[str, tuple[str, ...]] = {}
    for name, colors in data.items():
        if not isinstance(name, str) or not name:
            raise InvalidSchemeTableError(f"Invalid scheme name: {name!r}")
        if isinstance(colors, str) or not isinstance(colors, (list, tuple)) or not colors:
            raise InvalidSchemeTableError(f"Scheme {name!r}: expected a non-empty list of colors")
        bad = [c for c in colors if not isinstance(c, str)]
        if bad:
            raise InvalidSchemeTableError(f"Scheme {name!r}: non-string colors {bad[:3]!r}")
        table[name] = tuple(colors)
    return table


def load_scheme_table(
    file: str = STANDARD_SCHEMES_FILE,
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
) -> SchemeTable:
    """Load <data>/<file>.json as a validated, read-only scheme table."""
    table = load_config(
        file,
        base_dir=base_dir,
        validator=validate_scheme_table,
        allow_comments=allow_comments,
    )
    log.debug("Loaded scheme table %r: %d schemes", file, len(table))
    return MappingProxyType(table)


@lru_cache(maxsize=1)
def get_standard_schemes() -> SchemeTable:
    """The bundled standard table (loaded once per process)."""
    return load_scheme_table(STANDARD_SCHEMES_FILE, base_dir=_PACKAGE_DATA_DIR)
