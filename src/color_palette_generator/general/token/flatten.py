# general/token/flatten.py

"""
flatten.py.

Does: Turn loosely-shaped caller input (a delimited string, nested lists,
      tuples, generators or scalars) into one flat list of trimmed strings.
Returns: list[str] in input order, with empty tokens dropped.
Used by: HTMLColor.parse_list / ColorPalette.from_value and the demo CLI.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

__all__ = ["DEFAULT_DELIMITER", "to_flat_list_of_strings"]

# Delimiters between color tokens: ';' or '|' (runs collapse). Commas stay,
# they belong to the rgb()/tuple forms.
DEFAULT_DELIMITER = re.compile(r"[;|]+")


def to_flat_list_of_strings(
    value: Any,
    delimiter: str | re.Pattern[str] = DEFAULT_DELIMITER,
) -> list[str]:
    """
    Does: Flatten `value` into a list of non-empty, stripped strings.
          - None        -> []
          - str         -> split on `delimiter`
          - Iterable    -> flattened recursively (mappings yield their keys)
          - anything else -> [str(value)] split the same way
    Returns: list[str].
    """
    pattern = re.compile(delimiter) if isinstance(delimiter, str) else delimiter
    out: list[str] = []
    _flatten_into(value, pattern, out)
    return out


def _flatten_into(value: Any, pattern: re.Pattern[str], out: list[str]) -> None:
    if value is None:
        return
    if isinstance(value, (str, bytes)):
        text = value.decode("utf-8") if isinstance(value, bytes) else value
        out.extend(tok.strip() for tok in pattern.split(text) if tok.strip())
        return
    if isinstance(value, Iterable):
        for item in value:
            _flatten_into(item, pattern, out)
        return
    _flatten_into(str(value), pattern, out)
