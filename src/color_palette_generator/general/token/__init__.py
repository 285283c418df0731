# general/token/__init__.py
"""
token.
=====

Does: Provide the token helpers used to accept flexible caller input.
Exports: to_flat_list_of_strings, DEFAULT_DELIMITER
"""

from __future__ import annotations

from .flatten import DEFAULT_DELIMITER, to_flat_list_of_strings

__all__ = [
    "DEFAULT_DELIMITER",
    "to_flat_list_of_strings",
]
