"""
schemes.
=======

Does: Scheme table loading/validation and the bundled standard table.
"""

from .standard import (
    DEFAULT_MAIN_SCHEME,
    STANDARD_SCHEMES_FILE,
    InvalidSchemeTableError,
    SchemeTable,
    get_standard_schemes,
    load_scheme_table,
    validate_scheme_table,
)

__all__ = [
    "DEFAULT_MAIN_SCHEME",
    "STANDARD_SCHEMES_FILE",
    "InvalidSchemeTableError",
    "SchemeTable",
    "get_standard_schemes",
    "load_scheme_table",
    "validate_scheme_table",
]
