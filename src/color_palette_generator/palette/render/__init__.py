"""
render.
======

Does: Presentation helpers for palettes (HTML swatches).
"""

from .html import palette_as_html

__all__ = ["palette_as_html"]
