"""
logic.
=====

Does: Palette expansion algorithms.
"""

from .expansion import MIN_BLOCK_STEP, generate_palette

__all__ = ["generate_palette", "MIN_BLOCK_STEP"]
