"""
expansion.py
============

Does: Grow an ordered basic palette into `size` colors by stepping each basic
      color darker and brighter inside its own block, then sorting the whole
      result from brighter to darker.
Used By: ColorPalette.generate_palette and ColorGeneratorFromBasicPalette.
Returns: list[HTMLColor]; shorter than `size` only when every block runs out
         of headroom.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from operator import attrgetter

from color_palette_generator.general.utils.log import debug
from color_palette_generator.palette.color.html_color import HTMLColor

__all__ = ["generate_palette", "MIN_BLOCK_STEP"]

log = logging.getLogger(__name__)

# A block only grows while its per-step budget stays above this.
MIN_BLOCK_STEP = 10


def generate_palette(basic_colors: Sequence[HTMLColor], size: int) -> list[HTMLColor]:
    """
    Does: Expand `basic_colors` (unique, ordered) to `size` colors.
          - size <= len(basic_colors): the first `size` basic colors, unchanged.
          - otherwise: each basic color keys a block; every round prepends a
            darker variant of the block's first color and appends a brighter
            variant of its last one, until `size` colors exist or a round
            adds nothing. Each key is then re-inserted mid-block, blocks are
            concatenated in basic order and stably sorted brighter-first.
    Returns: list[HTMLColor].
    """
    if size <= len(basic_colors):
        return list(basic_colors[: max(size, 0)])

    blocks: dict[HTMLColor, list[HTMLColor]] = {color: [] for color in basic_colors}
    colors_size = len(blocks)
    colors_per_block = max((len(basic_colors) / size) - 1, 1) + 1

    while colors_size < size:
        colors_size_mark = colors_size

        for key_color, block in blocks.items():
            dark_step = int(key_color.darker_space() / colors_per_block)
            bright_step = int(key_color.brighter_space() / colors_per_block)

            init = block[0] if block else key_color
            end = block[-1] if block else key_color

            darker = init.darker(dark_step) if dark_step > MIN_BLOCK_STEP else None
            brighter = end.brighter(bright_step) if bright_step > MIN_BLOCK_STEP else None

            if darker is not None:
                block.insert(0, darker)
                colors_size += 1
                if colors_size == size:
                    break
            if brighter is not None:
                block.append(brighter)
                colors_size += 1
                if colors_size == size:
                    break

        if colors_size == colors_size_mark:
            log.debug("Palette expansion stalled at %d/%d colors", colors_size, size)
            debug(f"expansion stalled at {colors_size}/{size}", topic="expansion")
            break

    palette: list[HTMLColor] = []
    for key_color, block in blocks.items():
        block.insert(len(block) // 2, key_color)
        palette.extend(block)

    # list.sort is stable, reverse=True included
    palette.sort(key=attrgetter("brightness"), reverse=True)
    return palette
