"""Identicon rendering.

This module provides `draw_pattern`, which paints a boolean block grid onto a
square PIL Image using two flat colours.
"""
import logging
from typing import Sequence

from PIL import Image, ImageDraw

from .color import Color

logger = logging.getLogger(__name__)


def block_geometry(pixels: int, size: int):
    """Return ``(length, offset)`` for a ``size``-block grid on ``pixels``.

    ``length`` is the block edge (integer division) and ``offset`` centres the
    grid when ``pixels`` is not a multiple of ``size``.
    """
    return pixels // size, (pixels % size) // 2


def draw_pattern(
    grid: Sequence[bool],
    size: int,
    pixels: int,
    foreground: Color,
    background: Color,
) -> Image.Image:
    """Render ``grid`` as a ``pixels x pixels`` opaque RGB image.

    Args:
        grid:       Row-major booleans, ``size * size`` long. True cells get
                    a foreground block, false cells stay background.
        size:       Blocks per row and column.
        pixels:     Edge length of the output image.
        foreground: Block colour.
        background: Canvas colour.

    Returns:
        A PIL RGB Image.
    """
    if len(grid) != size * size:
        raise ValueError(f"grid has {len(grid)} cells, expected {size * size}")

    base_img = Image.new("RGB", (pixels, pixels), tuple(background))
    draw = ImageDraw.Draw(base_img)

    length, offset = block_geometry(pixels, size)
    for j, on in enumerate(grid):
        if not on:
            continue
        x0 = (j % size) * length + offset
        y0 = (j // size) * length + offset
        # rectangle end points are inclusive
        draw.rectangle([x0, y0, x0 + length - 1, y0 + length - 1], fill=tuple(foreground))

    logger.debug("rendered %dpx icon, block=%d offset=%d", pixels, length, offset)
    return base_img
