"""Checksum and pattern generation.

The name of an icon is hashed with MD5 and the digest bytes seed a
horizontally mirrored n x n grid of booleans. A cell is "on" (painted with
the foreground colour) when its seed byte is even.
"""
import hashlib
import logging
from typing import Sequence, Tuple

logger = logging.getLogger(__name__)

Grid = Tuple[bool, ...]


def create_checksum(*parts: str) -> bytes:
    """Return the MD5 digest of all parts, written in order."""
    ck = hashlib.md5()
    for s in parts:
        ck.update(s.encode("utf-8"))
    return ck.digest()


def build_grid(digest: bytes, size: int) -> Grid:
    """Build the mirrored ``size x size`` grid from ``digest``.

    The left half (plus the middle column when ``size`` is odd) comes straight
    from the digest; the right half mirrors it column for column.

    Args:
        digest: Seed bytes. Reused cyclically when shorter than the pattern.
        size:   Number of blocks per row and column.

    Returns:
        A row-major tuple of ``size * size`` booleans.
    """
    if not digest:
        raise ValueError("digest must contain at least one byte")

    chunk = (size + 1) // 2  # include middle column if odd

    # pattern bytes for the unmirrored half, wrapping back to index 0
    data = bytes(digest[i % len(digest)] for i in range(chunk * size))

    grid = [False] * (size * size)
    for row in range(size):
        seed = data[row * chunk:row * chunk + chunk]
        base = row * size
        # left to centre
        for j in range(chunk):
            grid[base + j] = seed[j] % 2 == 0
        # right to centre, skipping the centre column when size is odd
        for m in range(size - chunk):
            grid[base + size - 1 - m] = seed[m] % 2 == 0

    logger.debug("built %dx%d grid from %d digest bytes", size, size, len(digest))
    return tuple(grid)


def pattern(grid: Sequence[bool], size: int) -> str:
    """Text rendering of a grid: ``*`` for foreground, ``.`` for background."""
    s = "Pattern:"
    for g, cell in enumerate(grid):
        if g % size == 0:
            s += "\n"
        s += "*" if cell else "."
    return s
