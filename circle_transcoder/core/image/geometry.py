"""
Geometric calculations for the circular mask.

The circle is inscribed in a square of side ``diameter``. Retention is
decided per block rather than per pixel: a pixel is kept when any corner
just outside its containing block lies inside the circle. Blocks on the rim
are therefore kept whole, so the masked edge never cuts through a JPEG block
and does not add ringing at arbitrary offsets.
"""

import logging

import numpy as np

from circle_transcoder.core.constants import MaskConstants

logger = logging.getLogger(__name__)


def in_circle(x: int, y: int, diameter: int) -> bool:
    """
    Check whether a single point lies strictly inside the inscribed circle.

    Args:
        x: Column of the point (may be negative or past the square)
        y: Row of the point
        diameter: Side of the enclosing square

    Returns:
        True if the point is inside the circle
    """
    radius = diameter // 2
    dx = radius - x
    dy = radius - y
    return dx * dx + dy * dy < radius * radius


def block_in_circle(
    x: int, y: int, diameter: int, block_size: int = MaskConstants.BLOCK_SIZE
) -> bool:
    """
    Check whether the block containing (x, y) must be retained.

    The four probe points sit one pixel before the block origin and one
    pixel past the block end on each axis.

    Args:
        x: Pixel column
        y: Pixel row
        diameter: Side of the output square
        block_size: Block granularity in pixels

    Returns:
        True if any probe corner of the block is inside the circle
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")

    bx = x - x % block_size
    by = y - y % block_size
    low_x, high_x = bx - 1, bx + block_size
    low_y, high_y = by - 1, by + block_size

    return (
        in_circle(low_x, low_y, diameter)
        or in_circle(high_x, low_y, diameter)
        or in_circle(low_x, high_y, diameter)
        or in_circle(high_x, high_y, diameter)
    )


def circle_block_mask(
    diameter: int, block_size: int = MaskConstants.BLOCK_SIZE
) -> np.ndarray:
    """
    Build the retention mask for a whole square in one pass.

    Vectorised equivalent of calling block_in_circle() for every pixel.

    Args:
        diameter: Side of the output square
        block_size: Block granularity in pixels

    Returns:
        Boolean array of shape (diameter, diameter), indexed [y, x]
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")
    if diameter <= 0:
        return np.zeros((0, 0), dtype=bool)

    radius = np.int64(diameter // 2)
    radius_sq = radius * radius

    # x and y share the same block layout, so one axis serves both
    coords = np.arange(diameter, dtype=np.int64)
    origin = coords - coords % block_size
    low = (radius - (origin - 1)) ** 2
    high = (radius - (origin + block_size)) ** 2

    low_y, high_y = low[:, None], high[:, None]
    low_x, high_x = low[None, :], high[None, :]

    mask = (
        (low_x + low_y < radius_sq)
        | (high_x + low_y < radius_sq)
        | (low_x + high_y < radius_sq)
        | (high_x + high_y < radius_sq)
    )

    logger.debug(
        f"Circle mask {diameter}x{diameter} (block {block_size}): "
        f"{int(mask.sum())} of {mask.size} pixels retained"
    )
    return mask
