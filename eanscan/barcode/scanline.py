"""
Sampling of a scanline through the blob centroid.
"""

import math

import cv2
import numpy as np
import structlog

from eanscan.barcode.geometry import as_binary_mask
from eanscan.models import Geometry

logger = structlog.get_logger(__name__)


def _walk_line(start: tuple[int, int], end: tuple[int, int]) -> tuple[np.ndarray, np.ndarray]:
    """Columns and rows of a 4-connected pixel path from start to end, inclusive."""
    x, y = start
    x_end, y_end = end
    dx, dy = abs(x_end - x), abs(y_end - y)
    step_x = 1 if x_end >= x else -1
    step_y = 1 if y_end >= y else -1

    cols, rows = [x], [y]
    moved_x = moved_y = 0
    for _ in range(dx + dy):
        # Step along whichever axis is further behind the ideal line
        if (1 + 2 * moved_x) * dy < (1 + 2 * moved_y) * dx:
            x += step_x
            moved_x += 1
        else:
            y += step_y
            moved_y += 1
        cols.append(x)
        rows.append(y)

    return np.array(cols, dtype=np.intp), np.array(rows, dtype=np.intp)


def sample_scanline(mask: np.ndarray, geometry: Geometry) -> np.ndarray:
    """
    Sample mask pixels along the principal axis through the centroid.

    The segment is clipped to the image and walked from the end behind the
    centroid to the end ahead of it.

    Args:
        mask: 2-D binary mask
        geometry: Centroid and angle from estimate_geometry

    Returns:
        1-D uint8 array of 0/1 samples (empty if the line misses the image)
    """
    binary = as_binary_mask(mask)
    height, width = binary.shape
    cx, cy = geometry.centroid

    # Long enough to reach the image border from any interior point
    span = math.hypot(width, height)
    dx = span * math.cos(geometry.angle)
    dy = -span * math.sin(geometry.angle)

    start = (int(round(cx - dx)), int(round(cy - dy)))
    end = (int(round(cx + dx)), int(round(cy + dy)))
    inside, start, end = cv2.clipLine((0, 0, width, height), start, end)
    if not inside:
        logger.warning("Scanline misses the image", centroid=geometry.centroid)
        return np.zeros(0, dtype=np.uint8)

    cols, rows = _walk_line(tuple(start), tuple(end))
    samples = binary[rows, cols]

    logger.debug("Sampled scanline", start=tuple(start), end=tuple(end), length=samples.size)
    return samples
