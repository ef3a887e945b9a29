"""
Centroid and principal-axis estimation from image moments.
"""

import math

import cv2
import numpy as np
import structlog

from eanscan.barcode.errors import EmptyMask
from eanscan.models import Geometry

logger = structlog.get_logger(__name__)


def as_binary_mask(mask: np.ndarray) -> np.ndarray:
    """Return a uint8 copy of the mask with every nonzero pixel set to 1."""
    array = np.asarray(mask)
    if array.ndim != 2:
        raise ValueError(f"Mask must be a 2-D array, got shape {array.shape}")
    return (array != 0).astype(np.uint8)


def estimate_geometry(mask: np.ndarray) -> Geometry:
    """
    Estimate centroid and orientation of the ink blob.

    Ink pixels (nonzero) carry the mass. The angle is the principal axis
    from raw second-order moments, measured counter-clockwise.

    Args:
        mask: 2-D binary mask, ink = 1

    Returns:
        Geometry of the blob

    Raises:
        EmptyMask: if the mask has no ink pixels
    """
    m = cv2.moments(as_binary_mask(mask), binaryImage=True)
    m00 = m["m00"]
    if m00 == 0:
        raise EmptyMask("Mask contains no ink pixels")

    m10, m01 = m["m10"], m["m01"]
    cx = m10 / m00
    cy = m01 / m00
    angle = -0.5 * math.atan2(
        2 * (m00 * m["m11"] - m10 * m01),
        (m00 * m["m20"] - m10**2) - (m00 * m["m02"] - m01**2),
    )

    logger.debug("Estimated blob geometry", cx=cx, cy=cy, angle=angle, area=m00)
    return Geometry(centroid=(cx, cy), angle=angle, area=m00)
