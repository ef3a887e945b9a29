"""
Structural decode failures.

Symbolic failures (undecodable digits, unknown country pattern, checksum
mismatch) are not exceptions; they are carried as sentinels in the result.
"""


class DecodeError(ValueError):
    """Base class for failures that abort a decode attempt."""

    stage = "decode"


class EmptyMask(DecodeError):
    """The mask has no ink pixels, so no centroid or orientation exists."""

    stage = "geometry"


class EmptyScanline(DecodeError):
    """The sampled scanline holds no samples."""

    stage = "segment"


class GuardNotFound(DecodeError):
    """No guard pattern, or too few bars after it for 12 digit units."""

    stage = "guard"
