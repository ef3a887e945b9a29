"""
Value models passed between decoder stages.
"""

from enum import Enum

from pydantic import Field

from eanscan.models.base import ScanBaseModel

# Sentinel for a digit whose t-values are not in the symbol table
UNDECODED = -1

# Sentinel for a parity pattern that maps to no country/system digit
UNKNOWN_COUNTRY = -1

EAN13_LENGTH = 13


class Polarity(int, Enum):
    """Colour of a run of scanline samples."""

    BACKGROUND = 0
    INK = 1


class Parity(str, Enum):
    """Symbol set of a decoded digit."""

    ODD = "odd"
    EVEN = "even"


class Geometry(ScanBaseModel):
    """
    Centroid and principal-axis angle of the ink blob.

    The angle is in radians, counter-clockwise from the +x axis with the
    y axis pointing up (rows grow downward in the mask).
    """

    centroid: tuple[float, float] = Field(..., description="(x, y) in pixel coordinates")
    angle: float = Field(..., description="Principal axis angle in radians")
    area: float = Field(..., gt=0, description="Number of ink pixels (m00)")


class Bar(ScanBaseModel):
    """A run of equal samples along the scanline."""

    width: int = Field(..., ge=1, description="Run length in samples")
    polarity: Polarity


class TVal(ScanBaseModel):
    """Module widths of one 4-bar digit unit."""

    t1: int
    t2: int
    t3: int
    t4: int


class Digit(ScanBaseModel):
    """A decoded digit, or UNDECODED with no parity."""

    value: int = Field(..., ge=UNDECODED, le=9)
    parity: Parity | None = None

    @property
    def is_decoded(self) -> bool:
        return self.value != UNDECODED


class Decoding(ScanBaseModel):
    """
    Thirteen decoded digits.

    Index 0 is the country/system digit derived from the parity pattern,
    indices 1-12 are the scanned digits in left-to-right order. Sentinel
    values (-1) mark digits that could not be decoded.
    """

    digits: tuple[int, ...] = Field(..., min_length=EAN13_LENGTH, max_length=EAN13_LENGTH)

    @property
    def country_code(self) -> int:
        return self.digits[0]

    @property
    def check_digit(self) -> int:
        return self.digits[-1]

    @property
    def undecoded_positions(self) -> list[int]:
        """Indices holding a sentinel instead of a digit."""
        return [i for i, digit in enumerate(self.digits) if digit < 0]

    @property
    def is_complete(self) -> bool:
        """True if every position holds a real digit."""
        return not self.undecoded_positions

    @property
    def code(self) -> str:
        """Digits as a string, '?' for sentinels."""
        return "".join(str(d) if d >= 0 else "?" for d in self.digits)

    def formatted(self) -> str:
        """Printed form: country digit, left group, right group."""
        code = self.code
        return f"{code[0]} {code[1:7]} {code[7:]}"

    def __str__(self) -> str:
        return self.code
