"""
Pydantic models for the scan pipeline.
"""

from eanscan.models.scan import (
    UNDECODED,
    UNKNOWN_COUNTRY,
    Bar,
    Decoding,
    Digit,
    Geometry,
    Parity,
    Polarity,
    TVal,
)

__all__ = [
    # Geometry
    "Geometry",
    # Bars
    "Bar",
    "Polarity",
    "TVal",
    # Digits
    "Digit",
    "Parity",
    "Decoding",
    "UNDECODED",
    "UNKNOWN_COUNTRY",
]
