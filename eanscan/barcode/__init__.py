"""
EAN-13 scanline decoding pipeline.
"""

from eanscan.barcode.decoder import Ean13Decoder, ScanResult, decode
from eanscan.barcode.errors import DecodeError, EmptyMask, EmptyScanline, GuardNotFound
from eanscan.barcode.validator import (
    calculate_check_digit,
    calculate_ean13_checksum,
    validate,
    validate_ean13_checksum,
)

__all__ = [
    "Ean13Decoder",
    "ScanResult",
    "decode",
    "DecodeError",
    "EmptyMask",
    "EmptyScanline",
    "GuardNotFound",
    "calculate_check_digit",
    "calculate_ean13_checksum",
    "validate",
    "validate_ean13_checksum",
]
