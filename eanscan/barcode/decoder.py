"""
EAN-13 decoder running the scanline pipeline on a binary mask.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import structlog

from eanscan.barcode.bars import locate_guard, segment_bars, verify_guard_positions
from eanscan.barcode.errors import DecodeError
from eanscan.barcode.geometry import estimate_geometry
from eanscan.barcode.scanline import sample_scanline
from eanscan.barcode.symbols import decode_t_values, full_decoding, orient_digits
from eanscan.barcode.tvalues import extract_t_values
from eanscan.barcode.validator import calculate_check_digit, validate
from eanscan.config import get_settings
from eanscan.models import Bar, Decoding, Geometry


@dataclass
class ScanResult:
    """Outcome of one decode attempt."""

    decoding: Decoding | None
    checksum_valid: bool
    expected_check_digit: int | None = None
    geometry: Geometry | None = None
    error: str | None = None
    error_stage: str | None = None

    @property
    def succeeded(self) -> bool:
        """True if the pipeline produced a decoding (it may still hold sentinels)."""
        return self.decoding is not None


class Ean13Decoder:
    """
    Decodes EAN-13 barcodes from a binary mask along one scanline.

    Pipeline: geometry -> scanline -> bars -> guard -> t-values -> digits
    -> orientation -> country digit.
    """

    def __init__(self, verify_guards: bool | None = None):
        """
        Initialize decoder.

        Args:
            verify_guards: Re-check middle and right guard positions
                (default: settings.decoder_verify_guards)
        """
        if verify_guards is None:
            verify_guards = get_settings().decoder_verify_guards
        self.verify_guards = verify_guards
        self.logger = structlog.get_logger(__name__)

    def decode(self, mask: np.ndarray) -> Decoding:
        """
        Decode a barcode from a binary mask.

        Args:
            mask: 2-D mask, ink = 1

        Returns:
            13-digit decoding (may contain -1 sentinels)

        Raises:
            DecodeError: on an empty mask, empty scanline or missing guard
        """
        geometry = estimate_geometry(mask)
        scanline = sample_scanline(mask, geometry)
        return self.decode_bars(segment_bars(scanline))

    def decode_bars(self, bars: Sequence[Bar]) -> Decoding:
        """
        Decode a bar sequence that covers the whole symbol and its quiet zones.

        Raises:
            GuardNotFound: if guards are missing or too few bars follow the left guard
        """
        guard_index = locate_guard(bars)
        if self.verify_guards:
            verify_guard_positions(bars, guard_index)

        tvals = extract_t_values(bars, guard_index)
        digits = orient_digits(decode_t_values(tvals))
        decoding = full_decoding(digits)

        if not decoding.is_complete:
            self.logger.warning(
                "Undecodable digits in scan",
                positions=decoding.undecoded_positions,
                code=decoding.code,
            )

        self.logger.debug(
            "Decoded scanline",
            code=decoding.code,
            guard_index=guard_index,
            bar_count=len(bars),
        )
        return decoding

    def scan(self, mask: np.ndarray) -> ScanResult:
        """
        Decode and verify, reporting structural failures instead of raising.

        Args:
            mask: 2-D mask, ink = 1

        Returns:
            ScanResult with decoding and checksum verdict, or the error
        """
        geometry = None
        try:
            geometry = estimate_geometry(mask)
            scanline = sample_scanline(mask, geometry)
            decoding = self.decode_bars(segment_bars(scanline))
        except DecodeError as e:
            self.logger.warning("Decode attempt failed", stage=e.stage, error=str(e))
            return ScanResult(
                decoding=None,
                checksum_valid=False,
                geometry=geometry,
                error=str(e),
                error_stage=e.stage,
            )

        checksum_valid = validate(decoding)
        expected = calculate_check_digit(decoding.digits)
        if not checksum_valid:
            self.logger.warning(
                "Checksum mismatch",
                code=decoding.code,
                check_digit=decoding.check_digit,
                expected=expected,
            )

        return ScanResult(
            decoding=decoding,
            checksum_valid=checksum_valid,
            expected_check_digit=expected,
            geometry=geometry,
        )


def decode(mask: np.ndarray, verify_guards: bool | None = None) -> Decoding:
    """
    Convenience function to decode a barcode from a binary mask.

    Args:
        mask: 2-D mask, ink = 1
        verify_guards: Re-check middle and right guard positions

    Returns:
        13-digit decoding
    """
    decoder = Ean13Decoder(verify_guards=verify_guards)
    return decoder.decode(mask)
