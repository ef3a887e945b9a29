"""
Tests for EAN-13 checksum validation.
"""

import numpy as np
import pytest

from eanscan.barcode.validator import (
    calculate_check_digit,
    calculate_ean13_checksum,
    parse_ean13,
    validate,
    validate_ean13_checksum,
)
from eanscan.models import Decoding


class TestEAN13Checksum:
    """Tests for EAN-13 checksum calculation on code strings."""

    def test_calculate_ean13_checksum(self):
        """Test checksum calculation for known EAN-13 codes."""
        # 4006381333931 - known valid EAN-13
        assert calculate_ean13_checksum("400638133393") == 1

        # 5901234123457 - known valid EAN-13
        assert calculate_ean13_checksum("590123412345") == 7

        # 9310232954790 - reference capture code
        assert calculate_ean13_checksum("931023295479") == 0

    def test_validate_ean13_valid(self):
        """Test validation of valid EAN-13 codes."""
        valid_codes = [
            "4006381333931",
            "5901234123457",
            "0012345678905",
            "9310232954790",
            "9780201379624",  # ISBN
        ]
        for code in valid_codes:
            assert validate_ean13_checksum(code), f"Expected {code} to be valid"

    def test_validate_ean13_invalid(self):
        """Test validation of invalid EAN-13 codes."""
        invalid_codes = [
            "4006381333932",  # Wrong checksum
            "9310232954791",  # Wrong checksum
            "123456789012",  # Too short
            "12345678901234",  # Too long
            "400638133393A",  # Non-numeric
        ]
        for code in invalid_codes:
            assert not validate_ean13_checksum(code), f"Expected {code} to be invalid"

    def test_calculate_rejects_short_or_non_numeric(self):
        """Test that unusable input raises ValueError."""
        with pytest.raises(ValueError):
            calculate_ean13_checksum("12345")
        with pytest.raises(ValueError):
            calculate_ean13_checksum("40063813339X")


class TestDecodingChecksum:
    """Tests for checksum validation of decodings."""

    def test_reference_decoding_is_valid(self):
        """Test the reference code passes with check digit 0."""
        decoding = Decoding(digits=(9, 3, 1, 0, 2, 3, 2, 9, 5, 4, 7, 9, 0))
        assert calculate_check_digit(decoding.digits) == 0
        assert validate(decoding)

    def test_wrong_check_digit(self):
        """Test a decoding with a wrong final digit fails."""
        decoding = Decoding(digits=(9, 3, 1, 0, 2, 3, 2, 9, 5, 4, 7, 9, 3))
        assert not validate(decoding)

    def test_check_digit_ignores_thirteenth_digit(self):
        """Test that only the first 12 digits are weighted."""
        base = [4, 0, 0, 6, 3, 8, 1, 3, 3, 3, 9, 3]
        assert calculate_check_digit(base + [0]) == calculate_check_digit(base + [9]) == 1

    def test_validate_matches_weighted_sum(self):
        """Test validate against the weighted sum over many random sequences."""
        rng = np.random.default_rng(1313)
        for _ in range(500):
            digits = tuple(int(d) for d in rng.integers(-1, 10, size=13))
            odds = sum(digits[1:12:2])
            evens = sum(digits[0:12:2])
            check = (3 * odds + evens) % 10
            expected = 0 if check == 0 else 10 - check

            decoding = Decoding(digits=digits)
            assert validate(decoding) == (expected == digits[12]), f"Mismatch for {digits}"

    def test_validate_has_no_side_effects(self):
        """Test that validation leaves the decoding untouched."""
        decoding = Decoding(digits=(9, 3, 1, 0, 2, 3, 2, 9, 5, 4, 7, 9, 0))
        before = decoding.digits
        validate(decoding)
        assert decoding.digits == before


class TestParseEAN13:
    """Tests for parsing reference code strings."""

    def test_parse(self):
        """Test parsing to a digit tuple."""
        assert parse_ean13("9310232954790") == (9, 3, 1, 0, 2, 3, 2, 9, 5, 4, 7, 9, 0)

    def test_parse_invalid(self):
        """Test rejection of malformed codes."""
        for code in ["931023295479", "93102329547900", "93102329547A0", ""]:
            with pytest.raises(ValueError):
                parse_ean13(code)
