"""
EAN-13 checksum utilities.
"""

from collections.abc import Sequence

from eanscan.models import Decoding
from eanscan.models.scan import EAN13_LENGTH


def calculate_check_digit(digits: Sequence[int]) -> int:
    """
    Calculate the EAN-13 check digit for the first 12 digits.

    Algorithm:
    1. Sum digits at even indices (0, 2, ..., 10) with weight 1
    2. Sum digits at odd indices (1, 3, ..., 11) with weight 3
    3. Check digit = 0 if total mod 10 is 0, else 10 - (total mod 10)
    """
    if len(digits) < EAN13_LENGTH - 1:
        raise ValueError("Need at least 12 digits for an EAN-13 check digit")

    evens = sum(digits[0:12:2])
    odds = sum(digits[1:12:2])
    check = (3 * odds + evens) % 10

    return 0 if check == 0 else 10 - check


def validate(decoding: Decoding) -> bool:
    """
    Check the scanned check digit against the computed one.

    Args:
        decoding: 13-digit decoding

    Returns:
        True if digits[12] matches the checksum of digits[0..11]
    """
    return calculate_check_digit(decoding.digits) == decoding.check_digit


def parse_ean13(code: str) -> tuple[int, ...]:
    """
    Parse a 13-digit code string.

    Raises:
        ValueError: if code is not exactly 13 decimal digits
    """
    if len(code) != EAN13_LENGTH or not code.isdigit():
        raise ValueError(f"Not a 13-digit code: {code!r}")
    return tuple(int(c) for c in code)


def calculate_ean13_checksum(code: str) -> int:
    """Calculate the check digit of a code string of at least 12 digits."""
    if len(code) < EAN13_LENGTH - 1:
        raise ValueError("Code must have at least 12 digits for EAN-13")
    for digit in code[:12]:
        if not digit.isdigit():
            raise ValueError(f"Invalid character in code: {digit}")

    return calculate_check_digit([int(c) for c in code[:12]])


def validate_ean13_checksum(code: str) -> bool:
    """
    Validate an EAN-13 code string.

    Args:
        code: 13-digit EAN code

    Returns:
        True if checksum is valid
    """
    if len(code) != EAN13_LENGTH:
        return False
    if not code.isdigit():
        return False

    return calculate_ean13_checksum(code) == int(code[-1])
