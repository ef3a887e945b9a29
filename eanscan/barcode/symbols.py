"""
EAN-13 symbol table, orientation correction and country digit resolution.

A unit read in its printed bar order with the L/R widths decodes as EVEN;
one with the G widths decodes as ODD. Left-half units are read reversed,
so L-coded left digits come out ODD and G-coded ones EVEN, while every
right-half R-coded digit comes out EVEN.
"""

from collections.abc import Sequence

import structlog

from eanscan.models import UNDECODED, UNKNOWN_COUNTRY, Decoding, Digit, Parity, TVal

logger = structlog.get_logger(__name__)

DIGITS_PER_SCAN = 12

_ODD, _EVEN = Parity.ODD, Parity.EVEN

# (t1, t2, t4) -> digit. t4 is None where t1 and t2 already decide the
# digit; the pairs (3,3), (3,4), (4,3), (4,4) need t4 to split 1/7 and 2/8.
SYMBOL_TABLE: dict[tuple[int, int, int | None], Digit] = {
    (5, 3, None): Digit(value=0, parity=_EVEN),
    (2, 3, None): Digit(value=0, parity=_ODD),
    (4, 4, 1): Digit(value=1, parity=_EVEN),
    (3, 4, 2): Digit(value=1, parity=_ODD),
    (3, 3, 2): Digit(value=2, parity=_EVEN),
    (4, 3, 2): Digit(value=2, parity=_ODD),
    (5, 5, None): Digit(value=3, parity=_EVEN),
    (2, 5, None): Digit(value=3, parity=_ODD),
    (2, 4, None): Digit(value=4, parity=_EVEN),
    (5, 4, None): Digit(value=4, parity=_ODD),
    (3, 5, None): Digit(value=5, parity=_EVEN),
    (4, 5, None): Digit(value=5, parity=_ODD),
    (2, 2, None): Digit(value=6, parity=_EVEN),
    (5, 2, None): Digit(value=6, parity=_ODD),
    (4, 4, 2): Digit(value=7, parity=_EVEN),
    (3, 4, 1): Digit(value=7, parity=_ODD),
    (3, 3, 3): Digit(value=8, parity=_EVEN),
    (4, 3, 1): Digit(value=8, parity=_ODD),
    (4, 2, None): Digit(value=9, parity=_EVEN),
    (3, 2, None): Digit(value=9, parity=_ODD),
}

UNDECODABLE = Digit(value=UNDECODED)

# Parity of the first six scanned digits (MSB first, 1 = odd) -> country/system digit
COUNTRY_CODES: dict[int, int] = {
    0b111111: 0,
    0b110100: 1,
    0b110010: 2,
    0b110001: 3,
    0b101100: 4,
    0b100110: 5,
    0b100011: 6,
    0b101010: 7,
    0b101001: 8,
    0b100101: 9,
}


def decode_digit(tval: TVal) -> Digit:
    """Look up one unit's t-values; unknown combinations give UNDECODABLE."""
    digit = SYMBOL_TABLE.get((tval.t1, tval.t2, None))
    if digit is None:
        digit = SYMBOL_TABLE.get((tval.t1, tval.t2, tval.t4), UNDECODABLE)
    return digit


def decode_t_values(tvals: Sequence[TVal]) -> list[Digit]:
    """Decode every unit in scan order."""
    return [decode_digit(tval) for tval in tvals]


def orient_digits(digits: Sequence[Digit]) -> list[Digit]:
    """
    Return the digits in printed order.

    The leftmost printed digit is always odd, so an even first digit
    means the line was scanned end to start.
    """
    if digits and digits[0].parity == Parity.EVEN:
        return list(reversed(digits))
    return list(digits)


def parity_pattern(digits: Sequence[Digit]) -> int:
    """Six-bit parity pattern of the first six digits, 1 for odd."""
    pattern = 0
    for digit in digits[:6]:
        pattern = (pattern << 1) | (1 if digit.parity == Parity.ODD else 0)
    return pattern


def resolve_country_code(digits: Sequence[Digit]) -> int:
    """Country/system digit encoded by the parity of the first six digits."""
    if not all(digit.is_decoded for digit in digits[:6]):
        return UNKNOWN_COUNTRY
    return COUNTRY_CODES.get(parity_pattern(digits), UNKNOWN_COUNTRY)


def full_decoding(digits: Sequence[Digit]) -> Decoding:
    """
    Build the 13-digit decoding from 12 oriented digits.

    Raises:
        ValueError: if digits does not hold exactly 12 entries
    """
    if len(digits) != DIGITS_PER_SCAN:
        raise ValueError(f"Expected {DIGITS_PER_SCAN} digits, got {len(digits)}")

    country_code = resolve_country_code(digits)
    if country_code == UNKNOWN_COUNTRY:
        logger.warning("Unknown country parity pattern", pattern=f"{parity_pattern(digits):06b}")

    return Decoding(digits=(country_code, *(digit.value for digit in digits)))
