"""
Rendering of EAN-13 codes into binary masks.

Used to build clean captures with known content for tests and accuracy runs.
"""

import numpy as np

from eanscan.barcode.validator import parse_ean13

# L-code module patterns; R is the complement of L and G the reverse of R
L_CODES = [
    "0001101",
    "0011001",
    "0010011",
    "0111101",
    "0100011",
    "0110001",
    "0101111",
    "0111011",
    "0110111",
    "0001011",
]
R_CODES = ["".join("1" if m == "0" else "0" for m in code) for code in L_CODES]
G_CODES = [code[::-1] for code in R_CODES]

# Symbol set of each left-half digit, by country/system digit
FIRST_DIGIT_PARITY = [
    "LLLLLL",
    "LLGLGG",
    "LLGGLG",
    "LLGGGL",
    "LGLLGG",
    "LGGLLG",
    "LGGGLL",
    "LGLGLG",
    "LGLGGL",
    "LGGLGL",
]

SIDE_GUARD = "101"
MIDDLE_GUARD = "01010"


def module_pattern(code: str) -> str:
    """
    Module string of a 13-digit code, '1' for ink.

    The check digit is rendered as given, so codes with a wrong check digit
    can be produced on purpose.
    """
    digits = parse_ean13(code)
    parity = FIRST_DIGIT_PARITY[digits[0]]

    left = "".join(
        (L_CODES if symbol_set == "L" else G_CODES)[digit]
        for digit, symbol_set in zip(digits[1:7], parity)
    )
    right = "".join(R_CODES[digit] for digit in digits[7:])

    return SIDE_GUARD + left + MIDDLE_GUARD + right + SIDE_GUARD


def render_scanline(code: str, module_width: int = 2, quiet_zone: int = 10) -> np.ndarray:
    """
    Render one row of samples.

    Args:
        code: 13-digit code
        module_width: Pixels per module
        quiet_zone: Background modules on each side

    Returns:
        1-D uint8 array of 0/1 samples
    """
    if module_width < 1:
        raise ValueError("module_width must be at least 1")
    modules = "0" * quiet_zone + module_pattern(code) + "0" * quiet_zone
    row = np.array([int(m) for m in modules], dtype=np.uint8)
    return np.repeat(row, module_width)


def render_mask(
    code: str,
    module_width: int = 2,
    height: int = 41,
    quiet_zone: int = 10,
) -> np.ndarray:
    """
    Render a barcode mask with vertical bars.

    Returns:
        2-D uint8 array, ink = 1
    """
    row = render_scanline(code, module_width, quiet_zone)
    return np.tile(row, (height, 1))
