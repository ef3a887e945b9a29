"""
Normalisation of digit-unit bar widths into t-values.

Each digit unit is four bars spanning seven modules. The t-values are the
module widths of adjacent bar pairs (t1..t3) and of the last bar (t4).
Left-half units are read in reverse bar order.
"""

from collections.abc import Sequence

from eanscan.barcode.bars import LEFT_DIGITS_OFFSET, RIGHT_DIGITS_OFFSET, SYMBOL_BAR_COUNT
from eanscan.barcode.errors import GuardNotFound
from eanscan.barcode.modules import convert_to_module_seven
from eanscan.models import Bar, TVal

BARS_PER_DIGIT = 4
DIGITS_PER_HALF = 6


def unit_t_values(widths: Sequence[int]) -> TVal:
    """T-values of one unit given its four widths in reading order."""
    w0, w1, w2, w3 = widths
    total = w0 + w1 + w2 + w3
    return TVal(
        t1=convert_to_module_seven(w0 + w1, total),
        t2=convert_to_module_seven(w1 + w2, total),
        t3=convert_to_module_seven(w2 + w3, total),
        t4=convert_to_module_seven(w3, total),
    )


def _half_units(widths: list[int], first: int) -> list[list[int]]:
    return [
        widths[first + i * BARS_PER_DIGIT : first + (i + 1) * BARS_PER_DIGIT]
        for i in range(DIGITS_PER_HALF)
    ]


def extract_t_values(bars: Sequence[Bar], guard_index: int) -> list[TVal]:
    """
    Compute t-values for the 12 digit units anchored on the guard index.

    Returns:
        Six left-half TVals followed by six right-half TVals

    Raises:
        GuardNotFound: if the bars do not reach the right guard
    """
    if len(bars) - guard_index < SYMBOL_BAR_COUNT:
        raise GuardNotFound(f"Too few bars after guard at {guard_index}")

    widths = [bar.width for bar in bars]
    left = _half_units(widths, guard_index + LEFT_DIGITS_OFFSET)
    right = _half_units(widths, guard_index + RIGHT_DIGITS_OFFSET)

    return [unit_t_values(unit[::-1]) for unit in left] + [unit_t_values(unit) for unit in right]
