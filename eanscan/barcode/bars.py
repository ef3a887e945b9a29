"""
Run-length bar segmentation and guard pattern location.
"""

from collections.abc import Sequence

import numpy as np
import structlog

from eanscan.barcode.errors import EmptyScanline, GuardNotFound
from eanscan.barcode.modules import convert_to_module_three
from eanscan.models import Bar, Polarity

logger = structlog.get_logger(__name__)

# Bar offsets relative to the guard index (the quiet zone bar before the left guard)
LEFT_GUARD_OFFSET = 1
LEFT_DIGITS_OFFSET = 4
MIDDLE_GUARD_OFFSET = 28
RIGHT_DIGITS_OFFSET = 33
RIGHT_GUARD_OFFSET = 57

# Quiet zone + 3 guards + 12 digit units of 4 bars + quiet zone
SYMBOL_BAR_COUNT = 61


def segment_bars(scanline: Sequence[int] | np.ndarray) -> list[Bar]:
    """
    Run-length encode a 0/1 scanline into alternating bars.

    Raises:
        EmptyScanline: if the scanline has no samples
    """
    samples = (np.asarray(scanline).ravel() != 0).astype(np.int8)
    if samples.size == 0:
        raise EmptyScanline("Scanline contains no samples")

    edges = np.flatnonzero(np.diff(samples)) + 1
    starts = np.concatenate(([0], edges))
    ends = np.concatenate((edges, [samples.size]))

    return [
        Bar(width=int(end - start), polarity=Polarity(int(samples[start])))
        for start, end in zip(starts, ends)
    ]


def is_guard_triple(widths: Sequence[int]) -> bool:
    """True if three runs are roughly one module each."""
    w0, w1, w2 = widths
    total = w0 + w1 + w2
    return convert_to_module_three(w0 + w1, total) == 2 and convert_to_module_three(w1 + w2, total) == 2


def locate_guard(bars: Sequence[Bar]) -> int:
    """
    Find the left guard and return the index of the bar before it.

    The first ink-led triple matching the guard rule wins; all digit
    offsets are anchored on it.

    Raises:
        GuardNotFound: if no triple matches or too few bars follow it
    """
    for start in range(len(bars) - 2):
        if bars[start].polarity != Polarity.INK:
            continue
        if not is_guard_triple([bar.width for bar in bars[start : start + 3]]):
            continue

        guard_index = start - LEFT_GUARD_OFFSET
        remaining = len(bars) - guard_index
        if remaining < SYMBOL_BAR_COUNT:
            raise GuardNotFound(
                f"Only {remaining} bars from guard at {guard_index}, need {SYMBOL_BAR_COUNT}"
            )

        logger.debug("Located left guard", guard_index=guard_index, bar_count=len(bars))
        return guard_index

    raise GuardNotFound(f"No guard pattern in {len(bars)} bars")


def verify_guard_positions(bars: Sequence[Bar], guard_index: int) -> None:
    """
    Check that middle and right guards sit at their fixed offsets.

    Raises:
        GuardNotFound: if either guard is missing where the left guard puts it
    """
    if len(bars) - guard_index < SYMBOL_BAR_COUNT:
        raise GuardNotFound(f"Too few bars after guard at {guard_index}")

    middle = bars[guard_index + MIDDLE_GUARD_OFFSET : guard_index + MIDDLE_GUARD_OFFSET + 5]
    widths = [bar.width for bar in middle]
    if (
        middle[0].polarity != Polarity.BACKGROUND
        or not is_guard_triple(widths[0:3])
        or not is_guard_triple(widths[2:5])
    ):
        raise GuardNotFound(f"Middle guard not found at bar {guard_index + MIDDLE_GUARD_OFFSET}")

    right = bars[guard_index + RIGHT_GUARD_OFFSET : guard_index + RIGHT_GUARD_OFFSET + 3]
    if right[0].polarity != Polarity.INK or not is_guard_triple([bar.width for bar in right]):
        raise GuardNotFound(f"Right guard not found at bar {guard_index + RIGHT_GUARD_OFFSET}")
