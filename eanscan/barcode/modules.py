"""
Quantisation of bar widths into symbology modules.
"""

import math

# Data-digit t-values are clamped to this range
MIN_MODULE = 1
MAX_MODULE = 5

MODULES_PER_DIGIT = 7
MODULES_PER_GUARD = 3


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def convert_to_module_three(width: int, total: int) -> int:
    """Width of a run in modules of a 3-module guard triple."""
    return round_half_up(MODULES_PER_GUARD * width / total)


def convert_to_module_seven(width: int, total: int) -> int:
    """
    Width of a run in modules of a 7-module digit unit.

    Values outside [MIN_MODULE, MAX_MODULE] are quantisation noise and are
    forced to the nearest bound.
    """
    modules = round_half_up(MODULES_PER_DIGIT * width / total)
    return min(max(modules, MIN_MODULE), MAX_MODULE)
