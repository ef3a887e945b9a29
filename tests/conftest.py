"""
Shared fixtures: a rendered reference barcode and its bars.
"""

import numpy as np
import pytest

from eanscan.barcode.bars import segment_bars
from eanscan.barcode.synthetic import render_mask, render_scanline

REFERENCE_CODE = "9310232954790"


@pytest.fixture
def reference_mask() -> np.ndarray:
    """Clean capture of the reference code, 2 px per module."""
    return render_mask(REFERENCE_CODE, module_width=2, height=41)


@pytest.fixture
def reference_bars():
    """Bars of one row through the reference code."""
    return segment_bars(render_scanline(REFERENCE_CODE, module_width=2))
