"""
Tests for synthetic barcode rendering.
"""

import pytest

from eanscan.barcode.synthetic import (
    G_CODES,
    L_CODES,
    R_CODES,
    module_pattern,
    render_mask,
    render_scanline,
)


class TestModulePattern:
    """Tests for module strings."""

    def test_structure(self):
        """Test length and guard positions."""
        pattern = module_pattern("9310232954790")
        assert len(pattern) == 95
        assert pattern[:3] == "101"
        assert pattern[45:50] == "01010"
        assert pattern[-3:] == "101"

    def test_first_digit_zero_is_all_l(self):
        """Test that country digit 0 uses only L-codes on the left."""
        pattern = module_pattern("0012345678905")
        left = [pattern[3 + 7 * i : 10 + 7 * i] for i in range(6)]
        assert left == [L_CODES[d] for d in (0, 1, 2, 3, 4, 5)]

    def test_code_tables(self):
        """Test R and G derivation for digit 0."""
        assert R_CODES[0] == "1110010"
        assert G_CODES[0] == "0100111"

    def test_invalid_code(self):
        """Test rejection of malformed codes."""
        with pytest.raises(ValueError):
            module_pattern("12345")


class TestRender:
    """Tests for rendered samples and masks."""

    def test_scanline_length(self):
        """Test module width and quiet zone scaling."""
        assert render_scanline("9310232954790", module_width=3, quiet_zone=5).size == (95 + 10) * 3

    def test_mask_shape(self):
        """Test mask dimensions and values."""
        mask = render_mask("9310232954790", module_width=2, height=15)
        assert mask.shape == (15, 230)
        assert set(mask.ravel().tolist()) == {0, 1}

    def test_invalid_module_width(self):
        """Test rejection of zero module width."""
        with pytest.raises(ValueError):
            render_scanline("9310232954790", module_width=0)
