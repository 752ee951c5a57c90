"""
Unit tests for device white balance compensation.
"""

import pytest

from colorfamily.services.colors.conversions import LAB
from colorfamily.services.colors.white_balance import (
    DEVICE_WHITE_POINT, TARGET_WHITE, compensate_lab, white_balance_offset
)


class TestCompensateLab:
    """Test white point offset application"""
    
    def test_offset(self):
        offset = white_balance_offset()
        assert offset.L == pytest.approx(0.0)
        assert offset.a == pytest.approx(0.48)
        assert offset.b == pytest.approx(0.09)
    
    def test_device_white_becomes_neutral(self):
        """The calibration cap reading maps onto the neutral target"""
        assert compensate_lab(DEVICE_WHITE_POINT) == TARGET_WHITE
    
    def test_shift_and_rounding(self):
        result = compensate_lab(LAB(50.123, 10.0, -20.0))
        assert result == LAB(50.12, 10.48, -19.91)
    
    def test_lightness_is_clamped(self):
        assert compensate_lab(LAB(120.0, 0.0, 0.0)).L == 100.0
        assert compensate_lab(LAB(-3.0, 0.0, 0.0)).L == 0.0
    
    def test_deterministic(self):
        raw = LAB(42.5, -3.3, 7.7)
        assert compensate_lab(raw) == compensate_lab(raw)
