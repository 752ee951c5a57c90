"""
White balance compensation for colorimeter readings.

The device calibration cap reads slightly green/blue; readings are shifted by
the offset between that cap and a neutral white of the same lightness.
"""

from .conversions import LAB


# LAB reading of the device calibration cap
DEVICE_WHITE_POINT = LAB(96.78, -0.48, -0.09)

# Neutral reference; L is kept at the sensor value so luminance is not stretched
TARGET_WHITE = LAB(96.78, 0.0, 0.0)


def white_balance_offset() -> LAB:
    """Per-channel offset added to every raw reading."""
    return LAB(
        TARGET_WHITE.L - DEVICE_WHITE_POINT.L,
        TARGET_WHITE.a - DEVICE_WHITE_POINT.a,
        TARGET_WHITE.b - DEVICE_WHITE_POINT.b,
    )


def compensate_lab(raw: LAB) -> LAB:
    """
    Apply white point compensation to a raw LAB reading.
    
    Args:
        raw: LAB value as read by the device
        
    Returns:
        Compensated LAB with L clamped to [0, 100] and every channel
        rounded to 2 decimals
    """
    delta = white_balance_offset()
    return LAB(
        round(min(100.0, max(0.0, raw.L + delta.L)), 2),
        round(raw.a + delta.a, 2),
        round(raw.b + delta.b, 2),
    )
