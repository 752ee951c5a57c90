"""
Color space conversions for catalog colors.

Converts between hex strings, 8-bit sRGB, CIE XYZ and CIE L*a*b* using the
D65 reference white. Every function is total: malformed hex input yields
None instead of raising, so callers can fall back to a default family.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from loguru import logger


@dataclass(frozen=True)
class RGB:
    """8-bit sRGB color, channels in [0, 255]."""
    r: int
    g: int
    b: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class XYZ:
    """CIE XYZ tristimulus values normalized so that Y of white is 1."""
    X: float
    Y: float
    Z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.X, self.Y, self.Z)


@dataclass(frozen=True)
class LAB:
    """CIE L*a*b* color (D65). L in [0, 100], a/b signed."""
    L: float
    a: float
    b: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.L, self.a, self.b)


# D65 reference white
D65_WHITE = XYZ(0.95047, 1.00000, 1.08883)

# Linear sRGB -> XYZ (D65)
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

# XYZ -> linear sRGB (D65)
XYZ_TO_SRGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])

_EPSILON = (6 / 29) ** 3
_KAPPA = 3 * (6 / 29) ** 2
_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{6}")


def hex_to_rgb(hex_color: Optional[str]) -> Optional[RGB]:
    """
    Parse a #RRGGBB (or RRGGBB) string.
    
    Returns:
        RGB color, or None unless exactly 6 hex digits remain after
        stripping a single leading '#'
    """
    if not hex_color or not isinstance(hex_color, str):
        return None
    digits = hex_color[1:] if hex_color.startswith('#') else hex_color
    if not _HEX_PATTERN.fullmatch(digits):
        logger.debug(f"Rejected malformed hex color {hex_color!r}")
        return None
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    """Format an RGB color as upper-case #RRGGBB, clamping channels to [0, 255]."""
    r, g, b = [max(0, min(255, int(c))) for c in rgb.as_tuple()]
    return f"#{r:02X}{g:02X}{b:02X}"


def srgb_to_linear(u: float) -> float:
    """sRGB gamma decode of a channel in [0, 1]."""
    return u / 12.92 if u <= 0.04045 else ((u + 0.055) / 1.055) ** 2.4


def linear_to_srgb(u: float) -> float:
    """sRGB gamma encode of a linear channel."""
    return 12.92 * u if u <= 0.0031308 else 1.055 * u ** (1 / 2.4) - 0.055


def rgb_to_xyz(rgb: RGB) -> XYZ:
    """Convert 8-bit sRGB to XYZ (D65)."""
    linear = np.array([srgb_to_linear(c / 255) for c in rgb.as_tuple()])
    X, Y, Z = SRGB_TO_XYZ @ linear
    return XYZ(float(X), float(Y), float(Z))


def _f(t: float) -> float:
    return float(np.cbrt(t)) if t > _EPSILON else t / _KAPPA + 4 / 29


def _f_inv(u: float) -> float:
    cube = u * u * u
    return cube if cube > _EPSILON else _KAPPA * (u - 4 / 29)


def xyz_to_lab(xyz: XYZ) -> LAB:
    """Convert XYZ to CIE L*a*b* against the D65 reference white."""
    fx = _f(xyz.X / D65_WHITE.X)
    fy = _f(xyz.Y / D65_WHITE.Y)
    fz = _f(xyz.Z / D65_WHITE.Z)
    return LAB(116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def lab_to_xyz(lab: LAB) -> XYZ:
    """Inverse of xyz_to_lab."""
    fy = (lab.L + 16) / 116
    fx = lab.a / 500 + fy
    fz = fy - lab.b / 200
    return XYZ(
        D65_WHITE.X * _f_inv(fx),
        D65_WHITE.Y * _f_inv(fy),
        D65_WHITE.Z * _f_inv(fz),
    )


def xyz_to_rgb(xyz: XYZ) -> RGB:
    """Convert XYZ (D65) to 8-bit sRGB; out-of-gamut channels are clamped."""
    linear = XYZ_TO_SRGB @ np.array(xyz.as_tuple())
    channels = [
        round(min(1.0, max(0.0, linear_to_srgb(float(c)))) * 255)
        for c in linear
    ]
    return RGB(*channels)


def hex_to_lab(hex_color: Optional[str]) -> Optional[LAB]:
    """Convert a hex string straight to LAB, or None if the hex is malformed."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_hex(lab: LAB) -> str:
    """Convert LAB to the nearest in-gamut #RRGGBB."""
    return rgb_to_hex(xyz_to_rgb(lab_to_xyz(lab)))


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def lab_from_partial(hex: Optional[str] = None,
                     labL: Optional[float] = None,
                     labA: Optional[float] = None,
                     labB: Optional[float] = None) -> Optional[LAB]:
    """
    Resolve a LAB color from a catalog color record.
    
    A complete numeric LAB triple takes precedence over the hex value.
    
    Returns:
        LAB color, or None when neither source is usable
    """
    if _is_number(labL) and _is_number(labA) and _is_number(labB):
        return LAB(float(labL), float(labA), float(labB))
    if hex:
        return hex_to_lab(hex)
    return None
