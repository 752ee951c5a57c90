"""
Color Family Engine

Color space conversions, CIEDE2000 color difference and family
classification for SKU generation of a fabric color catalog.
"""

from colorfamily.services.colors.conversions import (
    RGB, XYZ, LAB, hex_to_rgb, rgb_to_hex, rgb_to_xyz, xyz_to_lab, lab_to_xyz,
    xyz_to_rgb, hex_to_lab, lab_to_hex, lab_from_partial
)
from colorfamily.services.colors.white_balance import (
    DEVICE_WHITE_POINT, TARGET_WHITE, compensate_lab
)
from colorfamily.services.colors.distance import ciede2000, nearest_color, find_conflict
from colorfamily.services.colors.families import (
    NO_FAMILY, FAMILY_NAMES, FAMILY_TOKENS, HueBoundaries, DEFAULT_HUE_BOUNDS,
    lab_hue_angle, in_arc, classify_lab, infer_family_from,
    get_hue_boundaries, set_hue_boundaries, reset_hue_boundaries
)
from colorfamily.services.colors.families.naming import (
    FAMILY_CODES, family_code_for, detect_family_from_name, resolve_family,
    next_sku, display_name
)
from colorfamily.utils.logging import configure_logging

__version__ = "1.0.0"
