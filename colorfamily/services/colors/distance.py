"""
Perceptual color difference (CIEDE2000) and catalog conflict detection.

The ΔE00 implementation follows Bruce Lindbloom's formulation with
kL = kC = kH = 1. It is symmetric and exactly zero for identical inputs.
"""

import math
from typing import Hashable, Mapping, Optional, Tuple

from loguru import logger

from colorfamily.config import config
from .conversions import LAB


_POW25_7 = 25.0 ** 7


def _hue_prime(b: float, a_prime: float) -> float:
    return (math.degrees(math.atan2(b, a_prime)) + 360) % 360


def ciede2000(lab1: LAB, lab2: LAB) -> float:
    """
    Calculate the CIEDE2000 color difference between two LAB colors.
    
    Args:
        lab1: First color
        lab2: Second color
        
    Returns:
        ΔE00 >= 0
    """
    L1, a1, b1 = lab1.as_tuple()
    L2, a2, b2 = lab2.as_tuple()

    avg_Lp = (L1 + L2) / 2
    C1 = math.sqrt(a1 * a1 + b1 * b1)
    C2 = math.sqrt(a2 * a2 + b2 * b2)
    avg_C = (C1 + C2) / 2
    G = 0.5 * (1 - math.sqrt(avg_C ** 7 / (avg_C ** 7 + _POW25_7)))

    a1p = (1 + G) * a1
    a2p = (1 + G) * a2
    C1p = math.sqrt(a1p * a1p + b1 * b1)
    C2p = math.sqrt(a2p * a2p + b2 * b2)
    avg_Cp = (C1p + C2p) / 2

    h1p = _hue_prime(b1, a1p)
    h2p = _hue_prime(b2, a2p)

    dhp = h2p - h1p
    if dhp > 180:
        dhp -= 360
    if dhp < -180:
        dhp += 360

    dHp = 2 * math.sqrt(C1p * C2p) * math.sin(math.radians(dhp) / 2)
    dLp = L2 - L1
    dCp = C2p - C1p

    avg_Hp = h1p + h2p
    if abs(h1p - h2p) > 180:
        avg_Hp += 360
    avg_Hp /= 2

    T = (1
         - 0.17 * math.cos(math.radians(avg_Hp - 30))
         + 0.24 * math.cos(math.radians(2 * avg_Hp))
         + 0.32 * math.cos(math.radians(3 * avg_Hp + 6))
         - 0.20 * math.cos(math.radians(4 * avg_Hp - 63)))

    SL = 1 + (0.015 * (avg_Lp - 50) ** 2) / math.sqrt(20 + (avg_Lp - 50) ** 2)
    SC = 1 + 0.045 * avg_Cp
    SH = 1 + 0.015 * avg_Cp * T

    d_theta = 30 * math.exp(-((avg_Hp - 275) / 25) ** 2)
    RC = 2 * math.sqrt(avg_Cp ** 7 / (avg_Cp ** 7 + _POW25_7))
    RT = -RC * math.sin(math.radians(2 * d_theta))

    kL = kC = kH = 1.0
    term_L = dLp / (kL * SL)
    term_C = dCp / (kC * SC)
    term_H = dHp / (kH * SH)

    return math.sqrt(term_L ** 2 + term_C ** 2 + term_H ** 2 + RT * term_C * term_H)


def nearest_color(lab: LAB,
                  candidates: Mapping[Hashable, LAB],
                  exclude: Optional[Hashable] = None) -> Optional[Tuple[Hashable, float]]:
    """
    Find the candidate with the smallest ΔE00 to a color.
    
    Args:
        lab: Color under test
        candidates: Mapping of catalog key to LAB
        exclude: Key to skip (the color being edited)
        
    Returns:
        (key, delta_e) of the nearest candidate, or None if there is none
    """
    best_key = None
    best = math.inf
    for key, other in candidates.items():
        if exclude is not None and key == exclude:
            continue
        delta_e = ciede2000(lab, other)
        if delta_e < best:
            best = delta_e
            best_key = key

    if best_key is None:
        return None
    return best_key, best


def find_conflict(lab: LAB,
                  candidates: Mapping[Hashable, LAB],
                  threshold: Optional[float] = None,
                  exclude: Optional[Hashable] = None) -> Optional[Tuple[Hashable, float]]:
    """
    Report a near-duplicate catalog color.
    
    Returns:
        (key, delta_e) when the nearest candidate is strictly closer than
        the threshold, otherwise None
    """
    if threshold is None:
        threshold = config.DELTA_E_THRESHOLD

    nearest = nearest_color(lab, candidates, exclude=exclude)
    if nearest is None:
        return None

    key, delta_e = nearest
    if delta_e < threshold:
        logger.debug(f"Conflict: ΔE00 {delta_e:.2f} < threshold {threshold:.2f} (with {key})")
        return nearest
    return None
