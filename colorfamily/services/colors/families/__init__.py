"""
Color family classification.

Classifies a LAB color into a named family (Vermelho, Azul, Bordô, ...).
Achromatic colors are split by lightness, then an ordered chain of tuned
rules handles the families that hue alone cannot separate (Bordô, Marrom,
Bege, purples and pinks near red), and finally the hue angle is matched
against the configurable sectors in HueBoundaries.
"""

import math
from typing import Optional, Tuple

from loguru import logger

from ..conversions import LAB, lab_from_partial
from .boundaries import (
    HueBoundaries, DEFAULT_HUE_BOUNDS, get_hue_boundaries, set_hue_boundaries, reset_hue_boundaries
)
from .rules import (
    ColorFeatures, ACHROMATIC_CHROMA, ACHROMATIC_RULES, HEURISTIC_RULES, lab_hue_angle
)


# Returned when no family can be inferred
NO_FAMILY = '—'

FAMILY_NAMES = [
    'Vermelho', 'Laranja', 'Amarelo', 'Verde', 'Azul', 'Roxo', 'Rosa',
    'Bordô', 'Marrom', 'Bege', 'Cinza', 'Preto', 'Branco'
]

# Tokens accepted at the start of a color name; Ciano and Magenta are synonyms
FAMILY_TOKENS = FAMILY_NAMES + ['Ciano', 'Magenta']


def in_arc(start: float, end: float, value: float) -> bool:
    """Half-open arc test [start, end); start > end means the arc crosses 0°."""
    if start <= end:
        return start <= value < end
    return value >= start or value < end


def sector_family(hue: float, bounds: HueBoundaries) -> str:
    """
    Match a hue against the boundary sectors.
    
    Verde ends at verde_end and Azul starts at azul_start, so a gap between
    them is left unclassified and an overlap resolves to Verde.
    """
    sectors = [
        ('Vermelho', bounds.vermelho_start, bounds.laranja_start),
        ('Laranja', bounds.laranja_start, bounds.amarelo_start),
        ('Amarelo', bounds.amarelo_start, bounds.verde_start),
        ('Verde', bounds.verde_start, bounds.verde_end),
        ('Azul', bounds.azul_start, bounds.roxo_start),
        ('Roxo', bounds.roxo_start, bounds.magenta_start),
        ('Rosa', bounds.magenta_start, bounds.vermelho_start),
    ]
    for family, start, end in sectors:
        if in_arc(start, end, hue):
            return family
    return NO_FAMILY


def classify_lab_with_rule(lab: LAB, bounds: Optional[HueBoundaries] = None) -> Tuple[str, str]:
    """
    Classify a LAB color and report which rule decided it.
    
    Args:
        lab: Color to classify
        bounds: Sector boundaries; defaults to the process-wide snapshot
        
    Returns:
        (family, rule_name); rule_name is "sector" for the hue fallback
    """
    if bounds is None:
        bounds = get_hue_boundaries()

    features = ColorFeatures.from_lab(lab)
    if math.isnan(features.hue) or math.isnan(features.chroma):
        logger.debug("LAB has NaN components, no family")
        return NO_FAMILY, "sector"

    rules = ACHROMATIC_RULES if features.chroma < ACHROMATIC_CHROMA else HEURISTIC_RULES
    for rule in rules:
        if rule.predicate(features):
            return rule.family, rule.name

    family = sector_family(features.hue, bounds)
    if family == NO_FAMILY:
        logger.debug(f"Hue {features.hue:.2f}° falls outside every sector")
    return family, "sector"


def classify_lab(lab: LAB, bounds: Optional[HueBoundaries] = None) -> str:
    """Classify a LAB color into a family name, or NO_FAMILY."""
    return classify_lab_with_rule(lab, bounds)[0]


def infer_family_from(hex: Optional[str] = None,
                      labL: Optional[float] = None,
                      labA: Optional[float] = None,
                      labB: Optional[float] = None,
                      bounds: Optional[HueBoundaries] = None) -> str:
    """
    Infer the family of a catalog color from its LAB triple or hex value.
    
    Returns:
        Family name, or NO_FAMILY when there is no usable color data or the
        hue falls outside every sector
    """
    lab = lab_from_partial(hex=hex, labL=labL, labA=labA, labB=labB)
    if lab is None:
        logger.debug("No color data to infer a family from")
        return NO_FAMILY

    family, rule = classify_lab_with_rule(lab, bounds)
    logger.debug(f"LAB({lab.L:.2f}, {lab.a:.2f}, {lab.b:.2f}) -> {family} via {rule}")
    return family
