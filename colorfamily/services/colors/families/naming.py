"""
Family codes, name-based family overrides and SKU sequencing.

SKUs are built from a 2-letter family code and a zero-padded sequence
(VM001). The code table is part of the SKU contract: Rosa keeps MG from the
time the family was labelled Magenta.
"""

import re
from typing import Iterable, Optional

from loguru import logger

from colorfamily.config import Config, config
from . import FAMILY_NAMES, FAMILY_TOKENS, NO_FAMILY, infer_family_from
from .boundaries import HueBoundaries


FAMILY_CODES = {
    'Vermelho': 'VM',
    'Laranja': 'LJ',
    'Amarelo': 'AM',
    'Verde': 'VD',
    'Azul': 'AZ',
    'Roxo': 'RX',
    'Rosa': 'MG',
    'Bordô': 'BO',
    'Marrom': 'MR',
    'Bege': 'BG',
    'Cinza': 'CZ',
    'Preto': 'PT',
    'Branco': 'BR',
}

FAMILY_SYNONYMS = {
    'ciano': 'Azul',
    'magenta': 'Rosa',
    'rosa': 'Rosa',
}

_NUMERIC_TOKEN = re.compile(r"[0-9]+")
_LEADING_FAMILY = re.compile(
    r"^(" + "|".join(re.escape(token) for token in FAMILY_TOKENS) + r")(?:\s+|$)",
    re.IGNORECASE,
)


def normalize_family_name(name: Optional[str]) -> str:
    """Collapse synonyms (Ciano -> Azul, Magenta -> Rosa); other names pass through."""
    key = (name or '').strip().lower()
    return FAMILY_SYNONYMS.get(key, name or '')


def family_code_for(family_name: Optional[str]) -> str:
    """
    Get the 2-letter SKU prefix for a family.
    
    Canonical families use the fixed table. Custom families use their first
    two letters upper-cased, a single letter is padded with X and an empty
    name maps to OT.
    """
    norm = normalize_family_name(family_name)
    for canonical in FAMILY_NAMES:
        if canonical.lower() == norm.lower():
            return FAMILY_CODES[canonical]

    s = norm.strip()
    if len(s) == 0:
        return 'OT'
    if len(s) == 1:
        return s.upper() + 'X'
    return s[:2].upper()


def detect_family_from_name(name: Optional[str]) -> Optional[str]:
    """
    Take the family from the first word of a color name.
    
    Args:
        name: Name as typed by the user, e.g. "Amarelo Sol"
        
    Returns:
        Canonical family for a known token, the capitalized first word as a
        new family otherwise, or None for empty or purely numeric names
    """
    s = (name or '').strip()
    if not s:
        return None

    first_word = s.split()[0]
    if _NUMERIC_TOKEN.fullmatch(first_word):
        return None

    lowered = first_word.lower()
    for token in FAMILY_TOKENS:
        if lowered == token.lower():
            return normalize_family_name(token)

    return first_word[0].upper() + first_word[1:].lower()


def resolve_family(name: Optional[str] = None,
                   hex: Optional[str] = None,
                   labL: Optional[float] = None,
                   labA: Optional[float] = None,
                   labB: Optional[float] = None,
                   bounds: Optional[HueBoundaries] = None,
                   fallback: Optional[str] = None) -> str:
    """
    Pick the family used for a new catalog color's SKU.
    
    The typed name wins; otherwise the family is inferred from the color and
    an unclassifiable color gets the fallback family.
    """
    from_name = detect_family_from_name(name)
    if from_name:
        return from_name

    inferred = infer_family_from(hex=hex, labL=labL, labA=labA, labB=labB, bounds=bounds)
    if inferred and inferred != NO_FAMILY:
        return inferred

    fallback = fallback or config.FALLBACK_FAMILY
    logger.debug(f"No family for name={name!r} hex={hex!r}, using {fallback}")
    return fallback


def next_sku(code: str, existing_skus: Iterable[str], digits: Optional[int] = None) -> str:
    """
    Next SKU in a family's sequence.
    
    Args:
        code: 2-letter family code
        existing_skus: SKUs already in the catalog, any family
        digits: Zero-padding of the sequence number
        
    Returns:
        code followed by the highest existing sequence plus one (VM001, VM002...)

    Raises:
        ValueError: if digits is outside 1-8
    """
    if digits is None:
        digits = config.SKU_DIGITS
    if not Config.validate_sku_digits(digits):
        raise ValueError(f"SKU digits must be between 1 and 8, got {digits!r}")

    max_seq = 0
    for sku in existing_skus:
        if not sku or not sku.startswith(code):
            continue
        match = re.match(r"\d+", sku[len(code):])
        if match:
            max_seq = max(max_seq, int(match.group()))

    return f"{code}{max_seq + 1:0{digits}d}"


def display_name(name: Optional[str], family: Optional[str] = None) -> str:
    """
    Catalog display name: the family followed by the rest of the typed name.
    
    Any family token the user already typed at the start is replaced by the
    resolved family, so "ciano claro" shows as "Azul claro".
    """
    trimmed = (name or '').strip()
    if family is None:
        family = detect_family_from_name(trimmed) or config.FALLBACK_FAMILY
    if family == NO_FAMILY:
        return trimmed

    rest = _LEADING_FAMILY.sub('', trimmed, count=1).strip()
    if rest == trimmed:
        # Custom families are their own first word
        words = trimmed.split(None, 1)
        if words and words[0].lower() == family.lower():
            rest = words[1] if len(words) > 1 else ''
    return f"{family} {rest}" if rest else family
