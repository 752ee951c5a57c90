"""
Ordered family classification rules.

Each rule is a (name, predicate, family) entry evaluated top to bottom; the
first predicate that holds decides the family. Thresholds were tuned against
reported catalog colors and their order matters near sector borders, so
entries must not be reordered or merged.
"""

import math
from dataclasses import dataclass
from typing import Callable, List

from ..conversions import LAB


def lab_hue_angle(lab: LAB) -> float:
    """Hue angle of the a*b* vector in degrees, normalized to [0, 360)."""
    angle = math.degrees(math.atan2(lab.b, lab.a))
    if angle < 0:
        angle += 360
    # -0.0 and tiny negatives can round up to exactly 360; NaN passes through
    return 0.0 if angle >= 360 else angle


@dataclass(frozen=True)
class ColorFeatures:
    """Derived quantities every rule reads."""
    L: float
    a: float
    b: float
    hue: float
    chroma: float
    light: float

    @classmethod
    def from_lab(cls, lab: LAB) -> "ColorFeatures":
        return cls(
            L=lab.L,
            a=lab.a,
            b=lab.b,
            hue=lab_hue_angle(lab),
            chroma=math.sqrt(lab.a * lab.a + lab.b * lab.b),
            light=lab.L / 100,
        )

    @property
    def ratio(self) -> float:
        """b*/a*, following IEEE semantics when a* is zero."""
        if self.a == 0:
            return math.nan if self.b == 0 else math.copysign(math.inf, self.b)
        return self.b / self.a


@dataclass(frozen=True)
class FamilyRule:
    name: str
    predicate: Callable[[ColorFeatures], bool]
    family: str


def _deep_purple(c: ColorFeatures) -> bool:
    if not (310 <= c.hue < 350 and c.b < 0 and c.chroma >= 15):
        return False
    # Burgundy wines sit just below 350° with b* barely negative (#762F55)
    if c.hue > 347 and c.b > -8 and c.chroma < 37:
        return False
    return c.light < 0.55 or c.ratio < -0.35


def _vibrant_dark_pink(c: ColorFeatures) -> bool:
    return ((c.hue > 345 or c.hue < 20) and c.chroma >= 50
            and 0.25 <= c.light <= 0.50 and c.a > 45 and c.ratio < 0.35)


def _bordo(c: ColorFeatures) -> bool:
    return (c.light < 0.40 and (c.hue >= 345 or c.hue < 25) and c.a > 18 and c.b >= 0
            and 18 <= c.chroma <= 60 and abs(c.b) < c.a * 0.5)


def _bordo_desaturated(c: ColorFeatures) -> bool:
    return (c.light < 0.35 and (c.hue >= 350 or c.hue < 20) and 7 < c.a < 20
            and 0 <= c.b <= 10 and 6 <= c.chroma <= 20)


def _light_rosa(c: ColorFeatures) -> bool:
    if not (c.a > 12 and c.b >= 0 and (c.hue < 40 or c.hue > 340) and c.light > 0.45):
        return False
    # Aged rose near the 35–40° border (#C29188)
    if (33 <= c.hue < 40 and c.b <= 12.2 and 18 < c.chroma < 26
            and 0.58 <= c.light <= 0.71):
        return True
    if c.ratio >= 0.65:
        return False
    if 20 <= c.hue < 40:
        return c.light > 0.70
    return c.b < 15 or c.chroma < 30


def _warm_red(c: ColorFeatures) -> bool:
    return (20 <= c.hue < 40 and c.chroma >= 45 and c.a >= 40 and c.ratio <= 0.80
            and 0.20 <= c.light <= 0.65)


def _bege(c: ColorFeatures) -> bool:
    if not (5 <= c.chroma < 25 and c.light > 0.55 and 30 <= c.hue < 105):
        return False
    # Terracotta and coral stay chromatic
    return not (30 <= c.hue < 40 and c.chroma > 18)


def _marrom(c: ColorFeatures) -> bool:
    return c.light < 0.50 and 20 <= c.hue < 65


def _marrom_earthy(c: ColorFeatures) -> bool:
    return 0.50 <= c.light < 0.60 and 55 <= c.hue < 65 and c.chroma < 32


def _marrom_dark_olive(c: ColorFeatures) -> bool:
    return (c.light < 0.48 and 65 <= c.hue < 100 and 8 <= c.chroma < 24
            and (abs(c.a) <= 6 or (c.a <= 10 and c.b >= 12)))


def _dark_blue(c: ColorFeatures) -> bool:
    return c.light < 0.20 and c.b < -5 and abs(c.b) > abs(c.a)


# Chroma below which a color carries no usable hue
ACHROMATIC_CHROMA = 5

ACHROMATIC_RULES: List[FamilyRule] = [
    FamilyRule("achromatic_white", lambda c: c.light >= 0.91, "Branco"),
    FamilyRule("achromatic_black", lambda c: c.light <= 0.10, "Preto"),
    FamilyRule("achromatic_gray", lambda c: True, "Cinza"),
]

HEURISTIC_RULES: List[FamilyRule] = [
    FamilyRule("deep_purple", _deep_purple, "Roxo"),
    FamilyRule("vibrant_dark_pink", _vibrant_dark_pink, "Rosa"),
    FamilyRule("bordo", _bordo, "Bordô"),
    FamilyRule("bordo_desaturated", _bordo_desaturated, "Bordô"),
    FamilyRule("light_rosa", _light_rosa, "Rosa"),
    FamilyRule("warm_red", _warm_red, "Vermelho"),
    FamilyRule("bege", _bege, "Bege"),
    FamilyRule("marrom", _marrom, "Marrom"),
    FamilyRule("marrom_earthy", _marrom_earthy, "Marrom"),
    FamilyRule("marrom_dark_olive", _marrom_dark_olive, "Marrom"),
    FamilyRule("dark_blue", _dark_blue, "Azul"),
]
