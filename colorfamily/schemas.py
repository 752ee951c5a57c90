"""
Color Family Engine Schemas
Pydantic models for the plain data exchanged with the catalog and settings.
"""
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from colorfamily.config import Config, config
from colorfamily.services.colors.conversions import LAB, lab_from_partial
from colorfamily.services.colors.families import get_hue_boundaries, set_hue_boundaries
from colorfamily.services.colors.families.boundaries import HueBoundaries
from colorfamily.services.colors.families.naming import family_code_for, resolve_family
from colorfamily.utils.logging import get_logger


class ColorInput(BaseModel):
    """A catalog color as entered by the user."""
    name: str = Field(..., description="Name as typed; its first word may name the family")
    hex: Optional[str] = Field(None, description="Color as #RRGGBB")
    labL: Optional[float] = Field(None, description="Measured L*")
    labA: Optional[float] = Field(None, description="Measured a*")
    labB: Optional[float] = Field(None, description="Measured b*")

    def lab(self) -> Optional[LAB]:
        """LAB of this color, preferring the measured triple over hex."""
        return lab_from_partial(hex=self.hex, labL=self.labL, labA=self.labA, labB=self.labB)

    def family(self, bounds: Optional[HueBoundaries] = None) -> str:
        """Family used for this color's SKU."""
        return resolve_family(self.name, hex=self.hex, labL=self.labL, labA=self.labA,
                              labB=self.labB, bounds=bounds)

    def family_code(self, bounds: Optional[HueBoundaries] = None) -> str:
        """2-letter SKU prefix for this color."""
        return family_code_for(self.family(bounds))


class EngineSettings(BaseModel):
    """Engine settings as saved by the catalog application."""
    model_config = ConfigDict(populate_by_name=True)

    delta_threshold: float = Field(
        default_factory=lambda: config.DELTA_E_THRESHOLD,
        alias="deltaThreshold",
        description="ΔE00 below which two colors are flagged as conflicting"
    )
    hue_boundaries: Optional[Dict[str, float]] = Field(
        None,
        alias="hueBoundaries",
        description="Partial hue boundaries; missing keys keep their current value"
    )

    @field_validator("delta_threshold")
    @classmethod
    def check_delta_threshold(cls, v: float) -> float:
        if not Config.validate_delta_threshold(v):
            raise ValueError(f"deltaThreshold must be in (0, 100], got {v}")
        return v

    @field_validator("hue_boundaries")
    @classmethod
    def check_hue_boundaries(cls, v: Optional[Dict[str, float]]) -> Optional[Dict[str, float]]:
        if v is None:
            return v
        for key, degrees in v.items():
            if not Config.validate_hue_angle(degrees):
                raise ValueError(f"{key} must be in [0, 360), got {degrees}")
        return v

    def apply(self) -> HueBoundaries:
        """Push the hue boundaries into the process-wide store."""
        if self.hue_boundaries:
            bounds = set_hue_boundaries(self.hue_boundaries)
        else:
            bounds = get_hue_boundaries()
        get_logger().info("Engine settings applied", extra={"delta_threshold": self.delta_threshold})
        return bounds

    @classmethod
    def current(cls, delta_threshold: Optional[float] = None) -> "EngineSettings":
        """Snapshot of the active settings, ready to be saved."""
        return cls(
            delta_threshold=delta_threshold if delta_threshold is not None else config.DELTA_E_THRESHOLD,
            hue_boundaries=get_hue_boundaries().model_dump(by_alias=True),
        )
