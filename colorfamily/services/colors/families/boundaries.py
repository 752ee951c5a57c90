"""
Hue sector boundaries for family classification.

The boundaries are an immutable pydantic model. The process-wide store only
ever swaps whole snapshots under a lock, so a classification that reads the
current boundaries once sees a consistent set even while settings change.
Sectors are not checked for gaps or overlaps; callers own their consistency.
"""

import threading
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from colorfamily.utils.logging import get_logger


class HueBoundaries(BaseModel):
    """Start angles (degrees, LAB a*b* plane) of each chromatic family sector."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    vermelho_start: float = Field(345.0, alias="vermelhoStart", description="Start of Vermelho (wraps through 0°)")
    laranja_start: float = Field(20.0, alias="laranjaStart", description="Start of Laranja, end of Vermelho")
    amarelo_start: float = Field(65.0, alias="amareloStart", description="Start of Amarelo, end of Laranja")
    verde_start: float = Field(95.0, alias="verdeStart", description="Start of Verde, end of Amarelo")
    verde_end: float = Field(170.0, alias="verdeEnd", description="End of Verde, independent of azulStart")
    azul_start: float = Field(170.0, alias="azulStart", description="Start of Azul")
    roxo_start: float = Field(270.0, alias="roxoStart", description="Start of Roxo, end of Azul")
    magenta_start: float = Field(310.0, alias="magentaStart", description="Start of Rosa, end of Roxo")


# Reference sectors: Vermelho 345–20 | Laranja 20–65 | Amarelo 65–95 | Verde 95–170
# Azul 170–270 | Roxo 270–310 | Rosa 310–345
DEFAULT_HUE_BOUNDS = HueBoundaries()

# Accept both snake_case field names and camelCase aliases
_FIELD_BY_KEY: Dict[str, str] = {
    key: name
    for name, field in HueBoundaries.model_fields.items()
    for key in (name, field.alias)
}


BoundaryUpdate = Union[HueBoundaries, Mapping[str, Any]]


def merge_hue_boundaries(base: HueBoundaries, partial: Optional[BoundaryUpdate] = None,
                         **changes: Any) -> HueBoundaries:
    """
    Return a new snapshot with the given keys replaced.
    
    Keys may use either the snake_case field names or the camelCase names
    used by exported settings. Unspecified keys keep their value from base.
    
    Raises:
        pydantic.ValidationError: for unknown keys or non-numeric angles
    """
    if isinstance(partial, HueBoundaries):
        partial = partial.model_dump()
    updates = dict(partial or {})
    updates.update(changes)

    merged = base.model_dump()
    for key, value in updates.items():
        merged[_FIELD_BY_KEY.get(key, key)] = value
    return HueBoundaries.model_validate(merged)


class HueBoundaryStore:
    """Copy-on-write holder of the current hue boundaries."""

    def __init__(self, initial: HueBoundaries = DEFAULT_HUE_BOUNDS):
        self._lock = threading.Lock()
        self._current = initial

    def get(self) -> HueBoundaries:
        return self._current

    def update(self, partial: Optional[BoundaryUpdate] = None, **changes: Any) -> HueBoundaries:
        with self._lock:
            self._current = merge_hue_boundaries(self._current, partial, **changes)
            current = self._current
        get_logger().info("Hue boundaries updated", extra=current.model_dump(by_alias=True))
        return current

    def reset(self) -> HueBoundaries:
        with self._lock:
            self._current = DEFAULT_HUE_BOUNDS
        get_logger().info("Hue boundaries reset to defaults")
        return DEFAULT_HUE_BOUNDS


# Global boundaries store
_store = HueBoundaryStore()


def get_hue_boundaries() -> HueBoundaries:
    """Current process-wide hue boundaries."""
    return _store.get()


def set_hue_boundaries(partial: Optional[BoundaryUpdate] = None, **changes: Any) -> HueBoundaries:
    """Merge-update the process-wide hue boundaries and return the new snapshot."""
    return _store.update(partial, **changes)


def reset_hue_boundaries() -> HueBoundaries:
    """Restore DEFAULT_HUE_BOUNDS."""
    return _store.reset()
