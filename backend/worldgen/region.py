"""Classify coordinates as wilderness or settlement locations.

Settlements sit on the surface (z == 0) wherever ``x + y`` is a multiple
of the settlement spacing.  Their size grows with the multiple: every
third settlement diagonal is a town, every ninth a city.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import WorldConfig

WILDERNESS = "wilderness"
SETTLEMENT = "settlement"


@dataclass(frozen=True)
class RegionInfo:
    kind: str
    settlement_size: Optional[str] = None

    @property
    def is_settlement(self) -> bool:
        return self.kind == SETTLEMENT


class WorldRegionClassifier:
    """Pure function of coordinates to region kind and settlement size."""

    def __init__(self, config: Optional[WorldConfig] = None):
        self._spacing = (config or WorldConfig()).settlement_spacing

    def classify(self, x: int, y: int, z: int) -> RegionInfo:
        if z != 0:
            return RegionInfo(WILDERNESS)
        total = x + y
        if total % self._spacing != 0:
            return RegionInfo(WILDERNESS)
        if total % (self._spacing * 9) == 0:
            return RegionInfo(SETTLEMENT, "city")
        if total % (self._spacing * 3) == 0:
            return RegionInfo(SETTLEMENT, "town")
        return RegionInfo(SETTLEMENT, "village")


class WildernessOnlyClassifier(WorldRegionClassifier):
    """Classifier that never places settlements."""

    def classify(self, x: int, y: int, z: int) -> RegionInfo:
        return RegionInfo(WILDERNESS)
