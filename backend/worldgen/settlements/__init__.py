"""Settlement pipeline: settlement, then NPCs, then buildings, then quests.

Each stage is a pure function of the settlement's coordinate seeds and the
output of the stages before it, so running the pipeline twice for the same
coordinate gives identical results.

Usage:
    from worldgen.settlements import SettlementPipeline
    contents = SettlementPipeline().run(7, 0, 0, "village")
"""

from __future__ import annotations

import logging

from .base import SettlementContents
from .building import generate_buildings
from .npc import generate_npcs
from .quest import generate_quests
from .settlement import generate_settlement, preview_name

logger = logging.getLogger(__name__)

__all__ = ["SettlementPipeline", "SettlementContents", "preview_name"]


class SettlementPipeline:
    """Runs the four settlement stages for one coordinate."""

    def run(self, x: int, y: int, z: int, size: str) -> SettlementContents:
        settlement = generate_settlement(x, y, z, size)
        npcs = generate_npcs(settlement)
        buildings, npcs = generate_buildings(settlement, npcs)
        quests = generate_quests(settlement, npcs)
        logger.info(
            f"Settlement {settlement.name} ({size}) at ({x}, {y}, {z}): "
            f"{len(npcs)} NPCs, {len(buildings)} buildings, {len(quests)} quests"
        )
        return SettlementContents(
            settlement=settlement,
            npcs=tuple(npcs),
            buildings=tuple(buildings),
            quests=tuple(quests),
        )
