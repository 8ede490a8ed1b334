"""Constraint-based biome selection, exit selection and difficulty.

Biome selection works like a single Wave Function Collapse step: the
candidate set starts as every biome and is narrowed by each
already-generated neighbor, then one candidate is drawn from the
coordinate's seeded stream.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .base import AdjacentRoomInfo
from .catalog import DefinitionCatalog
from .config import WorldConfig
from .coords import DIRECTIONS, OPPOSITE, Coordinates
from .rng import SeedOffset, offset_seed, shuffled, stream

logger = logging.getLogger(__name__)

# New exits opened by a wilderness room: 1 + floor(rng * NEW_EXIT_SPREAD)
NEW_EXIT_SPREAD = 3


class ConstraintBiomeSelector:
    """Pick a biome compatible with every generated neighbor."""

    def __init__(self, catalog: DefinitionCatalog, config: Optional[WorldConfig] = None):
        self._catalog = catalog
        self._config = config or WorldConfig()

    def candidates(self, neighbors: Iterable[AdjacentRoomInfo]) -> List[str]:
        """Biome ids compatible with all neighbors, in catalog order.

        Compatibility is checked in both directions.  Neighbors without a
        biome (settlements) do not constrain.  An empty result means the
        neighbors conflict.
        """
        biomes = self._catalog.get_all_biomes()
        candidates = [b.id for b in biomes]
        by_id = {b.id: b for b in biomes}
        for neighbor in neighbors:
            if neighbor.biome_id is None:
                continue
            neighbor_biome = by_id.get(neighbor.biome_id)
            if neighbor_biome is None:
                logger.warning(
                    f"Neighbor at {neighbor.coordinates} has unknown biome {neighbor.biome_id}"
                )
                continue
            candidates = [
                c
                for c in candidates
                if c in neighbor_biome.compatible and neighbor_biome.id in by_id[c].compatible
            ]
        return candidates

    def select_biome(
        self, coords: Coordinates, neighbors: Iterable[AdjacentRoomInfo], seed: int
    ) -> str:
        """Choose the biome id for ``coords``.

        An empty candidate set is widened to every biome rather than failing.
        """
        neighbors = list(neighbors)
        candidates = self.candidates(neighbors)
        if not candidates:
            logger.warning(
                f"No biome satisfies all {len(neighbors)} neighbors of {coords}; "
                f"falling back to all biomes"
            )
            candidates = self._catalog.biome_ids()
        if len(candidates) == 1:
            return candidates[0]
        rng = stream(offset_seed(seed, SeedOffset.BIOME))
        return candidates[int(rng() * len(candidates))]

    def calculate_difficulty(self, x: int, y: int, z: int) -> int:
        """Difficulty grows with Chebyshev distance from the origin and with depth."""
        config = self._config
        depth_bonus = min(config.max_depth_bonus, abs(z)) if z < 0 else 0
        difficulty = max(abs(x), abs(y)) // config.difficulty_scale + 1 + depth_bonus
        return max(1, min(config.max_difficulty, difficulty))


def forced_exit_directions(neighbors: Dict[str, AdjacentRoomInfo]) -> List[str]:
    """Directions toward neighbors that already have an exit back to this room."""
    return [
        direction
        for direction in DIRECTIONS
        if direction in neighbors and OPPOSITE[direction] in neighbors[direction].exit_directions
    ]


def open_directions(neighbors: Dict[str, AdjacentRoomInfo], allowed=DIRECTIONS) -> List[str]:
    """Directions whose neighbor has not been generated yet."""
    return [direction for direction in allowed if direction not in neighbors]


def select_exit_directions(neighbors: Dict[str, AdjacentRoomInfo], seed: int) -> List[str]:
    """Choose the exits of a wilderness room.

    Every neighbor that points here gets an exit back.  Between one and
    three further exits open toward ungenerated neighbors; a generated
    neighbor without a return exit is never connected, since it can no
    longer grow one.
    """
    exits = forced_exit_directions(neighbors)
    rng = stream(offset_seed(seed, SeedOffset.EXITS))
    wanted = 1 + int(rng() * NEW_EXIT_SPREAD)
    for direction in shuffled(rng, open_directions(neighbors))[:wanted]:
        exits.append(direction)
    return [d for d in DIRECTIONS if d in exits]
