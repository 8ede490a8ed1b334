"""Weighted selection of items, enemies and resource nodes for a room."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .base import PoolEntry, WildernessContents
from .catalog import ENEMY, ITEM, RESOURCE, DefinitionCatalog
from .config import ContentRules, CountRule
from .rng import RandomStream, SeedOffset, offset_seed, stream

logger = logging.getLogger(__name__)


def weighted_sample(rng: RandomStream, pool: Sequence[PoolEntry], count: int) -> List[PoolEntry]:
    """Draw up to ``count`` distinct entries, each with probability proportional to weight.

    Entries with non-positive weight are never drawn.  Runs in
    O(count * len(pool)).
    """
    remaining = [entry for entry in pool if entry.spawn_weight > 0]
    chosen: List[PoolEntry] = []
    while remaining and len(chosen) < count:
        total = sum(entry.spawn_weight for entry in remaining)
        cursor = rng() * total
        index = len(remaining) - 1
        for i, entry in enumerate(remaining):
            cursor -= entry.spawn_weight
            if cursor <= 0:
                index = i
                break
        chosen.append(remaining.pop(index))
    return chosen


def roll_count(rng: RandomStream, rule: CountRule) -> int:
    if rng() < rule.empty_chance:
        return 0
    return rule.minimum + int(rng() * rule.spread)


class ContentPopulator:
    """Fill a wilderness room from its biome's spawn pools."""

    def __init__(self, catalog: DefinitionCatalog, rules: Optional[ContentRules] = None):
        self._catalog = catalog
        self._rules = rules or ContentRules()

    def _select(
        self,
        kind: str,
        biome_id: str,
        difficulty: Optional[int],
        rule: CountRule,
        seed: int,
        count_offset: int,
        pick_offset: int,
    ) -> List[str]:
        pool = self._catalog.get_pool(kind, biome_id)
        if difficulty is not None:
            pool = [entry for entry in pool if entry.allows(difficulty)]
        count = roll_count(stream(offset_seed(seed, count_offset)), rule)
        if count == 0 or not pool:
            return []
        picks = weighted_sample(stream(offset_seed(seed, pick_offset)), pool, count)
        return [entry.definition_id for entry in picks]

    def select_items(self, biome_id: str, difficulty: int, seed: int) -> List[str]:
        return self._select(
            ITEM,
            biome_id,
            difficulty,
            self._rules.items,
            seed,
            SeedOffset.ITEM_COUNT,
            SeedOffset.ITEM_PICK,
        )

    def select_enemies(self, biome_id: str, difficulty: int, seed: int) -> List[str]:
        return self._select(
            ENEMY,
            biome_id,
            difficulty,
            self._rules.enemies,
            seed,
            SeedOffset.ENEMY_COUNT,
            SeedOffset.ENEMY_PICK,
        )

    def select_resources(self, biome_id: str, seed: int) -> List[str]:
        # Resources ignore difficulty.
        return self._select(
            RESOURCE,
            biome_id,
            None,
            self._rules.resources,
            seed,
            SeedOffset.RESOURCE_COUNT,
            SeedOffset.RESOURCE_PICK,
        )

    def populate(self, biome_id: str, difficulty: int, seed: int) -> WildernessContents:
        contents = WildernessContents(
            items=tuple(self.select_items(biome_id, difficulty, seed)),
            enemies=tuple(self.select_enemies(biome_id, difficulty, seed)),
            resource_nodes=tuple(self.select_resources(biome_id, seed)),
        )
        logger.debug(
            f"Populated {biome_id} (difficulty {difficulty}): "
            f"{len(contents.items)} items, {len(contents.enemies)} enemies, "
            f"{len(contents.resource_nodes)} resources"
        )
        return contents
