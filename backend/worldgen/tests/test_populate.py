"""Tests for weighted content population."""

import unittest


def _entry(definition_id, weight, low=1, high=10, biome_id="wilderness"):
    from worldgen.base import PoolEntry

    return PoolEntry(biome_id, definition_id, weight, low, high)


class TestWeightedSample(unittest.TestCase):
    """Sampling without replacement, proportional to weight."""

    def test_distinct_picks(self):
        """No entry is drawn twice."""
        from worldgen.populate import weighted_sample
        from worldgen.rng import stream

        pool = [_entry(name, 1) for name in "abcde"]
        picks = weighted_sample(stream(4), pool, 5)
        self.assertEqual(sorted(p.definition_id for p in picks), list("abcde"))

    def test_count_capped_by_pool(self):
        """Asking for more than the pool holds returns the whole pool."""
        from worldgen.populate import weighted_sample
        from worldgen.rng import stream

        self.assertEqual(len(weighted_sample(stream(1), [_entry("a", 2)], 3)), 1)

    def test_zero_weight_never_drawn(self):
        """Non-positive weights are excluded."""
        from worldgen.populate import weighted_sample
        from worldgen.rng import stream

        pool = [_entry("never", 0), _entry("negative", -1), _entry("always", 1)]
        for seed in range(50):
            picks = weighted_sample(stream(seed), pool, 3)
            self.assertEqual([p.definition_id for p in picks], ["always"])

    def test_heavier_entries_win_more(self):
        """Over many draws a heavy entry is picked first far more often."""
        from worldgen.populate import weighted_sample
        from worldgen.rng import coord_seed, stream

        pool = [_entry("light", 1), _entry("heavy", 9)]
        seeds = [coord_seed(x, y, 0) for x in range(25) for y in range(20)]
        heavy = sum(
            1 for seed in seeds if weighted_sample(stream(seed), pool, 1)[0].definition_id == "heavy"
        )
        self.assertGreater(heavy, 350)


class TestContentPopulator(unittest.TestCase):
    """Rooms are stocked from their biome's pools."""

    def _populator(self, **pools):
        from worldgen.catalog import DefinitionCatalog
        from worldgen.populate import ContentPopulator

        return ContentPopulator(DefinitionCatalog(**pools))

    def test_deterministic(self):
        """Same biome, difficulty and seed give the same contents."""
        populator = self._populator()
        for seed in range(25):
            self.assertEqual(
                populator.populate("caves", 4, seed), self._populator().populate("caves", 4, seed)
            )

    def test_contents_come_from_biome_pool(self):
        """Every placed id is in the room biome's pool."""
        from worldgen.catalog import ENEMY, ITEM, RESOURCE, DefinitionCatalog

        catalog = DefinitionCatalog()
        populator = self._populator()
        for seed in range(40):
            contents = populator.populate("ruins", 6, seed)
            for kind, ids in [
                (ITEM, contents.items),
                (ENEMY, contents.enemies),
                (RESOURCE, contents.resource_nodes),
            ]:
                allowed = {e.definition_id for e in catalog.get_pool(kind, "ruins")}
                self.assertTrue(set(ids) <= allowed, (kind, ids))
                self.assertEqual(len(ids), len(set(ids)))

    def test_difficulty_filters_enemies(self):
        """Enemies outside their difficulty band never spawn."""
        populator = self._populator(enemy_pool=[_entry("low", 1, 1, 2), _entry("high", 1, 8, 10)])
        for seed in range(60):
            self.assertNotIn("high", populator.select_enemies("wilderness", 1, seed))
            self.assertNotIn("low", populator.select_enemies("wilderness", 9, seed))

    def test_resources_ignore_difficulty(self):
        """Resource nodes are placed regardless of the band on the entry."""
        from worldgen.rng import coord_seed

        populator = self._populator(resource_pool=[_entry("tree", 1, 5, 5)])
        placed = [populator.select_resources("wilderness", coord_seed(x, 1, 0)) for x in range(60)]
        self.assertIn(["tree"], placed)

    def test_empty_pool(self):
        """A biome with no pool entries gets nothing."""
        populator = self._populator(item_pool=[], enemy_pool=[], resource_pool=[])
        contents = populator.populate("wilderness", 3, 42)
        self.assertEqual(contents.items, ())
        self.assertEqual(contents.enemies, ())
        self.assertEqual(contents.resource_nodes, ())


if __name__ == "__main__":
    unittest.main()
