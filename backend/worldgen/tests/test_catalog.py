"""Tests for the definition catalog and its override stores."""

import unittest
from decimal import Decimal
from os import environ

import boto3
from moto import mock_aws


class _FailingStore:
    def get_definition(self, kind, definition_id):
        raise ConnectionError("store unavailable")


class _DictStore:
    def __init__(self, records):
        self.records = records
        self.calls = 0

    def get_definition(self, kind, definition_id):
        self.calls += 1
        return self.records.get((kind, definition_id))



class _FlakyStore:
    def __init__(self, record):
        self.record = record
        self.calls = 0

    def get_definition(self, kind, definition_id):
        self.calls += 1
        if self.calls == 1:
            raise ConnectionError("store unavailable")
        return self.record

class TestStaticCatalog(unittest.TestCase):
    """Lookups against bundled data only."""

    def test_bundled_biomes_in_order(self):
        """The three bundled biomes come back in catalog order."""
        from worldgen.catalog import DefinitionCatalog

        catalog = DefinitionCatalog()
        self.assertEqual([b.id for b in catalog.get_all_biomes()], ["wilderness", "caves", "ruins"])
        self.assertEqual(catalog.biome_ids(), ["wilderness", "caves", "ruins"])

    def test_compatibility_is_symmetric(self):
        """Bundled compatibility lists agree in both directions."""
        from worldgen.catalog import DefinitionCatalog

        biomes = {b.id: b for b in DefinitionCatalog().get_all_biomes()}
        for biome in biomes.values():
            for other in biome.compatible:
                self.assertIn(biome.id, biomes[other].compatible)
        self.assertNotIn("ruins", biomes["caves"].compatible)

    def test_lookups(self):
        """Items, enemies and resources resolve by id; unknown ids give None."""
        from worldgen.catalog import DefinitionCatalog

        catalog = DefinitionCatalog()
        self.assertEqual(catalog.get_item("torch").name, "Torch")
        self.assertGreater(catalog.get_enemy("goblin").health, 0)
        self.assertIsNotNone(catalog.get_resource("oak_tree"))
        self.assertIsNone(catalog.get_item("no_such_item"))
        self.assertIsNone(catalog.get_biome("no_such_biome"))

    def test_pools_reference_known_definitions(self):
        """Every bundled pool entry points at a real definition."""
        from worldgen.catalog import ENEMY, ITEM, RESOURCE, DefinitionCatalog

        catalog = DefinitionCatalog()
        lookups = {ITEM: catalog.get_item, ENEMY: catalog.get_enemy, RESOURCE: catalog.get_resource}
        for biome_id in catalog.biome_ids():
            for kind, lookup in lookups.items():
                for entry in catalog.get_pool(kind, biome_id):
                    self.assertEqual(entry.biome_id, biome_id)
                    self.assertIsNotNone(lookup(entry.definition_id), entry.definition_id)


class TestOverrides(unittest.TestCase):
    """The override store wins; failures fall back silently."""

    def test_store_overrides_static(self):
        """A store record replaces the bundled definition."""
        from worldgen.catalog import DefinitionCatalog

        store = _DictStore(
            {
                ("item", "torch"): {
                    "id": "torch",
                    "name": "Everburning Torch",
                    "description": "It never goes out.",
                    "type": "tool",
                }
            }
        )
        catalog = DefinitionCatalog(store=store)
        self.assertEqual(catalog.get_item("torch").name, "Everburning Torch")
        self.assertEqual(catalog.get_item("rope").name, "Coil of Rope")

    def test_results_are_memoized(self):
        """Each definition is looked up in the store once."""
        from worldgen.catalog import DefinitionCatalog

        store = _DictStore({})
        catalog = DefinitionCatalog(store=store)
        catalog.get_enemy("goblin")
        catalog.get_enemy("goblin")
        self.assertEqual(store.calls, 1)

    def test_failing_store_falls_back(self):
        """A store that raises is treated as absent."""
        from worldgen.catalog import DefinitionCatalog

        catalog = DefinitionCatalog(store=_FailingStore())
        self.assertEqual(catalog.get_biome("caves").id, "caves")
        self.assertEqual(len(catalog.get_all_biomes()), 3)

    def test_store_error_is_not_memoized(self):
        """After a store error the next lookup asks the store again."""
        from worldgen.catalog import DefinitionCatalog

        store = _FlakyStore(
            {"id": "torch", "name": "Everburning Torch", "description": "It never goes out.", "type": "tool"}
        )
        catalog = DefinitionCatalog(store=store)
        self.assertEqual(catalog.get_item("torch").name, "Torch")
        self.assertEqual(catalog.get_item("torch").name, "Everburning Torch")
        catalog.get_item("torch")
        self.assertEqual(store.calls, 2)

    def test_partial_biome_override_keeps_links(self):
        """A biome record without compatibility or exit hint keeps the bundled ones."""
        from worldgen.catalog import DefinitionCatalog

        store = _DictStore(
            {
                ("biome", "caves"): {
                    "id": "caves",
                    "name": "Crystal Caves",
                    "name_templates": ["Crystal Grotto"],
                    "description_templates": ["Crystals glitter on every wall."],
                    "base_encounter_chance": 0.25,
                }
            }
        )
        bundled = DefinitionCatalog().get_biome("caves")
        biome = DefinitionCatalog(store=store).get_biome("caves")
        self.assertEqual(biome.name, "Crystal Caves")
        self.assertEqual(biome.compatible, frozenset({"wilderness", "caves"}))
        self.assertEqual(biome.compatible, bundled.compatible)
        self.assertEqual(biome.exit_hint, bundled.exit_hint)
        self.assertTrue(biome.exit_hint)

    def test_default_store_without_table(self):
        """No DEFINITION_TABLE means no override store."""
        from unittest import mock

        from worldgen.catalog import NullDefinitionStore, default_definition_store

        with mock.patch.dict(environ, {"DEFINITION_TABLE": ""}):
            self.assertIsInstance(default_definition_store(), NullDefinitionStore)


class TestDynamoDefinitionStore(unittest.TestCase):
    """Overrides read from a mocked DynamoDB table."""

    def setUp(self):
        """Set up mocked DynamoDB resources for testing."""
        self.mocks = [mock_aws()]
        [mock.start() for mock in self.mocks]
        self.table = boto3.resource("dynamodb").create_table(
            AttributeDefinitions=[
                {"AttributeName": "kind", "AttributeType": "S"},
                {"AttributeName": "id", "AttributeType": "S"},
            ],
            TableName=environ["DEFINITION_TABLE"],
            KeySchema=[
                {"AttributeName": "kind", "KeyType": "HASH"},
                {"AttributeName": "id", "KeyType": "RANGE"},
            ],
            ProvisionedThroughput={"ReadCapacityUnits": 1, "WriteCapacityUnits": 1},
        )

    def tearDown(self):
        """Tear down mocked resources after testing."""
        [mock.stop() for mock in self.mocks]

    def test_biome_override(self):
        """A biome record in DynamoDB replaces the bundled biome."""
        from worldgen.catalog import DefinitionCatalog, DynamoDefinitionStore

        self.table.put_item(
            Item={
                "kind": "biome",
                "id": "caves",
                "name": "Crystal Caves",
                "name_templates": ["Crystal Grotto"],
                "description_templates": ["Crystals glitter on every wall."],
                "base_encounter_chance": Decimal("0.25"),
                "compatible": ["wilderness", "caves"],
            }
        )
        catalog = DefinitionCatalog(store=DynamoDefinitionStore())
        biome = catalog.get_biome("caves")
        self.assertEqual(biome.name, "Crystal Caves")
        self.assertEqual(biome.base_encounter_chance, 0.25)
        self.assertEqual(biome.compatible, frozenset({"wilderness", "caves"}))

    def test_missing_record_uses_static(self):
        """Ids absent from the table resolve from bundled data."""
        from worldgen.catalog import DefinitionCatalog, DynamoDefinitionStore

        catalog = DefinitionCatalog(store=DynamoDefinitionStore())
        self.assertEqual(catalog.get_biome("ruins").id, "ruins")

    def test_missing_table_falls_back(self):
        """A table that does not exist is logged and bundled data is used."""
        from unittest import mock

        from worldgen.catalog import DefinitionCatalog, DynamoDefinitionStore

        with mock.patch.dict(environ, {"DEFINITION_TABLE": "no-such-table"}):
            catalog = DefinitionCatalog(store=DynamoDefinitionStore())
            with self.assertLogs("worldgen.catalog", level="WARNING"):
                biome = catalog.get_biome("caves")
        self.assertEqual(biome.id, "caves")

    def test_default_store_with_table(self):
        """DEFINITION_TABLE selects the DynamoDB store."""
        from worldgen.catalog import DynamoDefinitionStore, default_definition_store

        self.assertIsInstance(default_definition_store(), DynamoDefinitionStore)


if __name__ == "__main__":
    unittest.main()
