"""Tests for the room generation service."""

import unittest
from concurrent.futures import ThreadPoolExecutor
from unittest import mock

WALK = [
    (1, 0, 0),
    (2, 0, 0),
    (2, 1, 0),
    (1, 1, 0),
    (1, 1, -1),
    (0, 1, -1),
    (-1, 1, -1),
    (-1, 2, 0),
    (0, 2, 0),
    (3, 3, 0),
    (3, 2, 0),
    (0, 0, 0),
]


class _CountingStore:
    """In-memory store that counts writes and can be told to fail."""

    def __init__(self, fail_puts=False, fail_gets=False):
        from worldgen.store import InMemoryRoomStore

        self._inner = InMemoryRoomStore()
        self.fail_puts = fail_puts
        self.fail_gets = fail_gets
        self.puts = {}

    def get(self, room_id):
        if self.fail_gets:
            raise ConnectionError("read failed")
        return self._inner.get(room_id)

    def put(self, room):
        if self.fail_puts:
            raise ConnectionError("write failed")
        self.puts[room.id] = self.puts.get(room.id, 0) + 1
        self._inner.put(room)


def _service(**kwargs):
    from worldgen.service import RoomGenerationService

    return RoomGenerationService(**kwargs)


def _wilderness_service(**kwargs):
    from worldgen.region import WildernessOnlyClassifier

    return _service(classifier=WildernessOnlyClassifier(), **kwargs)


class TestLookup(unittest.TestCase):
    """Cache, then store, then generate."""

    def test_generation_is_memoized(self):
        """A coordinate is generated once and the same room returned afterwards."""
        service = _wilderness_service()
        with mock.patch.object(service, "generate_room", wraps=service.generate_room) as generate:
            first = service.get_or_generate_room(3, 4, 0)
            second = service.get_or_generate_room(3, 4, 0)
        self.assertIs(first, second)
        self.assertEqual(generate.call_count, 1)
        self.assertEqual(first.id, "proc_3_4_0")

    def test_store_hit_skips_generation(self):
        """Rooms found in the durable store are not regenerated."""
        store = _CountingStore()
        original = _wilderness_service(store=store).get_or_generate_room(5, 5, 0)

        service = _wilderness_service(store=store)
        with mock.patch.object(service, "generate_room", wraps=service.generate_room) as generate:
            loaded = service.get_or_generate_room(5, 5, 0)
        self.assertEqual(loaded, original)
        self.assertEqual(generate.call_count, 0)
        self.assertIn("proc_5_5_0", service.cache)

    def test_store_failures_are_not_fatal(self):
        """Read and write failures are logged and generation carries on."""
        store = _CountingStore(fail_puts=True, fail_gets=True)
        service = _wilderness_service(store=store)
        with self.assertLogs("worldgen.service", level="WARNING"):
            room = service.get_or_generate_room(2, 2, 0)
        self.assertIs(service.cache.get(room.id), room)

    def test_generated_rooms_are_persisted(self):
        """Each generated room is written to the store once."""
        store = _CountingStore()
        service = _wilderness_service(store=store)
        for coords in WALK:
            service.get_or_generate_room(*coords)
        self.assertEqual(set(store.puts), {f"proc_{x}_{y}_{z}" for x, y, z in WALK})
        self.assertEqual(set(store.puts.values()), {1})

    def test_peek_does_not_generate(self):
        """peek_room only reports existing rooms."""
        service = _wilderness_service()
        self.assertIsNone(service.peek_room(0, 0, 0))
        room = service.get_or_generate_room(0, 0, 0)
        self.assertIs(service.peek_room(0, 0, 0), room)


class TestWorldInvariants(unittest.TestCase):
    """Exits and biomes stay consistent as the world grows."""

    def _assert_bidirectional(self, service):
        from worldgen.coords import OPPOSITE, make_room_id, neighbors, step

        for room in service.cache:
            for room_exit in room.exits:
                expected = make_room_id(*step(room.coordinates, room_exit.direction))
                self.assertEqual(room_exit.room_id, expected)
            for direction, coords in neighbors(room.coordinates):
                other = service.cache.get(make_room_id(*coords))
                if other is None:
                    continue
                self.assertEqual(
                    direction in room.exit_directions,
                    OPPOSITE[direction] in other.exit_directions,
                    f"{room.id} {direction} / {other.id}",
                )

    def test_exits_are_bidirectional(self):
        """Adjacent generated rooms either both connect or neither does."""
        service = _service()
        for coords in WALK:
            service.get_or_generate_room_with_adjacent(*coords)
        self.assertGreater(len(service.cache), len(WALK))
        self._assert_bidirectional(service)

    def test_neighboring_biomes_are_compatible(self):
        """Adjacent wilderness rooms have mutually compatible biomes."""
        from worldgen.coords import make_room_id, neighbors

        service = _wilderness_service()
        for x in range(-3, 4):
            for y in range(-3, 4):
                service.get_or_generate_room(x, y, 0)
        catalog = service.catalog
        for room in service.cache:
            for _, coords in neighbors(room.coordinates):
                other = service.cache.get(make_room_id(*coords))
                if other is None:
                    continue
                self.assertIn(other.biome_id, catalog.get_biome(room.biome_id).compatible)
        self._assert_bidirectional(service)

    def test_same_requests_same_world(self):
        """Fresh services replaying the same requests build identical worlds."""
        worlds = []
        for _ in range(2):
            service = _service()
            worlds.append([service.get_or_generate_room(*c).to_dict() for c in WALK])
        self.assertEqual(worlds[0], worlds[1])

    def test_concurrent_requests_generate_once(self):
        """Many threads asking for one room all get the single generated room."""
        store = _CountingStore()
        service = _wilderness_service(store=store)
        with ThreadPoolExecutor(max_workers=8) as pool:
            rooms = list(pool.map(lambda _: service.get_or_generate_room(4, -2, 0), range(16)))
        self.assertTrue(all(room is rooms[0] for room in rooms))
        self.assertEqual(store.puts, {"proc_4_-2_0": 1})

    def test_concurrent_neighborhoods_stay_consistent(self):
        """Overlapping concurrent generation keeps exits bidirectional."""
        service = _service()
        coords = [(x, y, 0) for x in range(-2, 3) for y in range(-2, 3)]
        with ThreadPoolExecutor(max_workers=6) as pool:
            list(pool.map(lambda c: service.get_or_generate_room(*c), coords * 2))
        self.assertEqual(len(service.cache), len(coords))
        self._assert_bidirectional(service)


class TestWildernessRooms(unittest.TestCase):
    """Generated wilderness rooms."""

    def test_forced_exit_toward_pointing_neighbor(self):
        """A neighbor with an exit toward the new room gets one back."""
        from worldgen.base import Exit, GeneratedRoom, WildernessContents

        service = _wilderness_service()
        origin = GeneratedRoom(
            coordinates=(0, 0, 0),
            biome_id="caves",
            name="Dark Hollow",
            description="Water drips.",
            difficulty=1,
            seed=1,
            exits=(Exit("east", "proc_1_0_0", "A dark tunnel leads east"),),
            wilderness=WildernessContents(),
        )
        service.cache.add(origin)
        room = service.get_or_generate_room(1, 0, 0)
        west = room.exit("west")
        self.assertIsNotNone(west)
        self.assertEqual(west.room_id, "proc_0_0_0")
        self.assertEqual(west.description, "Dark Hollow to the west")
        self.assertIn(room.biome_id, ("wilderness", "caves"))

    def test_closed_neighbor_is_not_connected(self):
        """A neighbor without a return exit stays disconnected."""
        from worldgen.base import GeneratedRoom, WildernessContents

        service = _wilderness_service()
        service.cache.add(
            GeneratedRoom(
                coordinates=(0, 0, 0),
                biome_id="wilderness",
                name="Meadow",
                description="Grass.",
                difficulty=1,
                seed=1,
                exits=(),
                wilderness=WildernessContents(),
            )
        )
        self.assertIsNone(service.get_or_generate_room(1, 0, 0).exit("west"))

    def test_room_shape(self):
        """Names, difficulty and content fields are filled in."""
        service = _wilderness_service()
        room = service.get_or_generate_room(12, -3, -2)
        self.assertFalse(room.is_settlement)
        self.assertIsNotNone(room.wilderness)
        self.assertTrue(room.name)
        self.assertNotIn("{", room.description)
        self.assertEqual(room.difficulty, 12 // 5 + 1 + 2)
        self.assertTrue(1 <= len(room.exits) <= 3)

    def test_seed_collisions_are_harmless(self):
        """Rooms sharing a seed are still distinct rooms."""
        service = _wilderness_service(seeder=lambda x, y, z: 42)
        a = service.get_or_generate_room(10, 10, 0)
        b = service.get_or_generate_room(-10, -10, 0)
        self.assertEqual(a.seed, b.seed)
        self.assertNotEqual(a.id, b.id)
        self.assertIs(service.cache.get(a.id), a)
        self.assertIs(service.cache.get(b.id), b)

    def test_missing_biome_aborts_generation(self):
        """A selected biome the catalog cannot resolve is fatal and leaves nothing behind."""
        from worldgen.catalog import DefinitionCatalog
        from worldgen.errors import BiomeNotFoundError

        class _NoBiomes(DefinitionCatalog):
            def get_biome(self, biome_id):
                return None

        store = _CountingStore()
        service = _wilderness_service(catalog=_NoBiomes(), store=store)
        with self.assertRaises(BiomeNotFoundError):
            service.get_or_generate_room(1, 1, 0)
        self.assertEqual(len(service.cache), 0)
        self.assertEqual(store.puts, {})


class TestSettlementRooms(unittest.TestCase):
    """Settlement locations run the settlement pipeline."""

    def test_origin_city(self):
        """The origin is a city with roads in every open cardinal direction."""
        service = _service()
        room = service.get_or_generate_room(0, 0, 0)
        self.assertTrue(room.is_settlement)
        self.assertIsNone(room.biome_id)
        self.assertEqual(room.settlement.settlement.size, "city")
        self.assertEqual(room.name, room.settlement.settlement.name)
        self.assertEqual([e.direction for e in room.exits], ["north", "south", "east", "west"])
        self.assertTrue(room.description.startswith(f"You arrive at {room.name}, a city"))

    def test_neighbor_exit_names_settlement(self):
        """Exits into a generated settlement name it and its size."""
        service = _service()
        city = service.get_or_generate_room(0, 0, 0)
        room = service.get_or_generate_room(1, 0, 0)
        self.assertEqual(room.exit("west").description, f"{city.name} (city) to the west")

    def test_exit_previews_ungenerated_settlement(self):
        """An exit toward an ungenerated settlement previews its eventual name."""
        previews = []
        for k in range(1, 40):
            service = _service()
            room = service.get_or_generate_room(7 * k, 1, 0)
            north = room.exit("north")
            if north is None:
                continue
            village = service.get_or_generate_room(7 * k, 0, 0)
            size = village.settlement.settlement.size
            self.assertEqual(north.description, f"{village.name} ({size}) to the north")
            previews.append(north)
        self.assertTrue(previews)

    def test_refresh_names_generated_settlement(self):
        """After its neighbors exist, a room's exit names the settlement beyond it."""
        from worldgen.base import Exit, GeneratedRoom, WildernessContents

        service = _service()
        service.cache.add(
            GeneratedRoom(
                coordinates=(7, 1, 0),
                biome_id="wilderness",
                name="Meadow",
                description="Grass.",
                difficulty=2,
                seed=1,
                exits=(Exit("north", "proc_7_0_0", "Wilderness to the north"),),
                wilderness=WildernessContents(),
            )
        )
        room = service.get_or_generate_room_with_adjacent(7, 1, 0)
        village = service.get_or_generate_room(7, 0, 0)
        self.assertEqual(room.exit("north").description, f"{village.name} (village) to the north")
        self.assertIsNotNone(village.exit("south"))


class TestAdjacentGeneration(unittest.TestCase):
    """Generating with neighbors first names every exit."""

    def _assert_exits_named(self, service, room):
        from worldgen.coords import is_vertical

        for room_exit in room.exits:
            neighbor = service.cache.get(room_exit.room_id)
            self.assertIsNotNone(neighbor)
            if is_vertical(room_exit.direction):
                self.assertTrue(room_exit.description.startswith(f"{neighbor.name} lies"))
            else:
                self.assertTrue(room_exit.description.startswith(neighbor.name))

    def test_all_neighbors_exist(self):
        """The six neighbors are generated along with the room."""
        from worldgen.coords import make_room_id, neighbors

        service = _wilderness_service()
        room = service.get_or_generate_room_with_adjacent(4, 4, 0)
        for _, coords in neighbors(room.coordinates):
            self.assertIn(make_room_id(*coords), service.cache)
        self._assert_exits_named(service, room)

    def test_existing_room_descriptions_refreshed(self):
        """A room generated alone has its exit descriptions refreshed once."""
        store = _CountingStore()
        service = _wilderness_service(store=store)
        before = service.get_or_generate_room(4, 4, 0)
        after = service.get_or_generate_room_with_adjacent(4, 4, 0)
        self.assertEqual(after.exit_directions, before.exit_directions)
        self.assertIs(service.cache.get(after.id), after)
        self._assert_exits_named(service, after)
        self.assertEqual(store._inner.get(after.id), after)

        with mock.patch.object(service, "_describe_exit") as describe:
            again = service.get_or_generate_room_with_adjacent(4, 4, 0)
        describe.assert_not_called()
        self.assertIs(again, after)


class TestRoomViews(unittest.TestCase):
    """Client projections hide internal data."""

    def _keys(self, value):
        if isinstance(value, dict):
            for key, item in value.items():
                yield key
                yield from self._keys(item)
        elif isinstance(value, (list, tuple)):
            for item in value:
                yield from self._keys(item)

    def test_wilderness_view(self):
        """Contents are shown by name and the seed is hidden."""
        service = _wilderness_service()
        room = service.get_or_generate_room(6, 6, 0)
        view = service.get_room_view(6, 6, 0)
        self.assertEqual(view.id, room.id)
        self.assertEqual(view.biome, service.catalog.get_biome(room.biome_id).name)
        self.assertEqual([i.id for i in view.items], list(room.wilderness.items))
        self.assertNotIn("seed", set(self._keys(view.to_dict())))

    def test_settlement_view_hides_secrets(self):
        """Settlement views omit secrets, inventories and seeds."""
        service = _service()
        view = service.get_room_view_with_adjacent(21, 0, 0)
        keys = set(self._keys(view.to_dict()))
        for hidden in ("seed", "secrets", "inventory", "relationships", "spawn_weight"):
            self.assertNotIn(hidden, keys)
        self.assertEqual(view.settlement.size, "town")
        self.assertTrue(view.npcs)
        npc_names = {npc.name for npc in view.npcs}
        for quest in view.quests:
            self.assertIn(quest.giver_name, npc_names)


if __name__ == "__main__":
    unittest.main()
