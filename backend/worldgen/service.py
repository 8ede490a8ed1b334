"""Room generation service: the single entry point for getting a room.

``get_or_generate_room`` looks a coordinate up in the in-process cache,
then the durable store, and only then generates it.  Generation is
at-most-once per coordinate: the room and its six neighbors are locked
while the room is generated, so concurrent callers wait for the first and
then read the cached result, and two adjacent rooms never choose their
exits at the same time.

Exits are always bidirectional.  A room being generated adds an exit
toward every generated neighbor that already has an exit toward it, and
never opens an exit toward a generated neighbor that lacks one.

Rooms depend on the order coordinates are first requested in (a room's
neighbors constrain it), so replaying the same requests against a fresh
cache and store reproduces the same world.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Callable, Dict, List, Optional, Set

from .base import Biome, Exit, GeneratedRoom, exits_sorted
from .catalog import DefinitionCatalog
from .config import WorldConfig
from .coords import CARDINAL_DIRECTIONS, DIRECTIONS, Coordinates, make_room_id, neighbors, step
from .describe import (
    describe_exit,
    settlement_description,
    wilderness_description,
    wilderness_name,
)
from .errors import BiomeNotFoundError
from .locks import RoomLocks
from .populate import ContentPopulator
from .region import RegionInfo, WorldRegionClassifier
from .rng import coord_seed
from .settlements import SettlementPipeline, preview_name
from .store import NullRoomStore, RoomCache, RoomStore
from .views import RoomView, build_room_view
from .wfc import (
    ConstraintBiomeSelector,
    forced_exit_directions,
    open_directions,
    select_exit_directions,
)

logger = logging.getLogger(__name__)


class RoomGenerationService:
    """Orchestrates region classification, biome selection, population and caching.

    Args:
        catalog: definition lookup; defaults to bundled data only.
        cache: in-process room cache owned by this world instance.
        store: durable room store; defaults to :class:`NullRoomStore`.
        classifier: wilderness/settlement classifier.
        config: tunable pacing and density settings.
        seeder: coordinate to seed function; defaults to :func:`coord_seed`.
    """

    def __init__(
        self,
        catalog: Optional[DefinitionCatalog] = None,
        cache: Optional[RoomCache] = None,
        store: Optional[RoomStore] = None,
        classifier: Optional[WorldRegionClassifier] = None,
        config: Optional[WorldConfig] = None,
        seeder: Optional[Callable[[int, int, int], int]] = None,
    ):
        self._config = config or WorldConfig()
        self._catalog = catalog or DefinitionCatalog()
        self._cache = cache if cache is not None else RoomCache()
        self._store = store or NullRoomStore()
        self._classifier = classifier or WorldRegionClassifier(self._config)
        self._seeder = seeder or coord_seed
        self._selector = ConstraintBiomeSelector(self._catalog, self._config)
        self._populator = ContentPopulator(self._catalog, self._config.content)
        self._pipeline = SettlementPipeline()
        self._locks = RoomLocks()
        self._refreshed: Set[str] = set()
        self._refreshed_lock = threading.Lock()

    @property
    def cache(self) -> RoomCache:
        return self._cache

    @property
    def catalog(self) -> DefinitionCatalog:
        return self._catalog

    # -----------------------------------------------------------------------
    # Lookup
    # -----------------------------------------------------------------------

    def _load(self, room_id: str) -> Optional[GeneratedRoom]:
        try:
            return self._store.get(room_id)
        except Exception as e:
            logger.warning(f"Room store read failed for {room_id}: {e}")
            return None

    def _persist(self, room: GeneratedRoom) -> None:
        try:
            self._store.put(room)
        except Exception as e:
            logger.warning(f"Room store write failed for {room.id}: {e}")

    def peek_room(self, x: int, y: int, z: int) -> Optional[GeneratedRoom]:
        """Return the room if it exists in the cache or store, without generating it."""
        room_id = make_room_id(x, y, z)
        cached = self._cache.get(room_id)
        if cached is not None:
            return cached
        stored = self._load(room_id)
        if stored is not None:
            return self._cache.add(stored)
        return None

    def get_or_generate_room(self, x: int, y: int, z: int) -> GeneratedRoom:
        """Return the room at (x, y, z), generating it on first request."""
        room_id = make_room_id(x, y, z)
        cached = self._cache.get(room_id)
        if cached is not None:
            return cached

        neighbor_ids = [make_room_id(*c) for _, c in neighbors((x, y, z))]
        with self._locks.hold(room_id, *neighbor_ids):
            cached = self._cache.get(room_id)
            if cached is not None:
                return cached
            stored = self._load(room_id)
            if stored is not None:
                logger.debug(f"Rehydrated {room_id} from room store")
                return self._cache.add(stored)

            room = self.generate_room(x, y, z)
            self._persist(room)
            return self._cache.add(room)

    def pre_generate_adjacent_rooms(self, x: int, y: int, z: int) -> List[GeneratedRoom]:
        """Make sure all six neighbors exist.  Uses only the base lookup path."""
        return [self.get_or_generate_room(*coords) for _, coords in neighbors((x, y, z))]

    def get_or_generate_room_with_adjacent(self, x: int, y: int, z: int) -> GeneratedRoom:
        """Like :meth:`get_or_generate_room`, but with neighbors generated first.

        Exits then name the real places they lead to.  A room that already
        existed before its neighbors were generated has its exit
        descriptions refreshed once.
        """
        existed = self.peek_room(x, y, z) is not None
        self.pre_generate_adjacent_rooms(x, y, z)
        room = self.get_or_generate_room(x, y, z)
        if existed:
            room = self._refresh_exit_descriptions(room)
        return room

    def get_room_view(self, x: int, y: int, z: int) -> RoomView:
        """Client-safe projection of :meth:`get_or_generate_room`."""
        return build_room_view(self.get_or_generate_room(x, y, z), self._catalog)

    def get_room_view_with_adjacent(self, x: int, y: int, z: int) -> RoomView:
        return build_room_view(self.get_or_generate_room_with_adjacent(x, y, z), self._catalog)

    # -----------------------------------------------------------------------
    # Generation
    # -----------------------------------------------------------------------

    def _known_neighbors(self, coords: Coordinates) -> Dict[str, GeneratedRoom]:
        known = {}
        for direction, neighbor_coords in neighbors(coords):
            room = self.peek_room(*neighbor_coords)
            if room is not None:
                known[direction] = room
        return known

    def generate_room(self, x: int, y: int, z: int) -> GeneratedRoom:
        """Generate the room at (x, y, z) from scratch.

        Nothing is written for this room; neighbors found in the store are
        rehydrated into the cache.  The room is built completely before it
        is returned, so a failure leaves no trace of it.

        Raises:
            BiomeNotFoundError: the selected biome is missing from the catalog.
        """
        coords = (x, y, z)
        seed = self._seeder(x, y, z)
        known = self._known_neighbors(coords)
        region = self._classifier.classify(x, y, z)
        if region.is_settlement:
            room = self._generate_settlement(coords, region, known, seed)
        else:
            room = self._generate_wilderness(coords, known, seed)
        logger.info(
            f"Generated {'settlement' if room.is_settlement else room.biome_id} room "
            f"{room.id} '{room.name}' exits={[e.direction for e in room.exits]}"
        )
        return room

    def _generate_wilderness(
        self, coords: Coordinates, known: Dict[str, GeneratedRoom], seed: int
    ) -> GeneratedRoom:
        adjacent = {d: room.as_adjacent(d) for d, room in known.items()}
        biome_id = self._selector.select_biome(coords, adjacent.values(), seed)
        biome = self._catalog.get_biome(biome_id)
        if biome is None:
            raise BiomeNotFoundError(biome_id)

        difficulty = self._selector.calculate_difficulty(*coords)
        exit_directions = select_exit_directions(adjacent, seed)
        return GeneratedRoom(
            coordinates=coords,
            biome_id=biome.id,
            name=wilderness_name(biome, seed),
            description=wilderness_description(biome, seed),
            difficulty=difficulty,
            seed=seed,
            exits=self._build_exits(coords, exit_directions, known, biome, seed),
            wilderness=self._populator.populate(biome.id, difficulty, seed),
        )

    def _generate_settlement(
        self,
        coords: Coordinates,
        region: RegionInfo,
        known: Dict[str, GeneratedRoom],
        seed: int,
    ) -> GeneratedRoom:
        contents = self._pipeline.run(*coords, region.settlement_size)
        adjacent = {d: room.as_adjacent(d) for d, room in known.items()}
        # Roads leave in every cardinal direction that is still open.
        exit_directions = set(forced_exit_directions(adjacent))
        exit_directions.update(open_directions(adjacent, CARDINAL_DIRECTIONS))
        ordered = [d for d in DIRECTIONS if d in exit_directions]
        return GeneratedRoom(
            coordinates=coords,
            biome_id=None,
            name=contents.settlement.name,
            description=settlement_description(
                contents.settlement, list(contents.buildings), seed
            ),
            difficulty=self._selector.calculate_difficulty(*coords),
            seed=seed,
            exits=self._build_exits(coords, ordered, known, None, seed),
            settlement=contents,
        )

    def _describe_exit(
        self,
        coords: Coordinates,
        direction: str,
        known: Dict[str, GeneratedRoom],
        origin_biome: Optional[Biome],
        seed: int,
    ) -> str:
        destination = known.get(direction)
        preview = None
        if destination is None:
            target = step(coords, direction)
            region = self._classifier.classify(*target)
            if region.is_settlement:
                preview = (preview_name(*target), region.settlement_size)
        return describe_exit(direction, destination, preview, origin_biome, seed)

    def _build_exits(
        self,
        coords: Coordinates,
        directions: List[str],
        known: Dict[str, GeneratedRoom],
        origin_biome: Optional[Biome],
        seed: int,
    ):
        return exits_sorted(
            [
                Exit(
                    direction=direction,
                    room_id=make_room_id(*step(coords, direction)),
                    description=self._describe_exit(coords, direction, known, origin_biome, seed),
                )
                for direction in directions
            ]
        )

    # -----------------------------------------------------------------------
    # Exit description refresh
    # -----------------------------------------------------------------------

    def _refresh_exit_descriptions(self, room: GeneratedRoom) -> GeneratedRoom:
        """Rename exits after the room's neighbors exist.  Happens once per room."""
        with self._locks.hold(room.id):
            with self._refreshed_lock:
                if room.id in self._refreshed:
                    return self._cache.get(room.id) or room
                self._refreshed.add(room.id)

            current = self._cache.get(room.id) or room
            known = self._known_neighbors(current.coordinates)
            origin_biome = self._catalog.get_biome(current.biome_id) if current.biome_id else None
            exits = tuple(
                dataclasses.replace(
                    e,
                    description=self._describe_exit(
                        current.coordinates, e.direction, known, origin_biome, current.seed
                    ),
                )
                for e in current.exits
            )
            if exits == current.exits:
                return current

            refreshed = dataclasses.replace(current, exits=exits)
            self._cache.replace(refreshed)
            self._persist(refreshed)
            logger.debug(f"Refreshed exit descriptions of {room.id}")
            return refreshed
