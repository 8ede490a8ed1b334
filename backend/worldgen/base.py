"""Core data types for procedural room generation.

Generators produce GeneratedRoom values that describe everything about a
room (exits, contents, description) keyed by coordinates.  Static template
data (biomes, pools, definitions) lives in the DefinitionCatalog.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from .coords import DIRECTIONS, Coordinates, make_room_id
from .settlements.base import SettlementContents

# ---------------------------------------------------------------------------
# Static definitions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Biome:
    """A terrain category: naming, flavor and which biomes may border it."""

    id: str
    name: str
    name_templates: Tuple[str, ...]
    description_templates: Tuple[str, ...]
    base_encounter_chance: float
    compatible: FrozenSet[str] = frozenset()
    exit_hint: str = ""
    # "{name} to the {direction}" style hint shown for unexplored exits


@dataclass(frozen=True)
class PoolEntry:
    """One spawnable definition in a biome's content pool.

    Resource pool entries ignore the difficulty range.
    """

    biome_id: str
    definition_id: str
    spawn_weight: float
    min_difficulty: int = 1
    max_difficulty: int = 10

    def allows(self, difficulty: int) -> bool:
        return self.min_difficulty <= difficulty <= self.max_difficulty


@dataclass(frozen=True)
class ItemDefinition:
    id: str
    name: str
    description: str
    type: str  # consumable | equipment | treasure | tool
    value: int = 0
    equip_slot: Optional[str] = None
    effect: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class EnemyDefinition:
    id: str
    name: str
    description: str
    health: int
    attack: int
    defense: int
    xp_reward: int
    loot_table: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResourceDefinition:
    id: str
    name: str
    description: str
    required_tool: Optional[str]
    yields: Tuple[str, ...]
    respawn_seconds: int


# ---------------------------------------------------------------------------
# Generation inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AdjacentRoomInfo:
    """What generation may know about an already-generated neighbor."""

    coordinates: Coordinates
    direction: str
    # direction from the room being generated toward this neighbor
    biome_id: Optional[str]
    # None for settlement rooms, which impose no biome constraint
    exit_directions: FrozenSet[str] = frozenset()
    name: str = ""
    settlement_size: Optional[str] = None


# ---------------------------------------------------------------------------
# Generated rooms
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Exit:
    direction: str
    room_id: str
    description: str


@dataclass(frozen=True)
class WildernessContents:
    """Definition ids placed in a wilderness room."""

    items: Tuple[str, ...] = ()
    enemies: Tuple[str, ...] = ()
    resource_nodes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GeneratedRoom:
    """A fully generated room.

    Exactly one of ``wilderness`` or ``settlement`` is set.  Rooms are
    immutable; the service replaces a cached room wholesale when it
    refreshes exit descriptions.
    """

    coordinates: Coordinates
    biome_id: Optional[str]
    name: str
    description: str
    difficulty: int
    seed: int
    exits: Tuple[Exit, ...]
    wilderness: Optional[WildernessContents] = None
    settlement: Optional[SettlementContents] = None
    id: str = field(default="")

    def __post_init__(self):
        if (self.wilderness is None) == (self.settlement is None):
            raise ValueError(
                f"Room at {self.coordinates} must have exactly one of wilderness/settlement contents"
            )
        expected_id = make_room_id(*self.coordinates)
        if not self.id:
            object.__setattr__(self, "id", expected_id)
        elif self.id != expected_id:
            raise ValueError(f"Room id {self.id} does not match coordinates {self.coordinates}")

    @property
    def is_settlement(self) -> bool:
        return self.settlement is not None

    def exit(self, direction: str) -> Optional[Exit]:
        for room_exit in self.exits:
            if room_exit.direction == direction:
                return room_exit
        return None

    @property
    def exit_directions(self) -> FrozenSet[str]:
        return frozenset(e.direction for e in self.exits)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratedRoom":
        wilderness = data.get("wilderness")
        settlement = data.get("settlement")
        return cls(
            id=data["id"],
            coordinates=tuple(int(c) for c in data["coordinates"]),
            biome_id=data.get("biome_id"),
            name=data["name"],
            description=data["description"],
            difficulty=int(data["difficulty"]),
            seed=int(data["seed"]),
            exits=tuple(Exit(**e) for e in data["exits"]),
            wilderness=(
                WildernessContents(
                    items=tuple(wilderness["items"]),
                    enemies=tuple(wilderness["enemies"]),
                    resource_nodes=tuple(wilderness["resource_nodes"]),
                )
                if wilderness
                else None
            ),
            settlement=SettlementContents.from_dict(settlement) if settlement else None,
        )

    def as_adjacent(self, direction: str) -> AdjacentRoomInfo:
        """Describe this room as a neighbor lying ``direction`` from the room being generated."""
        return AdjacentRoomInfo(
            coordinates=self.coordinates,
            direction=direction,
            biome_id=self.biome_id,
            exit_directions=self.exit_directions,
            name=self.name,
            settlement_size=self.settlement.settlement.size if self.settlement else None,
        )


def exits_sorted(exits: List[Exit]) -> Tuple[Exit, ...]:
    """Order exits canonically (north, south, east, west, up, down)."""
    order = {direction: i for i, direction in enumerate(DIRECTIONS)}
    return tuple(sorted(exits, key=lambda e: order[e.direction]))
