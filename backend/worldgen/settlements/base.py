"""Data types produced by the settlement pipeline.

Settlements, NPCs, buildings and quests are immutable and linked by id: an
NPC names the building it works in, a building lists its NPCs, a quest names
its giver.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

SETTLEMENT_SIZES = ("village", "town", "city")


@dataclass(frozen=True)
class SettlementProblem:
    type: str
    severity: str  # minor | moderate | severe
    short_description: str
    long_description: str
    duration_days: int


@dataclass(frozen=True)
class HistoricalEvent:
    type: str  # founding | disaster | prosperity | conflict | discovery
    years_ago: int
    description: str


@dataclass(frozen=True)
class Settlement:
    id: str
    coordinates: Tuple[int, int, int]
    name: str
    size: str
    population: int
    economy: Tuple[str, ...]
    culture: str
    problem: Optional[SettlementProblem]
    history: Tuple[HistoricalEvent, ...]
    wealth_level: int  # 1-10
    defense_level: int  # 1-10
    founded: int  # years ago

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settlement":
        problem = data.get("problem")
        return cls(
            id=data["id"],
            coordinates=tuple(int(c) for c in data["coordinates"]),
            name=data["name"],
            size=data["size"],
            population=int(data["population"]),
            economy=tuple(data["economy"]),
            culture=data["culture"],
            problem=SettlementProblem(**problem) if problem else None,
            history=tuple(HistoricalEvent(**event) for event in data["history"]),
            wealth_level=int(data["wealth_level"]),
            defense_level=int(data["defense_level"]),
            founded=int(data["founded"]),
        )


@dataclass(frozen=True)
class NPCSecret:
    type: str
    details: str
    reveal_condition: str


@dataclass(frozen=True)
class NPCRelationship:
    target_npc_id: str
    type: str  # family | friend | rival | business
    description: str


@dataclass(frozen=True)
class NPC:
    id: str
    settlement_id: str
    name: str
    gender: str
    role: str
    personality: Tuple[str, ...]
    secrets: Tuple[NPCSecret, ...]
    greeting: str
    dialogue_topics: Tuple[str, ...]
    wealth: int
    age: int
    relationships: Tuple[NPCRelationship, ...] = ()
    building_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NPC":
        return cls(
            id=data["id"],
            settlement_id=data["settlement_id"],
            name=data["name"],
            gender=data["gender"],
            role=data["role"],
            personality=tuple(data["personality"]),
            secrets=tuple(NPCSecret(**s) for s in data["secrets"]),
            greeting=data["greeting"],
            dialogue_topics=tuple(data["dialogue_topics"]),
            wealth=int(data["wealth"]),
            age=int(data["age"]),
            relationships=tuple(
                NPCRelationship(**r) for r in data.get("relationships", ())
            ),
            building_id=data.get("building_id"),
        )


@dataclass(frozen=True)
class ShopItem:
    item_id: str
    base_price: int
    quantity: int
    restock_days: int


@dataclass(frozen=True)
class Building:
    id: str
    settlement_id: str
    name: str
    type: str
    size: str  # small | medium | large
    description: str
    npc_ids: Tuple[str, ...] = ()
    inventory: Optional[Tuple[ShopItem, ...]] = None
    services: Tuple[str, ...] = ()

    @property
    def has_shop(self) -> bool:
        return bool(self.inventory)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Building":
        inventory = data.get("inventory")
        return cls(
            id=data["id"],
            settlement_id=data["settlement_id"],
            name=data["name"],
            type=data["type"],
            size=data["size"],
            description=data["description"],
            npc_ids=tuple(data.get("npc_ids", ())),
            inventory=(
                tuple(ShopItem(**item) for item in inventory) if inventory is not None else None
            ),
            services=tuple(data.get("services", ())),
        )


@dataclass(frozen=True)
class QuestObjective:
    type: str  # kill | collect | reach | talk | find | protect
    target: str
    description: str
    quantity: Optional[int] = None
    completed: bool = False


@dataclass(frozen=True)
class QuestReward:
    gold: int
    xp: int


@dataclass(frozen=True)
class Quest:
    id: str
    settlement_id: str
    name: str
    type: str
    description: str
    giver_npc_id: str
    objectives: Tuple[QuestObjective, ...]
    rewards: QuestReward
    generated_from: str  # "problem:plague", "secret:npc_...", "side:fetch"
    difficulty: str  # easy | medium | hard
    status: str = "available"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quest":
        return cls(
            id=data["id"],
            settlement_id=data["settlement_id"],
            name=data["name"],
            type=data["type"],
            description=data["description"],
            giver_npc_id=data["giver_npc_id"],
            objectives=tuple(
                QuestObjective(
                    type=o["type"],
                    target=o["target"],
                    description=o["description"],
                    quantity=int(o["quantity"]) if o.get("quantity") is not None else None,
                    completed=bool(o.get("completed", False)),
                )
                for o in data["objectives"]
            ),
            rewards=QuestReward(
                gold=int(data["rewards"]["gold"]), xp=int(data["rewards"]["xp"])
            ),
            generated_from=data["generated_from"],
            difficulty=data["difficulty"],
            status=data.get("status", "available"),
        )


@dataclass(frozen=True)
class SettlementContents:
    """Everything the settlement pipeline produced for one room."""

    settlement: Settlement
    npcs: Tuple[NPC, ...]
    buildings: Tuple[Building, ...]
    quests: Tuple[Quest, ...]

    def npc(self, npc_id: str) -> Optional[NPC]:
        for npc in self.npcs:
            if npc.id == npc_id:
                return npc
        return None

    def building(self, building_id: str) -> Optional[Building]:
        for building in self.buildings:
            if building.id == building_id:
                return building
        return None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SettlementContents":
        return cls(
            settlement=Settlement.from_dict(data["settlement"]),
            npcs=tuple(NPC.from_dict(n) for n in data["npcs"]),
            buildings=tuple(Building.from_dict(b) for b in data["buildings"]),
            quests=tuple(Quest.from_dict(q) for q in data["quests"]),
        )
