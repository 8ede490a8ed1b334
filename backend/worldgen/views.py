"""Client-safe projections of generated rooms.

A RoomView carries what a player may see: no seeds, no spawn weights, no
NPC secrets and no raw shop inventory.  Settlement data is summarised in
"Info" shapes that refer to people by name rather than by id.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from .base import GeneratedRoom
from .catalog import DefinitionCatalog
from .settlements.base import SettlementContents


@dataclass(frozen=True)
class ExitView:
    direction: str
    room_id: str
    description: str


@dataclass(frozen=True)
class ContentInfo:
    id: str
    name: str


@dataclass(frozen=True)
class SettlementInfo:
    id: str
    name: str
    size: str
    population: int
    culture: str
    economy: Tuple[str, ...]
    wealth_level: int
    defense_level: int
    problem: Optional[str] = None


@dataclass(frozen=True)
class NPCInfo:
    id: str
    name: str
    role: str
    greeting: str
    location: Optional[str] = None
    # name of the building they work in


@dataclass(frozen=True)
class BuildingInfo:
    id: str
    name: str
    type: str
    size: str
    description: str
    has_shop: bool
    services: Tuple[str, ...] = ()


@dataclass(frozen=True)
class QuestInfo:
    id: str
    name: str
    type: str
    description: str
    giver_name: str
    difficulty: str
    status: str
    reward_gold: int
    reward_xp: int


@dataclass(frozen=True)
class RoomView:
    id: str
    coordinates: Tuple[int, int, int]
    name: str
    description: str
    difficulty: int
    biome: Optional[str]
    exits: Tuple[ExitView, ...]
    items: Tuple[ContentInfo, ...] = ()
    enemies: Tuple[ContentInfo, ...] = ()
    resource_nodes: Tuple[ContentInfo, ...] = ()
    settlement: Optional[SettlementInfo] = None
    npcs: Tuple[NPCInfo, ...] = ()
    buildings: Tuple[BuildingInfo, ...] = ()
    quests: Tuple[QuestInfo, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _content(ids, lookup) -> Tuple[ContentInfo, ...]:
    infos = []
    for definition_id in ids:
        definition = lookup(definition_id)
        infos.append(ContentInfo(definition_id, definition.name if definition else definition_id))
    return tuple(infos)


def _settlement_views(contents: SettlementContents) -> Dict[str, Any]:
    settlement = contents.settlement
    building_names = {b.id: b.name for b in contents.buildings}
    npc_names = {n.id: n.name for n in contents.npcs}
    return {
        "settlement": SettlementInfo(
            id=settlement.id,
            name=settlement.name,
            size=settlement.size,
            population=settlement.population,
            culture=settlement.culture,
            economy=settlement.economy,
            wealth_level=settlement.wealth_level,
            defense_level=settlement.defense_level,
            problem=settlement.problem.short_description if settlement.problem else None,
        ),
        "npcs": tuple(
            NPCInfo(
                id=npc.id,
                name=npc.name,
                role=npc.role,
                greeting=npc.greeting,
                location=building_names.get(npc.building_id) if npc.building_id else None,
            )
            for npc in contents.npcs
        ),
        "buildings": tuple(
            BuildingInfo(
                id=b.id,
                name=b.name,
                type=b.type,
                size=b.size,
                description=b.description,
                has_shop=b.has_shop,
                services=b.services,
            )
            for b in contents.buildings
        ),
        "quests": tuple(
            QuestInfo(
                id=q.id,
                name=q.name,
                type=q.type,
                description=q.description,
                giver_name=npc_names.get(q.giver_npc_id, "someone"),
                difficulty=q.difficulty,
                status=q.status,
                reward_gold=q.rewards.gold,
                reward_xp=q.rewards.xp,
            )
            for q in contents.quests
        ),
    }


def build_room_view(room: GeneratedRoom, catalog: DefinitionCatalog) -> RoomView:
    """Project a generated room for a client."""
    biome = catalog.get_biome(room.biome_id) if room.biome_id else None
    extra: Dict[str, Any] = {}
    if room.wilderness is not None:
        extra = {
            "items": _content(room.wilderness.items, catalog.get_item),
            "enemies": _content(room.wilderness.enemies, catalog.get_enemy),
            "resource_nodes": _content(room.wilderness.resource_nodes, catalog.get_resource),
        }
    elif room.settlement is not None:
        extra = _settlement_views(room.settlement)

    return RoomView(
        id=room.id,
        coordinates=room.coordinates,
        name=room.name,
        description=room.description,
        difficulty=room.difficulty,
        biome=biome.name if biome else None,
        exits=tuple(ExitView(e.direction, e.room_id, e.description) for e in room.exits),
        **extra,
    )
