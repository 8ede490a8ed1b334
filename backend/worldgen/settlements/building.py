"""Building generation and NPC placement."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .. import templates
from ..data import buildings as data
from ..rng import RandomStream, choice, salted_seed, stream
from .base import NPC, Building, Settlement, ShopItem

logger = logging.getLogger(__name__)


def required_buildings(settlement: Settlement) -> List[str]:
    types = list(data.BUILDINGS_BY_SIZE.get(settlement.size, []))
    for economy in settlement.economy:
        types.extend(data.BUILDINGS_BY_ECONOMY.get(economy, []))
    return types


def generate_name(seed: int, building_type: str) -> str:
    patterns = data.NAME_PATTERNS.get(building_type)
    if not patterns:
        return f"A {building_type.replace('_', ' ')}"
    rng = stream(seed)
    pattern = choice(rng, patterns)
    context = {}
    if "{owner}" in pattern:
        first = choice(rng, data.OWNER_FIRST_NAMES)
        last = choice(rng, data.OWNER_LAST_NAMES)
        context["owner"] = f"{first} {last}"
    return templates.render(pattern, context, seed)


def building_size(settlement: Settlement, building_type: str, rng: RandomStream) -> str:
    if building_type in data.ALWAYS_LARGE:
        return "large"
    if building_type in data.ALWAYS_SMALL:
        return "small"
    roll = rng()
    if settlement.size == "village":
        return "small" if roll < 0.7 else "medium"
    if settlement.size == "town":
        return "small" if roll < 0.3 else "medium" if roll < 0.8 else "large"
    return "small" if roll < 0.2 else "medium" if roll < 0.7 else "large"


def generate_inventory(
    building_type: str, wealth_level: int, rng: RandomStream
) -> Optional[Tuple[ShopItem, ...]]:
    """Shop stock scaled by settlement wealth, or None for non-shops."""
    stock = data.INVENTORIES.get(building_type)
    if not stock:
        return None
    wealth_multiplier = 0.5 + (wealth_level / 10) * 1.5
    quantity_base = data.INVENTORY_QUANTITY_BASE.get(building_type, data.DEFAULT_QUANTITY_BASE)
    inventory = []
    for entry in stock:
        quantity = max(1, int(quantity_base * wealth_multiplier * (0.5 + rng())))
        price_factor = 1 + (wealth_level - 5) * 0.04 + (rng() * 0.4 - 0.2)
        inventory.append(
            ShopItem(
                item_id=entry["item_id"],
                base_price=max(1, int(entry["base_price"] * price_factor)),
                quantity=quantity,
                restock_days=entry["restock_days"],
            )
        )
    return tuple(inventory)


def generate_building(settlement: Settlement, building_type: str, index: int) -> Building:
    x, y, z = settlement.coordinates
    seed = salted_seed(x, y, z, f"building,{index}")
    rng = stream(seed)
    description_options = data.DESCRIPTIONS.get(building_type) or ["A building."]
    description = templates.render(choice(rng, description_options), {}, seed)
    size = building_size(settlement, building_type, rng)
    return Building(
        id=f"building_{settlement.id}_{index}",
        settlement_id=settlement.id,
        name=generate_name(seed, building_type),
        type=building_type,
        size=size,
        description=description,
        inventory=generate_inventory(building_type, settlement.wealth_level, rng),
        services=tuple(data.SERVICES.get(building_type, [])),
    )


def assign_npcs(
    buildings: List[Building], npcs: List[NPC]
) -> Tuple[List[Building], List[NPC]]:
    """Place each NPC in the first building of the type their role works in.

    Returns new buildings and NPCs with the placements filled in.  NPCs whose
    role has no building, or whose building type is missing, stay unassigned.
    Each NPC ends up in at most one building.
    """
    first_of_type: Dict[str, Building] = {}
    for building in buildings:
        first_of_type.setdefault(building.type, building)

    residents: Dict[str, List[str]] = {}
    placed = []
    for npc in npcs:
        building_type = data.NPC_ROLE_TO_BUILDING.get(npc.role)
        if npc.building_id is not None or building_type is None:
            placed.append(npc)
            continue
        building = first_of_type.get(building_type)
        if building is None:
            logger.debug(f"No {building_type} for NPC {npc.id} ({npc.role})")
            placed.append(npc)
            continue
        residents.setdefault(building.id, []).append(npc.id)
        placed.append(replace(npc, building_id=building.id))

    buildings = [
        replace(b, npc_ids=b.npc_ids + tuple(residents[b.id])) if b.id in residents else b
        for b in buildings
    ]
    return buildings, placed


def generate_buildings(
    settlement: Settlement, npcs: List[NPC]
) -> Tuple[List[Building], List[NPC]]:
    """Buildings for the settlement, plus the NPCs placed in them."""
    buildings = [
        generate_building(settlement, building_type, i)
        for i, building_type in enumerate(required_buildings(settlement))
    ]
    return assign_npcs(buildings, npcs)
