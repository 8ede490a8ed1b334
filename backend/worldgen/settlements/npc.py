"""NPC generation: the roster of people living in a settlement."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List

from .. import templates
from ..data import npcs as data
from ..rng import choice, salted_seed, shuffled, stream
from .base import NPC, NPCRelationship, NPCSecret, Settlement

logger = logging.getLogger(__name__)


def required_roles(settlement: Settlement) -> List[str]:
    """Minimum roles for the size, a mayor, economy roles, then generic extras."""
    roles = list(data.MIN_ROLES.get(settlement.size, []))
    if "mayor" not in roles:
        roles.append("mayor")
    for economy in settlement.economy:
        roles.extend(data.ROLES_BY_ECONOMY.get(economy, []))

    x, y, z = settlement.coordinates
    rng = stream(salted_seed(x, y, z, "extra_npcs"))
    minimum, spread = data.EXTRA_NPCS.get(settlement.size, (0, 0))
    for _ in range(minimum + int(rng() * spread)):
        roles.append(choice(rng, data.GENERIC_ROLES))
    return roles


def generate_name(seed: int, culture: str, gender: str) -> str:
    rng = stream(seed)
    first_names = data.FIRST_NAMES[gender].get(culture) or ["Unknown"]
    first = choice(rng, first_names)
    surname_kind = ("occupational", "locational", "descriptive")[int(rng() * 3)]
    surname = choice(rng, data.SURNAMES[surname_kind])
    return f"{first} {surname}"


def generate_personality(seed: int, role: str) -> List[str]:
    rng = stream(seed)
    traits = data.PERSONALITY_BY_ROLE.get(role, data.DEFAULT_PERSONALITY)
    count = 1 + int(rng() * 3)
    return shuffled(rng, traits)[:count]


def generate_secrets(seed: int, role: str) -> List[NPCSecret]:
    rng = stream(seed)
    chance = (
        data.HIGH_SECRET_CHANCE if role in data.HIGH_SECRET_CHANCE_ROLES else data.SECRET_CHANCE
    )
    if rng() >= chance:
        return []

    secret_types = list(data.SECRETS)
    count = 1 if rng() < 0.8 else 2
    secrets = []
    for i in range(count):
        secret_type = choice(rng, secret_types)
        template = choice(rng, data.SECRETS[secret_type])
        secrets.append(
            NPCSecret(
                type=secret_type,
                details=templates.render(template, {}, seed + i),
                reveal_condition=choice(rng, data.REVEAL_CONDITIONS),
            )
        )
    return secrets


def generate_wealth(seed: int, role: str, settlement_wealth: int) -> int:
    base = data.ROLE_WEALTH.get(role, 3) + (settlement_wealth - 5) // 2
    variance = int(stream(seed)() * 3) - 1
    return max(1, min(10, base + variance))


def generate_greeting(seed: int, role: str, personality: List[str], settlement: Settlement) -> str:
    """Pick a greeting matching the first personality trait that has one."""
    role_greetings = data.GREETINGS.get(role, {})
    options: List[str] = []
    for trait in personality:
        if role_greetings.get(trait):
            options = role_greetings[trait]
            break
    if not options:
        options = [line for lines in role_greetings.values() for line in lines] or ["Hello."]
    template = choice(stream(seed), options)
    return templates.render(template, {"settlement": {"name": settlement.name}}, seed)


def generate_relationships(npc: NPC, roster: List[NPC], seed: int) -> List[NPCRelationship]:
    rng = stream(seed)
    limit = data.MAX_RELATIONSHIPS.get(npc.role, data.DEFAULT_MAX_RELATIONSHIPS)
    others = shuffled(rng, [other for other in roster if other.id != npc.id])

    relationships = []
    for other in others[:limit]:
        kinds = ["friend", "business", "rival"]
        if rng() < 0.2:
            kinds.append("family")
        kind = choice(rng, kinds)
        relation = choice(rng, ["sibling", "cousin", "parent", "child"])
        description = choice(rng, data.RELATIONSHIP_DESCRIPTIONS[kind]).format(
            other=other.name, relation=relation
        )
        relationships.append(
            NPCRelationship(target_npc_id=other.id, type=kind, description=description)
        )
    return relationships


def generate_npc(settlement: Settlement, role: str, index: int) -> NPC:
    x, y, z = settlement.coordinates
    seed = salted_seed(x, y, z, f"npc_{index}")
    rng = stream(seed)
    gender = "male" if rng() < 0.5 else "female"
    age = 18 + int(rng() * 53)
    personality = generate_personality(seed, role)
    return NPC(
        id=f"npc_{settlement.id}_{index}",
        settlement_id=settlement.id,
        name=generate_name(seed, settlement.culture, gender),
        gender=gender,
        role=role,
        personality=tuple(personality),
        secrets=tuple(generate_secrets(seed, role)),
        greeting=generate_greeting(seed, role, personality, settlement),
        dialogue_topics=tuple(data.DIALOGUE_TOPICS.get(role, ["general"])),
        wealth=generate_wealth(seed, role, settlement.wealth_level),
        age=age,
    )


def generate_npcs(settlement: Settlement) -> List[NPC]:
    """Generate every NPC, then link them with relationships."""
    roster = [
        generate_npc(settlement, role, i) for i, role in enumerate(required_roles(settlement))
    ]
    x, y, z = settlement.coordinates
    roster = [
        replace(
            npc,
            relationships=tuple(
                generate_relationships(npc, roster, salted_seed(x, y, z, f"relationships_{i}"))
            ),
        )
        for i, npc in enumerate(roster)
    ]
    logger.debug(f"Generated {len(roster)} NPCs for {settlement.name}")
    return roster
