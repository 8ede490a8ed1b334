"""Quest generation from settlement problems, NPC secrets and side jobs."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from .. import templates
from ..data import quests as data
from ..rng import choice, salted_seed, stream
from .base import NPC, Quest, QuestObjective, QuestReward, Settlement

logger = logging.getLogger(__name__)


def quest_giver_for_problem(npcs: List[NPC]) -> Optional[NPC]:
    """The mayor, else a guard, else whoever comes first."""
    for role in ("mayor", "guard"):
        for npc in npcs:
            if npc.role == role:
                return npc
    return npcs[0] if npcs else None


def _render_pick(
    options: List[str], settlement: Settlement, giver: NPC, seed: int, extra: Dict[str, Any]
) -> str:
    context = {
        "settlement": {"name": settlement.name},
        "giver": {"name": giver.name},
        "npc": {"name": giver.name},
        **extra,
    }
    return templates.render(choice(stream(seed), options), context, seed)


def _objectives(template: Dict[str, Any]) -> Tuple[QuestObjective, ...]:
    return tuple(
        QuestObjective(
            type=o.get("type", "reach"),
            target=o.get("target", "unknown"),
            description=o.get("description", "Complete objective"),
            quantity=o.get("quantity"),
        )
        for o in template["objectives"]
    )


def rewards_for(difficulty: str, settlement: Settlement) -> QuestReward:
    base = data.REWARD_SCALING[difficulty]
    return QuestReward(
        gold=int(base["gold"] * data.wealth_multiplier(settlement.wealth_level)),
        xp=base["xp"],
    )


def _build_quest(
    quest_id: str,
    template: Dict[str, Any],
    settlement: Settlement,
    giver: NPC,
    seed: int,
    difficulty: str,
    generated_from: str,
    extra: Optional[Dict[str, Any]] = None,
) -> Quest:
    extra = extra or {}
    return Quest(
        id=quest_id,
        settlement_id=settlement.id,
        name=_render_pick(template["name"], settlement, giver, seed, extra),
        type=template["type"],
        description=_render_pick(template["description"], settlement, giver, seed, extra),
        giver_npc_id=giver.id,
        objectives=_objectives(template),
        rewards=rewards_for(difficulty, settlement),
        generated_from=generated_from,
        difficulty=difficulty,
    )


def generate_problem_quest(settlement: Settlement, npcs: List[NPC]) -> Optional[Quest]:
    problem = settlement.problem
    if problem is None:
        return None
    template = data.PROBLEM_QUESTS.get(problem.type)
    if template is None:
        logger.warning(f"No quest template for problem type {problem.type}")
        return None
    giver = quest_giver_for_problem(npcs)
    if giver is None:
        return None

    difficulty = template["difficulty"]
    if problem.severity == "severe":
        difficulty = "hard"
    elif problem.severity == "minor":
        difficulty = "easy"

    x, y, z = settlement.coordinates
    return _build_quest(
        f"quest_{settlement.id}_problem",
        template,
        settlement,
        giver,
        salted_seed(x, y, z, f"quest_problem_{problem.type}"),
        difficulty,
        f"problem:{problem.type}",
    )


def generate_secret_quests(settlement: Settlement, npcs: List[NPC], seed: int) -> List[Quest]:
    rng = stream(seed)
    x, y, z = settlement.coordinates
    quests = []
    for i, npc in enumerate(npcs):
        for j, secret in enumerate(npc.secrets):
            if rng() > data.SECRET_QUEST_CHANCE:
                continue
            template = data.SECRET_QUESTS.get(secret.type)
            if template is None:
                continue
            quests.append(
                _build_quest(
                    f"quest_{settlement.id}_secret_{i}_{j}",
                    template,
                    settlement,
                    npc,
                    salted_seed(x, y, z, f"quest_secret_{npc.id}_{j}"),
                    template["difficulty"],
                    f"secret:{npc.id}",
                )
            )
    return quests


def generate_side_quests(settlement: Settlement, npcs: List[NPC], seed: int) -> List[Quest]:
    if not npcs:
        return []
    rng = stream(seed)
    minimum, spread = data.SIDE_QUEST_COUNTS.get(settlement.size, (0, 1))
    count = minimum + int(rng() * spread)
    x, y, z = settlement.coordinates
    quests = []
    for i in range(count):
        quest_type = choice(rng, data.SIDE_QUEST_TYPES)
        template = choice(rng, data.SIDE_QUESTS[quest_type])
        giver = choice(rng, npcs)
        quest_seed = salted_seed(x, y, z, f"quest_side_{i}")
        extra = {
            "item": {"name": choice(stream(quest_seed), data.SIDE_QUEST_ITEMS)},
            "destination": {"name": choice(stream(quest_seed), data.SIDE_QUEST_DESTINATIONS)},
        }
        quests.append(
            _build_quest(
                f"quest_{settlement.id}_side_{i}",
                template,
                settlement,
                giver,
                quest_seed,
                template["difficulty"],
                f"side:{quest_type}",
                extra,
            )
        )
    return quests


def generate_quests(settlement: Settlement, npcs: List[NPC]) -> List[Quest]:
    """Problem quest first, then secret quests, then side quests."""
    x, y, z = settlement.coordinates
    seed = salted_seed(x, y, z, "quests")
    quests = []
    problem_quest = generate_problem_quest(settlement, npcs)
    if problem_quest is not None:
        quests.append(problem_quest)
    quests.extend(generate_secret_quests(settlement, npcs, seed))
    quests.extend(generate_side_quests(settlement, npcs, seed))
    return quests
