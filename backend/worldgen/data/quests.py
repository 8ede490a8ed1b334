"""Quest templates and reward scaling."""

from typing import Any, Dict, List

# One quest template per settlement problem
PROBLEM_QUESTS: Dict[str, Dict[str, Any]] = {
    "bandit_raids": {
        "name": ["Clear the Road", "Bandits of {settlement.name}"],
        "type": "kill",
        "description": [
            "{giver.name} asks you to drive off the bandits troubling {settlement.name}."
        ],
        "objectives": [
            {"type": "kill", "target": "bandit", "quantity": 5, "description": "Defeat the bandits"}
        ],
        "difficulty": "medium",
    },
    "monster_threat": {
        "name": ["The Beast of {settlement.name}", "Hunt the {$Beast|Creature}"],
        "type": "kill",
        "description": ["{giver.name} wants the creature stalking {settlement.name} slain."],
        "objectives": [
            {"type": "kill", "target": "monster", "quantity": 1, "description": "Slay the beast"}
        ],
        "difficulty": "hard",
    },
    "plague": {
        "name": ["A Cure for {settlement.name}"],
        "type": "gather",
        "description": ["{giver.name} needs healing herbs to treat the sick."],
        "objectives": [
            {
                "type": "collect",
                "target": "healing_herb",
                "quantity": 10,
                "description": "Gather healing herbs",
            }
        ],
        "difficulty": "medium",
    },
    "famine": {
        "name": ["Bread for the Hungry"],
        "type": "fetch",
        "description": ["{giver.name} begs you to bring food to {settlement.name}."],
        "objectives": [
            {"type": "collect", "target": "bread", "quantity": 10, "description": "Collect food"}
        ],
        "difficulty": "easy",
    },
    "corruption": {
        "name": ["Rot at the Heart"],
        "type": "investigate",
        "description": ["{giver.name} suspects someone in {settlement.name} is stealing."],
        "objectives": [
            {"type": "find", "target": "evidence", "description": "Find proof of corruption"}
        ],
        "difficulty": "medium",
    },
    "missing_persons": {
        "name": ["The Vanished", "Lost in the Night"],
        "type": "rescue",
        "description": ["{giver.name} pleads with you to find the missing."],
        "objectives": [
            {"type": "find", "target": "missing_villagers", "description": "Find the missing"}
        ],
        "difficulty": "hard",
    },
    "haunting": {
        "name": ["Restless Dead"],
        "type": "investigate",
        "description": ["{giver.name} wants the haunting of {settlement.name} laid to rest."],
        "objectives": [
            {"type": "reach", "target": "graveyard", "description": "Visit the graveyard at night"}
        ],
        "difficulty": "medium",
    },
    "drought": {
        "name": ["Water for {settlement.name}"],
        "type": "investigate",
        "description": ["{giver.name} asks you to find out why the river has dried up."],
        "objectives": [
            {"type": "reach", "target": "river_source", "description": "Find the river's source"}
        ],
        "difficulty": "medium",
    },
}

SECRET_QUESTS: Dict[str, Dict[str, Any]] = {
    "hidden_past": {
        "name": ["Buried Past"],
        "type": "investigate",
        "description": ["{npc.name} wants you to silence someone who knows their old name."],
        "objectives": [{"type": "talk", "target": "old_acquaintance", "description": "Find the stranger"}],
        "difficulty": "medium",
    },
    "debt": {
        "name": ["Paying What's Owed"],
        "type": "deliver",
        "description": ["{npc.name} needs a payment delivered before the lender loses patience."],
        "objectives": [{"type": "reach", "target": "lender", "description": "Deliver the payment"}],
        "difficulty": "easy",
    },
    "crime_witness": {
        "name": ["What {npc.name} Saw"],
        "type": "investigate",
        "description": ["{npc.name} will tell you what they saw, if you can keep them safe."],
        "objectives": [{"type": "protect", "target": "witness", "description": "Protect the witness"}],
        "difficulty": "medium",
    },
    "stolen_item": {
        "name": ["Return to Sender"],
        "type": "deliver",
        "description": ["{npc.name} wants a stolen trinket quietly returned."],
        "objectives": [{"type": "reach", "target": "owner", "description": "Return the item"}],
        "difficulty": "easy",
    },
    "cult_member": {
        "name": ["Beneath the Chapel"],
        "type": "investigate",
        "description": ["{npc.name} wants out of the cult, but fears what will happen."],
        "objectives": [{"type": "reach", "target": "cult_meeting", "description": "Find the gathering"}],
        "difficulty": "hard",
    },
    "treasure_map": {
        "name": ["X Marks the Spot"],
        "type": "fetch",
        "description": ["{npc.name} will share the treasure if you fetch it."],
        "objectives": [{"type": "find", "target": "treasure_cache", "description": "Find the cache"}],
        "difficulty": "medium",
    },
}

SECRET_QUEST_CHANCE = 0.3

SIDE_QUESTS: Dict[str, List[Dict[str, Any]]] = {
    "fetch": [
        {
            "name": ["Fetch Some {item.name}"],
            "type": "fetch",
            "description": ["{giver.name} needs some {item.name} brought back."],
            "objectives": [{"type": "collect", "target": "item", "quantity": 3, "description": "Collect the goods"}],
            "difficulty": "easy",
        }
    ],
    "deliver": [
        {
            "name": ["Package for {destination.name}"],
            "type": "deliver",
            "description": ["{giver.name} wants a parcel taken to {destination.name}."],
            "objectives": [{"type": "reach", "target": "destination", "description": "Deliver the parcel"}],
            "difficulty": "easy",
        }
    ],
    "gather": [
        {
            "name": ["Gathering {item.name}"],
            "type": "gather",
            "description": ["{giver.name} will pay for a bundle of {item.name}."],
            "objectives": [{"type": "collect", "target": "item", "quantity": 5, "description": "Gather materials"}],
            "difficulty": "easy",
        }
    ],
}

SIDE_QUEST_TYPES: List[str] = ["fetch", "deliver", "gather"]

# (minimum, spread)
SIDE_QUEST_COUNTS: Dict[str, tuple] = {"village": (0, 2), "town": (1, 2), "city": (2, 2)}

SIDE_QUEST_ITEMS: List[str] = [
    "herbs",
    "mushrooms",
    "firewood",
    "ore",
    "pelts",
    "fish",
    "berries",
    "crystals",
]

SIDE_QUEST_DESTINATIONS: List[str] = [
    "the nearby settlement",
    "the next town",
    "the old watchtower",
    "the crossroads shrine",
]

REWARD_SCALING: Dict[str, Dict[str, int]] = {
    "easy": {"gold": 20, "xp": 50},
    "medium": {"gold": 50, "xp": 150},
    "hard": {"gold": 120, "xp": 400},
}


def wealth_multiplier(wealth_level: int) -> float:
    """0.5x for the poorest settlements up to 2x for the richest."""
    return 0.5 + (max(1, min(10, wealth_level)) - 1) / 6.0
