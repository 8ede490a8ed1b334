"""NPC roles, names, personalities, greetings and secrets."""

from typing import Dict, List

# Roles every settlement of a size has
MIN_ROLES: Dict[str, List[str]] = {
    "village": ["innkeeper", "farmer"],
    "town": ["innkeeper", "blacksmith", "merchant", "guard", "priest"],
    "city": [
        "innkeeper",
        "tavern_keeper",
        "blacksmith",
        "merchant",
        "guard",
        "guard",
        "priest",
        "healer",
        "scholar",
        "noble",
    ],
}

ROLES_BY_ECONOMY: Dict[str, List[str]] = {
    "farming": ["farmer", "baker"],
    "mining": ["miner"],
    "trading": ["merchant"],
    "fishing": ["butcher"],
    "logging": ["hunter"],
    "crafting": ["blacksmith", "herbalist"],
}

# (minimum, spread) of generic extra NPCs
EXTRA_NPCS: Dict[str, tuple] = {
    "village": (0, 2),
    "town": (2, 3),
    "city": (5, 5),
}

GENERIC_ROLES: List[str] = ["farmer", "hunter", "beggar", "merchant"]

# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

FIRST_NAMES: Dict[str, Dict[str, List[str]]] = {
    "male": {
        "frontier": ["Bram", "Cole", "Dirk", "Garrett", "Hale", "Wade"],
        "religious": ["Anselm", "Benedict", "Elias", "Matthias", "Tobias", "Silas"],
        "merchant": ["Aldo", "Cosimo", "Lorenzo", "Marco", "Piet", "Ruben"],
        "military": ["Brandt", "Conrad", "Gunther", "Roderick", "Ulric", "Viktor"],
        "pastoral": ["Alfie", "Bartholomew", "Hob", "Jory", "Ned", "Wat"],
    },
    "female": {
        "frontier": ["Ada", "Jessa", "Kit", "Maren", "Rowan", "Tess"],
        "religious": ["Agnes", "Cecily", "Honora", "Miriam", "Prudence", "Sabine"],
        "merchant": ["Bianca", "Clara", "Giulia", "Liesel", "Nell", "Vera"],
        "military": ["Brunhild", "Freya", "Gerda", "Hilde", "Sigrid", "Wilma"],
        "pastoral": ["Bess", "Daisy", "Elsie", "Mab", "Poppy", "Rose"],
    },
}

SURNAMES: Dict[str, List[str]] = {
    "occupational": ["Smith", "Cooper", "Fletcher", "Mason", "Baker", "Miller", "Thatcher"],
    "locational": ["Hill", "Brook", "Ashdown", "Woods", "Marsh", "Fairfield", "Stone"],
    "descriptive": ["Black", "Long", "Strong", "Young", "Redd", "Swift", "Little"],
}

# ---------------------------------------------------------------------------
# Personality and greetings
# ---------------------------------------------------------------------------

DEFAULT_PERSONALITY: List[str] = ["friendly", "gruff", "talkative"]

PERSONALITY_BY_ROLE: Dict[str, List[str]] = {
    "innkeeper": ["friendly", "talkative", "cheerful", "gruff"],
    "tavern_keeper": ["talkative", "boastful", "gruff", "cheerful"],
    "blacksmith": ["gruff", "humble", "boastful"],
    "merchant": ["friendly", "talkative", "suspicious", "boastful"],
    "guard": ["gruff", "suspicious", "boastful"],
    "mayor": ["boastful", "friendly", "nervous", "secretive"],
    "priest": ["humble", "friendly", "melancholy"],
    "farmer": ["humble", "cheerful", "gruff"],
    "miner": ["gruff", "cheerful", "melancholy"],
    "hunter": ["gruff", "suspicious", "humble"],
    "herbalist": ["secretive", "friendly", "nervous"],
    "baker": ["cheerful", "friendly", "talkative"],
    "butcher": ["gruff", "cheerful"],
    "healer": ["humble", "friendly", "melancholy"],
    "scholar": ["talkative", "nervous", "secretive"],
    "beggar": ["melancholy", "nervous", "talkative"],
    "noble": ["boastful", "suspicious", "secretive"],
}

GREETINGS: Dict[str, Dict[str, List[str]]] = {
    "innkeeper": {
        "friendly": [
            "Welcome to {settlement.name}, traveller! Need a room?",
            "Come in, come in! Warm beds and hot stew tonight.",
        ],
        "gruff": ["Room's five silver. Food's extra."],
        "talkative": ["Ah, a new face! You'll want to hear what's been happening in {settlement.name}."],
    },
    "tavern_keeper": {
        "cheerful": ["Pull up a stool! First drink's {$half price|on the house}."],
        "gruff": ["Drinking or leaving?"],
    },
    "blacksmith": {
        "gruff": ["Need something forged? Don't waste my time."],
        "boastful": ["Finest steel in {settlement.name}, and that's no lie."],
        "humble": ["I do honest work. What can I make for you?"],
    },
    "merchant": {
        "friendly": ["Looking to buy? I've {$fine|rare|useful} wares today."],
        "suspicious": ["Hands where I can see them. What do you want?"],
        "talkative": ["You won't find better prices this side of {settlement.name}!"],
    },
    "guard": {
        "gruff": ["Move along. No trouble in {settlement.name}."],
        "suspicious": ["Haven't seen you before. State your business."],
    },
    "mayor": {
        "friendly": ["Welcome to {settlement.name}. We're glad of visitors."],
        "nervous": ["Ah, a visitor. These are... difficult times."],
        "boastful": ["You stand in the finest settlement in the region."],
    },
    "priest": {
        "humble": ["Peace be with you, traveller."],
        "friendly": ["The temple doors are always open."],
    },
    "farmer": {
        "cheerful": ["Fine weather for it, eh?"],
        "humble": ["Don't mind me, just tending the fields."],
    },
    "miner": {"gruff": ["Mind the dust."], "cheerful": ["Struck a good seam today!"]},
    "hunter": {"suspicious": ["Tread quiet. You'll scare the game."]},
    "herbalist": {"secretive": ["Looking for remedies? Or something else?"]},
    "baker": {"cheerful": ["Fresh bread, still warm!"]},
    "butcher": {"gruff": ["Best cuts go early."]},
    "healer": {"humble": ["Are you hurt? Let me see."]},
    "scholar": {"talkative": ["Did you know {settlement.name} was built on older ruins?"]},
    "beggar": {"melancholy": ["Spare a coin, friend?"]},
    "noble": {"boastful": ["Do you know who I am?"]},
}

DIALOGUE_TOPICS: Dict[str, List[str]] = {
    "innkeeper": ["rooms", "rumors", "food", "local_news"],
    "tavern_keeper": ["drinks", "rumors", "local_news"],
    "blacksmith": ["weapons", "armor", "repairs"],
    "merchant": ["trade", "prices", "travel"],
    "guard": ["law", "threats", "directions"],
    "mayor": ["settlement", "problems", "history"],
    "priest": ["faith", "healing", "history"],
    "farmer": ["crops", "weather"],
    "miner": ["mines", "ore"],
    "hunter": ["wildlife", "directions"],
    "herbalist": ["herbs", "remedies"],
    "healer": ["healing", "sickness"],
    "scholar": ["history", "ruins", "lore"],
    "noble": ["politics", "family"],
}

ROLE_WEALTH: Dict[str, int] = {
    "noble": 9,
    "mayor": 7,
    "merchant": 6,
    "scholar": 5,
    "priest": 5,
    "blacksmith": 5,
    "innkeeper": 5,
    "tavern_keeper": 4,
    "healer": 4,
    "baker": 4,
    "butcher": 4,
    "guard": 3,
    "farmer": 3,
    "miner": 3,
    "hunter": 3,
    "herbalist": 3,
    "beggar": 1,
}

# ---------------------------------------------------------------------------
# Secrets and relationships
# ---------------------------------------------------------------------------

SECRETS: Dict[str, List[str]] = {
    "hidden_past": [
        "Once rode with a band of {$mercenaries|smugglers|pirates}.",
        "Fled another town under a different name.",
    ],
    "debt": ["Owes a {$dangerous|powerful|patient} lender a great deal of money."],
    "crime_witness": ["Saw something in the alley that they cannot forget."],
    "stolen_item": ["Keeps a stolen {$ring|amulet|ledger} hidden under the floor."],
    "cult_member": ["Attends secret gatherings beneath the old chapel."],
    "treasure_map": ["Holds a map to a cache hidden in the {$hills|caves|ruins}."],
}

SECRET_CHANCE = 0.3
HIGH_SECRET_CHANCE_ROLES: List[str] = ["beggar"]
HIGH_SECRET_CHANCE = 0.5

REVEAL_CONDITIONS: List[str] = [
    "if offered gold",
    "if threatened",
    "if befriended",
    "after several drinks",
    "if you help them first",
    "in a moment of weakness",
]

MAX_RELATIONSHIPS: Dict[str, int] = {"mayor": 5, "innkeeper": 4, "guard": 3}
DEFAULT_MAX_RELATIONSHIPS = 2

RELATIONSHIP_DESCRIPTIONS: Dict[str, List[str]] = {
    "family": ["{other} is their {relation}", "related to {other}"],
    "friend": ["good friends with {other}", "has known {other} for years"],
    "rival": ["competes with {other} for business", "has a long-standing rivalry with {other}"],
    "business": ["does business with {other}", "trades regularly with {other}"],
}
