"""Settlement naming, population, problem and history tables."""

from typing import Dict, List, Tuple

CULTURES: List[str] = ["frontier", "religious", "merchant", "military", "pastoral"]

ECONOMIES: List[str] = ["farming", "mining", "trading", "fishing", "logging", "crafting"]

# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

NAME_PREFIXES: Dict[str, List[str]] = {
    "frontier": ["Fort", "Camp", "Last", "Far"],
    "religious": ["Saint", "Holy", "Blessed", "Temple"],
    "merchant": ["Port", "Market", "Golden", "New"],
    "military": ["Fort", "Castle", "Watch", "Shield"],
    "pastoral": ["Little", "Green", "Old", "Upper"],
}

NAME_ROOTS: Dict[str, List[str]] = {
    "frontier": ["hawk", "wolf", "stone", "pine", "iron", "ash", "thorn", "frost"],
    "religious": ["light", "dawn", "grace", "hope", "mercy", "shrine", "bell", "vigil"],
    "merchant": ["coin", "gold", "silver", "cross", "bridge", "wharf", "salt", "amber"],
    "military": ["guard", "spear", "helm", "banner", "steel", "tower", "wall", "brand"],
    "pastoral": ["mill", "oak", "meadow", "clover", "willow", "barley", "brook", "fern"],
}

NAME_SUFFIXES: List[str] = [
    "ford",
    "brook",
    "haven",
    "ton",
    "wick",
    "dale",
    "field",
    "bury",
    "stead",
    "hollow",
    "ridge",
    "moor",
]

# ---------------------------------------------------------------------------
# Size tables
# ---------------------------------------------------------------------------

POPULATION_RANGES: Dict[str, Tuple[int, int]] = {
    "village": (50, 300),
    "town": (300, 2000),
    "city": (2000, 10000),
}

# (minimum, spread): economy count = minimum + floor(rng * spread)
ECONOMY_COUNTS: Dict[str, Tuple[int, int]] = {
    "village": (1, 2),
    "town": (2, 2),
    "city": (3, 2),
}

BASE_WEALTH: Dict[str, int] = {"village": 3, "town": 5, "city": 7}
WEALTH_ECONOMIES: List[str] = ["trading", "mining"]

BASE_DEFENSE: Dict[str, int] = {"village": 2, "town": 4, "city": 6}
DEFENSE_CULTURE_BONUS: Dict[str, int] = {"military": 2, "frontier": 1}

FOUNDED_BASE_YEARS: Dict[str, int] = {"village": 50, "town": 100, "city": 200}

# ---------------------------------------------------------------------------
# Problems
# ---------------------------------------------------------------------------

PROBLEM_CHANCE_NONE = 0.4

PROBLEMS: Dict[str, Dict[str, List[str]]] = {
    "bandit_raids": {
        "short": [
            "bandit raids on the {$northern|southern|eastern|western} road",
            "outlaws preying on travellers",
        ],
        "long": [
            "For {duration_days} days, bandits have ambushed caravans on the road. "
            "Trade has slowed to a trickle.",
            "A gang of {$masked|ruthless|well-armed} outlaws has been raiding outlying "
            "farms for {duration_days} days.",
        ],
    },
    "monster_threat": {
        "short": [
            "a {$beast|creature|horror} stalking the outskirts",
            "livestock torn apart in the night",
        ],
        "long": [
            "Something has been killing livestock for {duration_days} days. The tracks "
            "are too large for any wolf.",
            "Hunters who went looking for the {$beast|creature|thing} in the woods have "
            "not returned.",
        ],
    },
    "plague": {
        "short": ["a wasting sickness", "a fever spreading house to house"],
        "long": [
            "A sickness has spread through the streets for {duration_days} days. The "
            "healers are overwhelmed.",
            "{$Dozens|Many|Several} families have fallen ill, and no remedy has worked.",
        ],
    },
    "famine": {
        "short": ["failing harvests", "empty granaries"],
        "long": [
            "Blight has ruined the crops. Food has been rationed for {duration_days} days.",
            "The granaries are nearly empty, and prices at market have tripled.",
        ],
    },
    "corruption": {
        "short": ["a corrupt official", "bribes and broken promises"],
        "long": [
            "Someone in authority has been taking bribes, and the people have noticed.",
            "For {duration_days} days, taxes have gone missing before reaching the treasury.",
        ],
    },
    "missing_persons": {
        "short": ["townsfolk vanishing at night", "missing children"],
        "long": [
            "{$Three|Four|Five} people have vanished in the last {duration_days} days, "
            "leaving no trace.",
            "People walk in pairs after dark since the disappearances began.",
        ],
    },
    "haunting": {
        "short": ["restless spirits", "strange lights in the graveyard"],
        "long": [
            "Lights drift through the graveyard at night, and voices whisper from empty houses.",
            "For {duration_days} days, the dead have not rested easy here.",
        ],
    },
    "drought": {
        "short": ["a long drought", "wells running dry"],
        "long": [
            "No rain has fallen for {duration_days} days. The wells are running dry.",
            "The river has shrunk to a muddy trickle and the fields are cracking.",
        ],
    },
}

PROBLEM_TYPES: List[str] = list(PROBLEMS)

SEVERITIES: List[str] = ["minor", "moderate", "severe"]

# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------

HISTORY: Dict[str, List[str]] = {
    "founding": [
        "Founded {years_ago} years ago by {$settlers|pilgrims|traders|soldiers} seeking "
        "a new home.",
        "Established {years_ago} years ago around a {$crossroads|spring|mine|shrine}.",
    ],
    "disaster": [
        "A great fire swept through {years_ago} years ago.",
        "Floods destroyed much of the settlement {years_ago} years ago.",
    ],
    "prosperity": [
        "A rich vein of ore was struck {years_ago} years ago, bringing wealth.",
        "A new trade route opened {years_ago} years ago.",
    ],
    "conflict": [
        "Raiders besieged the walls {years_ago} years ago.",
        "A bitter feud between two families erupted {years_ago} years ago.",
    ],
    "discovery": [
        "Ancient ruins were uncovered nearby {years_ago} years ago.",
        "A healing spring was found {years_ago} years ago.",
    ],
}

HISTORY_EVENT_TYPES: List[str] = ["disaster", "prosperity", "conflict", "discovery"]

# ---------------------------------------------------------------------------
# Room descriptions
# ---------------------------------------------------------------------------

CULTURE_PHRASES: Dict[str, str] = {
    "frontier": "frontier settlement on the edge of the wilds",
    "religious": "devout community gathered around its faith",
    "merchant": "bustling hub of trade",
    "military": "fortified stronghold",
    "pastoral": "quiet farming community",
}

PEACEFUL_PHRASES: List[str] = [
    "Life here seems peaceful.",
    "The people go about their business calmly.",
    "All seems well here.",
]
