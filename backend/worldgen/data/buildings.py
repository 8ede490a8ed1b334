"""Building types, names, descriptions, shop stock and services."""

from typing import Any, Dict, List

BUILDINGS_BY_SIZE: Dict[str, List[str]] = {
    "village": ["inn", "well", "residence", "residence"],
    "town": [
        "inn",
        "tavern",
        "blacksmith",
        "general_store",
        "temple",
        "town_hall",
        "guard_post",
        "residence",
        "residence",
    ],
    "city": [
        "inn",
        "tavern",
        "blacksmith",
        "general_store",
        "temple",
        "town_hall",
        "barracks",
        "manor",
        "market_stall",
        "market_stall",
        "stable",
        "residence",
        "residence",
        "residence",
    ],
}

BUILDINGS_BY_ECONOMY: Dict[str, List[str]] = {
    "farming": ["farm", "mill", "bakery"],
    "mining": ["mine_entrance"],
    "trading": ["warehouse", "market_stall"],
    "fishing": ["butcher"],
    "logging": ["mill"],
    "crafting": ["herbalist_shop"],
}

NAME_PATTERNS: Dict[str, List[str]] = {
    "inn": [
        "The {$Rusty|Golden|Prancing|Sleeping|Wandering} {$Tankard|Pony|Dragon|Lantern|Stag}",
        "{owner}'s Rest",
    ],
    "tavern": ["The {$Drunken|Laughing|Black} {$Goat|Barrel|Crow}", "{owner}'s Taproom"],
    "blacksmith": ["{owner}'s Forge", "The {$Iron|Red|Ringing} Anvil"],
    "general_store": ["{owner}'s Goods", "The {$Corner|Village|Old} Store"],
    "temple": ["Temple of the {$Dawn|Light|Harvest|Stars}", "The {$Old|Stone} Chapel"],
    "barracks": ["The Barracks"],
    "town_hall": ["The Town Hall", "The {$Moot|Council} Hall"],
    "stable": ["{owner}'s Stables"],
    "farm": ["{owner}'s Farm", "The {$Green|Low|Upper} Farmstead"],
    "mine_entrance": ["The {$Deep|Old|Copper} Mine"],
    "warehouse": ["{owner}'s Warehouse"],
    "market_stall": ["{owner}'s Stall", "A {$fruit|cloth|spice} stall"],
    "herbalist_shop": ["{owner}'s Remedies", "The {$Green|Healing} Leaf"],
    "bakery": ["{owner}'s Bakery", "The {$Warm|Golden} Loaf"],
    "butcher": ["{owner}'s Butchery"],
    "manor": ["{owner} Manor"],
    "guard_post": ["The Guard Post"],
    "mill": ["The {$Water|Wind|Old} Mill"],
}

OWNER_FIRST_NAMES: List[str] = [
    "Alaric",
    "Bram",
    "Cedric",
    "Darius",
    "Edgar",
    "Finn",
    "Gareth",
    "Harold",
    "Iris",
    "Jana",
    "Kara",
    "Lydia",
    "Mara",
    "Nora",
    "Olwen",
    "Petra",
]
OWNER_LAST_NAMES: List[str] = [
    "Smith",
    "Cooper",
    "Fletcher",
    "Mason",
    "Baker",
    "Miller",
    "Carter",
    "Wright",
]

DESCRIPTIONS: Dict[str, List[str]] = {
    "inn": [
        "A {$cosy|rambling|timber-framed} inn with smoke curling from its chimney.",
        "Laughter spills from the open door of this busy inn.",
    ],
    "tavern": ["A low-beamed tavern smelling of ale and woodsmoke."],
    "blacksmith": ["The ring of hammer on anvil echoes from this {$soot-stained|open-fronted} forge."],
    "general_store": ["Shelves crammed with rope, lanterns and dry goods."],
    "temple": ["A {$tall|modest|weathered} stone temple with a bell tower."],
    "barracks": ["Soldiers drill in the yard of a long stone barracks."],
    "town_hall": ["A grand hall where the council meets."],
    "stable": ["Horses stamp and whinny in their stalls."],
    "farm": ["Fields of {$wheat|barley|cabbages} surround a sturdy farmhouse."],
    "mine_entrance": ["A timber-braced tunnel leads into the hillside."],
    "warehouse": ["Crates and barrels are stacked high inside."],
    "market_stall": ["A striped awning shades a table of wares."],
    "herbalist_shop": ["Bundles of drying herbs hang from the rafters."],
    "bakery": ["The smell of fresh bread drifts from the ovens."],
    "butcher": ["Cuts of meat hang on hooks behind the counter."],
    "residence": ["A {$small|neat|ramshackle} house with a {$tidy|overgrown} garden."],
    "manor": ["A walled manor house with tall glazed windows."],
    "guard_post": ["A small stone post watches over the road."],
    "well": ["A stone well with a wooden bucket on a rope."],
    "mill": ["A great wheel turns slowly beside the mill."],
}

ALWAYS_LARGE: List[str] = ["town_hall", "manor", "temple"]
ALWAYS_SMALL: List[str] = ["market_stall", "well", "residence"]

# Shop stock before wealth scaling
INVENTORIES: Dict[str, List[Dict[str, Any]]] = {
    "blacksmith": [
        {"item_id": "iron_sword", "base_price": 50, "restock_days": 7},
        {"item_id": "leather_armor", "base_price": 40, "restock_days": 7},
        {"item_id": "pickaxe", "base_price": 15, "restock_days": 5},
    ],
    "general_store": [
        {"item_id": "torch", "base_price": 2, "restock_days": 1},
        {"item_id": "rope", "base_price": 4, "restock_days": 3},
        {"item_id": "woodcutters_axe", "base_price": 15, "restock_days": 5},
        {"item_id": "bread", "base_price": 2, "restock_days": 1},
    ],
    "herbalist_shop": [
        {"item_id": "healing_herb", "base_price": 5, "restock_days": 2},
        {"item_id": "health_potion", "base_price": 25, "restock_days": 4},
    ],
    "bakery": [{"item_id": "bread", "base_price": 2, "restock_days": 1}],
    "market_stall": [
        {"item_id": "bread", "base_price": 3, "restock_days": 1},
        {"item_id": "healing_herb", "base_price": 6, "restock_days": 2},
    ],
    "temple": [{"item_id": "health_potion", "base_price": 30, "restock_days": 7}],
}

INVENTORY_QUANTITY_BASE: Dict[str, int] = {"blacksmith": 2, "herbalist_shop": 5}
DEFAULT_QUANTITY_BASE = 10

SERVICES: Dict[str, List[str]] = {
    "inn": ["rest", "food", "drink", "rumors"],
    "tavern": ["food", "drink", "rumors"],
    "blacksmith": ["repair", "forge"],
    "general_store": ["buy", "sell"],
    "temple": ["healing", "blessing"],
    "stable": ["stabling", "horse_hire"],
    "town_hall": ["bounties"],
    "market_stall": ["buy", "sell"],
    "herbalist_shop": ["buy", "sell", "identify_herbs"],
    "bakery": ["buy"],
    "butcher": ["buy"],
    "well": ["water"],
}

NPC_ROLE_TO_BUILDING: Dict[str, str] = {
    "innkeeper": "inn",
    "tavern_keeper": "tavern",
    "blacksmith": "blacksmith",
    "merchant": "general_store",
    "guard": "guard_post",
    "mayor": "town_hall",
    "priest": "temple",
    "farmer": "farm",
    "miner": "mine_entrance",
    "herbalist": "herbalist_shop",
    "baker": "bakery",
    "butcher": "butcher",
    "healer": "temple",
    "noble": "manor",
}
