"""Bundled biome, item, enemy and resource definitions.

These are the defaults the DefinitionCatalog serves when no override store
is configured, or when the store has no record for an id.
"""

from typing import Any, Dict, List

# ---------------------------------------------------------------------------
# Biomes
# ---------------------------------------------------------------------------

BIOMES: List[Dict[str, Any]] = [
    {
        "id": "wilderness",
        "name": "Wilderness",
        "name_templates": [
            "Windswept Clearing",
            "Grassy Meadow",
            "Overgrown Trail",
            "Forest Edge",
            "Rolling Hills",
            "Wild Grove",
            "Open Grassland",
            "Wooded Thicket",
        ],
        "description_templates": [
            "Tall grasses sway in the breeze across an open expanse. Scattered wildflowers "
            "dot the landscape, and birds circle overhead.",
            "A clearing surrounded by towering trees. Sunlight filters through the canopy, "
            "dappling the ground with light and shadow.",
            "The trail here is barely visible, overgrown with vegetation. Nature has "
            "reclaimed this path long ago.",
            "You stand at the edge of a dense forest. The trees create a natural wall, but "
            "gaps between them suggest possible paths.",
        ],
        "base_encounter_chance": 0.3,
        "exit_hint": "Wilderness to the {direction}",
    },
    {
        "id": "caves",
        "name": "Caves",
        "name_templates": [
            "Dark Tunnel",
            "Cave Passage",
            "Underground Chamber",
            "Stone Cavern",
            "Crystal Grotto",
            "Echoing Hall",
            "Mineral Vein",
            "Deep Cave",
        ],
        "description_templates": [
            "The rough stone walls glisten with moisture. The air is cool and still, broken "
            "only by the occasional drip of water.",
            "Jagged rock formations jut from the floor and ceiling. Your footsteps echo in "
            "the darkness.",
            "A vast cavern opens before you, its ceiling lost in shadow. Strange rock "
            "formations create natural pillars.",
            "Crystals embedded in the walls catch what little light exists, casting "
            "prismatic patterns across the stone.",
        ],
        "base_encounter_chance": 0.4,
        "exit_hint": "A dark tunnel leads {direction}",
    },
    {
        "id": "ruins",
        "name": "Ruins",
        "name_templates": [
            "Crumbling Courtyard",
            "Ancient Hall",
            "Ruined Temple",
            "Collapsed Tower",
            "Forgotten Plaza",
            "Overgrown Ruins",
            "Broken Sanctuary",
            "Lost Archives",
        ],
        "description_templates": [
            "Weathered stone structures stand as silent monuments to a forgotten age. Vines "
            "and moss cover ancient carvings.",
            "Marble columns lie broken across the ground. Whatever grandeur this place once "
            "held is now a distant memory.",
            "Faded murals on crumbling walls hint at the civilization that built this place. "
            "Time has not been kind.",
            "Archways lead to chambers choked with rubble. The architecture suggests this "
            "was once a place of great importance.",
        ],
        "base_encounter_chance": 0.35,
        "exit_hint": "Crumbling ruins to the {direction}",
    },
]

# biome id -> biome ids allowed next to it
COMPATIBILITY: Dict[str, List[str]] = {
    "wilderness": ["wilderness", "caves", "ruins"],
    "caves": ["wilderness", "caves"],
    "ruins": ["wilderness", "ruins"],
}

# ---------------------------------------------------------------------------
# Content definitions
# ---------------------------------------------------------------------------

ITEMS: List[Dict[str, Any]] = [
    {
        "id": "healing_herb",
        "name": "Healing Herb",
        "description": "A fragrant green herb with mild restorative properties.",
        "type": "consumable",
        "effect": {"heal": 10},
        "value": 5,
    },
    {
        "id": "health_potion",
        "name": "Health Potion",
        "description": "A small vial of red liquid that mends wounds.",
        "type": "consumable",
        "effect": {"heal": 30},
        "value": 25,
    },
    {
        "id": "greater_health_potion",
        "name": "Greater Health Potion",
        "description": "A large flask of glowing crimson tonic.",
        "type": "consumable",
        "effect": {"heal": 75},
        "value": 80,
    },
    {
        "id": "gold_pouch",
        "name": "Gold Pouch",
        "description": "A worn leather pouch that clinks with coins.",
        "type": "treasure",
        "value": 20,
    },
    {
        "id": "gold_pile",
        "name": "Pile of Gold",
        "description": "A glittering heap of old coins.",
        "type": "treasure",
        "value": 100,
    },
    {
        "id": "mushroom",
        "name": "Cave Mushroom",
        "description": "A pale, spongy mushroom. Edible, mostly.",
        "type": "consumable",
        "effect": {"heal": 5},
        "value": 3,
    },
    {
        "id": "torch",
        "name": "Torch",
        "description": "A pitch-soaked torch that burns for hours.",
        "type": "tool",
        "equip_slot": "offhand",
        "value": 2,
    },
    {
        "id": "iron_sword",
        "name": "Iron Sword",
        "description": "A plain but sturdy blade.",
        "type": "equipment",
        "equip_slot": "weapon",
        "effect": {"attack": 5},
        "value": 50,
    },
    {
        "id": "leather_armor",
        "name": "Leather Armor",
        "description": "Boiled leather, stitched for a hunter.",
        "type": "equipment",
        "equip_slot": "body",
        "effect": {"defense": 3},
        "value": 40,
    },
    {
        "id": "pickaxe",
        "name": "Pickaxe",
        "description": "A miner's pick, heavy at the head.",
        "type": "tool",
        "equip_slot": "weapon",
        "value": 15,
    },
    {
        "id": "woodcutters_axe",
        "name": "Woodcutter's Axe",
        "description": "A broad axe made for felling trees.",
        "type": "tool",
        "equip_slot": "weapon",
        "value": 15,
    },
    {
        "id": "bread",
        "name": "Loaf of Bread",
        "description": "Dense, brown and filling.",
        "type": "consumable",
        "effect": {"heal": 8},
        "value": 2,
    },
    {
        "id": "rope",
        "name": "Coil of Rope",
        "description": "Fifty feet of hemp rope.",
        "type": "tool",
        "value": 4,
    },
]

ENEMIES: List[Dict[str, Any]] = [
    {
        "id": "forest_spider",
        "name": "Forest Spider",
        "description": "A spider the size of a dog, lurking in the undergrowth.",
        "health": 15,
        "attack": 4,
        "defense": 1,
        "xp_reward": 10,
        "loot_table": [],
    },
    {
        "id": "wild_wolf",
        "name": "Wild Wolf",
        "description": "A lean grey wolf with hungry eyes.",
        "health": 20,
        "attack": 5,
        "defense": 2,
        "xp_reward": 15,
        "loot_table": [],
    },
    {
        "id": "goblin",
        "name": "Goblin",
        "description": "A wiry green creature clutching a rusty blade.",
        "health": 25,
        "attack": 6,
        "defense": 2,
        "xp_reward": 20,
        "loot_table": ["gold_pouch"],
    },
    {
        "id": "bandit",
        "name": "Bandit",
        "description": "A masked outlaw who wants your purse.",
        "health": 35,
        "attack": 8,
        "defense": 3,
        "xp_reward": 35,
        "loot_table": ["gold_pouch", "health_potion"],
    },
    {
        "id": "cave_bat",
        "name": "Cave Bat",
        "description": "A screeching bat that swoops from the dark.",
        "health": 10,
        "attack": 3,
        "defense": 1,
        "xp_reward": 8,
        "loot_table": [],
    },
    {
        "id": "giant_spider",
        "name": "Giant Spider",
        "description": "A bloated spider with venom dripping from its fangs.",
        "health": 50,
        "attack": 10,
        "defense": 4,
        "xp_reward": 50,
        "loot_table": [],
    },
    {
        "id": "goblin_chief",
        "name": "Goblin Chief",
        "description": "A scarred goblin wearing a crown of bones.",
        "health": 80,
        "attack": 14,
        "defense": 6,
        "xp_reward": 120,
        "loot_table": ["gold_pile", "iron_sword"],
    },
    {
        "id": "stone_golem",
        "name": "Stone Golem",
        "description": "An ancient guardian of carved stone, slow and relentless.",
        "health": 120,
        "attack": 16,
        "defense": 10,
        "xp_reward": 200,
        "loot_table": ["gold_pile"],
    },
]

RESOURCES: List[Dict[str, Any]] = [
    {
        "id": "oak_tree",
        "name": "Oak Tree",
        "description": "A sturdy oak, good for timber.",
        "required_tool": "woodcutters_axe",
        "yields": ["oak_log"],
        "respawn_seconds": 300,
    },
    {
        "id": "berry_bush",
        "name": "Berry Bush",
        "description": "A bush heavy with ripe berries.",
        "required_tool": None,
        "yields": ["berries"],
        "respawn_seconds": 120,
    },
    {
        "id": "copper_vein",
        "name": "Copper Vein",
        "description": "Green-streaked rock rich with copper.",
        "required_tool": "pickaxe",
        "yields": ["copper_ore"],
        "respawn_seconds": 600,
    },
    {
        "id": "iron_vein",
        "name": "Iron Vein",
        "description": "Rust-red seams of iron ore run through the stone.",
        "required_tool": "pickaxe",
        "yields": ["iron_ore"],
        "respawn_seconds": 900,
    },
    {
        "id": "coal_deposit",
        "name": "Coal Deposit",
        "description": "A black, crumbly seam of coal.",
        "required_tool": "pickaxe",
        "yields": ["coal"],
        "respawn_seconds": 600,
    },
]

# ---------------------------------------------------------------------------
# Spawn pools
# ---------------------------------------------------------------------------

ENEMY_POOLS: List[Dict[str, Any]] = [
    # Wilderness
    {"biome": "wilderness", "id": "forest_spider", "min": 1, "max": 3, "weight": 3},
    {"biome": "wilderness", "id": "wild_wolf", "min": 1, "max": 4, "weight": 3},
    {"biome": "wilderness", "id": "goblin", "min": 2, "max": 5, "weight": 2},
    {"biome": "wilderness", "id": "bandit", "min": 3, "max": 7, "weight": 2},
    # Caves
    {"biome": "caves", "id": "cave_bat", "min": 1, "max": 4, "weight": 4},
    {"biome": "caves", "id": "goblin", "min": 1, "max": 6, "weight": 3},
    {"biome": "caves", "id": "giant_spider", "min": 3, "max": 8, "weight": 2},
    {"biome": "caves", "id": "goblin_chief", "min": 5, "max": 10, "weight": 1},
    # Ruins
    {"biome": "ruins", "id": "goblin", "min": 2, "max": 6, "weight": 3},
    {"biome": "ruins", "id": "bandit", "min": 3, "max": 8, "weight": 2},
    {"biome": "ruins", "id": "stone_golem", "min": 6, "max": 10, "weight": 1},
]

ITEM_POOLS: List[Dict[str, Any]] = [
    # Wilderness
    {"biome": "wilderness", "id": "healing_herb", "min": 1, "max": 10, "weight": 5},
    {"biome": "wilderness", "id": "health_potion", "min": 2, "max": 10, "weight": 3},
    {"biome": "wilderness", "id": "gold_pouch", "min": 1, "max": 10, "weight": 2},
    # Caves
    {"biome": "caves", "id": "mushroom", "min": 1, "max": 10, "weight": 4},
    {"biome": "caves", "id": "torch", "min": 1, "max": 10, "weight": 3},
    {"biome": "caves", "id": "health_potion", "min": 3, "max": 10, "weight": 2},
    {"biome": "caves", "id": "gold_pouch", "min": 2, "max": 10, "weight": 2},
    # Ruins
    {"biome": "ruins", "id": "health_potion", "min": 2, "max": 10, "weight": 3},
    {"biome": "ruins", "id": "greater_health_potion", "min": 5, "max": 10, "weight": 2},
    {"biome": "ruins", "id": "gold_pouch", "min": 3, "max": 10, "weight": 3},
    {"biome": "ruins", "id": "gold_pile", "min": 6, "max": 10, "weight": 1},
]

# Resources ignore difficulty
RESOURCE_POOLS: List[Dict[str, Any]] = [
    {"biome": "wilderness", "id": "oak_tree", "weight": 3},
    {"biome": "wilderness", "id": "berry_bush", "weight": 2},
    {"biome": "caves", "id": "copper_vein", "weight": 3},
    {"biome": "caves", "id": "iron_vein", "weight": 2},
    {"biome": "caves", "id": "coal_deposit", "weight": 2},
    {"biome": "ruins", "id": "iron_vein", "weight": 1},
]
