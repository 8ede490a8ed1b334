"""Room names, room descriptions and exit descriptions.

Exit descriptions name what lies beyond when it is known:

    destination                      cardinal                       vertical
    settlement (cached or not)       "Millbrook (town) to the east"  "... lies above"
    other cached room                "Grassy Meadow to the north"    "Deep Cave lies below"
    unknown                          biome hint                      fixed passage text

An ungenerated settlement is named with the settlement generator's own
naming function, so the preview always matches the eventual name.
"""

from __future__ import annotations

from typing import List, Optional

from . import templates
from .base import Biome, GeneratedRoom
from .coords import is_vertical
from .data import settlements as settlement_data
from .data.buildings import NAME_PATTERNS
from .rng import SeedOffset, choice, offset_seed, stream
from .settlements.base import Building, Settlement

UPWARD_PASSAGE = "A passage leads upward"
DOWNWARD_PASSAGE = "A passage descends into darkness"
DEFAULT_EXIT_HINT = "Unexplored terrain to the {direction}"

# Unexplored exits leaving a settlement
SETTLEMENT_EXIT_HINTS: List[str] = [
    "A road leads {direction}",
    "A worn path heads {direction}",
    "The track continues {direction}",
]

MAX_LISTED_BUILDINGS = 4


# ---------------------------------------------------------------------------
# Exits
# ---------------------------------------------------------------------------


def _named_exit(name: str, direction: str) -> str:
    if is_vertical(direction):
        return f"{name} lies {'above' if direction == 'up' else 'below'}"
    return f"{name} to the {direction}"


def describe_exit(
    direction: str,
    destination: Optional[GeneratedRoom] = None,
    settlement_preview: Optional[tuple] = None,
    origin_biome: Optional[Biome] = None,
    seed: int = 0,
) -> str:
    """Describe the exit leaving in ``direction``.

    Args:
        direction: exit direction from the origin room.
        destination: the cached room the exit leads to, if any.
        settlement_preview: ``(name, size)`` when the destination is an
            ungenerated settlement location.
        origin_biome: biome of the room the exit leaves; None for settlements.
        seed: origin room seed, used only to pick settlement road flavor.

    Returns:
        A short description such as ``"Millbrook (village) to the east"``.
    """
    if destination is not None and destination.settlement is not None:
        settlement = destination.settlement.settlement
        return _named_exit(f"{settlement.name} ({settlement.size})", direction)
    if destination is not None:
        return _named_exit(destination.name, direction)
    if settlement_preview is not None:
        name, size = settlement_preview
        return _named_exit(f"{name} ({size})", direction)
    if is_vertical(direction):
        return UPWARD_PASSAGE if direction == "up" else DOWNWARD_PASSAGE
    if origin_biome is not None:
        hint = origin_biome.exit_hint or DEFAULT_EXIT_HINT
    else:
        hint = choice(stream(offset_seed(seed, SeedOffset.EXIT_FLAVOR)), SETTLEMENT_EXIT_HINTS)
    return hint.format(direction=direction)


# ---------------------------------------------------------------------------
# Wilderness rooms
# ---------------------------------------------------------------------------


def wilderness_name(biome: Biome, seed: int) -> str:
    name_seed = offset_seed(seed, SeedOffset.NAME)
    return templates.render(choice(stream(name_seed), biome.name_templates), {}, name_seed)


def wilderness_description(biome: Biome, seed: int) -> str:
    desc_seed = offset_seed(seed, SeedOffset.DESCRIPTION)
    return templates.render(
        choice(stream(desc_seed), biome.description_templates), {}, desc_seed
    )


# ---------------------------------------------------------------------------
# Settlement rooms
# ---------------------------------------------------------------------------


def join_names(names: List[str], limit: int = MAX_LISTED_BUILDINGS) -> str:
    """Join names as prose: "A", "A and B", "A, B, and C", "A, B, C, and D (+2 more)"."""
    shown = names[:limit]
    extra = len(names) - len(shown)
    if not shown:
        return ""
    if len(shown) == 1:
        text = shown[0]
    elif len(shown) == 2:
        text = f"{shown[0]} and {shown[1]}"
    else:
        text = ", ".join(shown[:-1]) + f", and {shown[-1]}"
    if extra > 0:
        text += f" (+{extra} more)"
    return text


def visible_buildings(buildings: List[Building]) -> List[Building]:
    """Buildings worth naming from the street; plain houses and wells are not."""
    return [b for b in buildings if b.type in NAME_PATTERNS]


def settlement_description(
    settlement: Settlement, buildings: List[Building], seed: int
) -> str:
    culture_phrase = settlement_data.CULTURE_PHRASES.get(settlement.culture, "settlement")
    parts = [f"You arrive at {settlement.name}, a {settlement.size} {culture_phrase}."]
    if settlement.problem is not None:
        parts.append(f"The people here are troubled by {settlement.problem.short_description}.")
    else:
        rng = stream(offset_seed(seed, SeedOffset.DESCRIPTION))
        parts.append(choice(rng, settlement_data.PEACEFUL_PHRASES))
    listed = join_names([b.name for b in visible_buildings(buildings)])
    if listed:
        parts.append(f"You can see: {listed}.")
    return " ".join(parts)
