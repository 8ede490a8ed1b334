"""Settlement generation: the first stage of the settlement pipeline.

Each property is drawn from its own salted coordinate seed, so the name
of a settlement can be previewed (see :func:`preview_name`) without
generating anything else, and always matches the full generation.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .. import templates
from ..data import settlements as data
from ..rng import choice, salted_seed, shuffled, stream
from .base import HistoricalEvent, Settlement, SettlementProblem

logger = logging.getLogger(__name__)


def settlement_id(x: int, y: int, z: int) -> str:
    return f"settlement_{x}_{y}_{z}"


# ---------------------------------------------------------------------------
# Culture and name
# ---------------------------------------------------------------------------


def generate_culture(seed: int) -> str:
    return choice(stream(seed), data.CULTURES)


def generate_name(seed: int, culture: str) -> str:
    """Compose an optional culture prefix, a root and an optional suffix."""
    rng = stream(seed)
    prefixes = data.NAME_PREFIXES.get(culture, [])
    roots = data.NAME_ROOTS.get(culture, [])

    name = ""
    if rng() < 0.5 and prefixes:
        name += choice(rng, prefixes) + " "
    if roots:
        root = choice(rng, roots)
        name += root[0].upper() + root[1:]
    if rng() < 0.6 and data.NAME_SUFFIXES:
        name += choice(rng, data.NAME_SUFFIXES)
    return name.strip() or "Unnamed Settlement"


def preview_name(x: int, y: int, z: int) -> str:
    """The name the settlement at (x, y, z) will have once generated."""
    culture = generate_culture(salted_seed(x, y, z, "culture"))
    return generate_name(salted_seed(x, y, z, "name"), culture)


# ---------------------------------------------------------------------------
# Economy, population, wealth, defense
# ---------------------------------------------------------------------------


def generate_economy(seed: int, size: str) -> List[str]:
    rng = stream(seed)
    minimum, spread = data.ECONOMY_COUNTS[size]
    count = minimum + int(rng() * spread)
    return shuffled(rng, data.ECONOMIES)[:count]


def generate_population(seed: int, size: str) -> int:
    low, high = data.POPULATION_RANGES[size]
    return low + int(stream(seed)() * (high - low))


def _clamp_level(value: int) -> int:
    return max(1, min(10, value))


def generate_wealth_level(seed: int, size: str, economy: List[str]) -> int:
    base = data.BASE_WEALTH[size]
    base += sum(1 for e in data.WEALTH_ECONOMIES if e in economy)
    variance = int(stream(seed)() * 5) - 2
    return _clamp_level(base + variance)


def generate_defense_level(seed: int, size: str, culture: str) -> int:
    base = data.BASE_DEFENSE[size] + data.DEFENSE_CULTURE_BONUS.get(culture, 0)
    variance = int(stream(seed)() * 5) - 2
    return _clamp_level(base + variance)


def generate_founded(seed: int, size: str) -> int:
    base_years = data.FOUNDED_BASE_YEARS[size]
    return base_years + int(stream(seed)() * base_years)


# ---------------------------------------------------------------------------
# History and problems
# ---------------------------------------------------------------------------


def generate_history(seed: int, founded: int) -> Tuple[HistoricalEvent, ...]:
    """A founding event plus a few later events, oldest first."""
    rng = stream(seed)
    events = [
        HistoricalEvent(
            type="founding",
            years_ago=founded,
            description=templates.render(
                choice(rng, data.HISTORY["founding"]),
                {"years_ago": founded},
                salted_seed(seed, 0, 0, "founding"),
            ),
        )
    ]

    if founded > 100:
        count = 2 + int(rng() * 2)
    elif founded > 50:
        count = 1 + int(rng() * 2)
    else:
        count = int(rng() * 2)

    for i in range(count):
        event_type = choice(rng, data.HISTORY_EVENT_TYPES)
        template = choice(rng, data.HISTORY[event_type])
        years_ago = int(rng() * founded)
        events.append(
            HistoricalEvent(
                type=event_type,
                years_ago=years_ago,
                description=templates.render(
                    template, {"years_ago": years_ago}, salted_seed(seed, i, 0, event_type)
                ),
            )
        )

    # Stable sort keeps the founding event first on ties.
    return tuple(sorted(events, key=lambda e: -e.years_ago))


def generate_problem(seed: int, size: str) -> Optional[SettlementProblem]:
    rng = stream(seed)
    if rng() < data.PROBLEM_CHANCE_NONE:
        return None

    problem_type = choice(rng, data.PROBLEM_TYPES)
    if size == "village":
        severity_index = int(rng() * 2)
    elif size == "town":
        severity_index = int(rng() * 3)
    else:
        severity_index = 1 + int(rng() * 2)
    severity = data.SEVERITIES[min(severity_index, 2)]

    duration_days = 1 + int(rng() * 30)
    short_template = choice(rng, data.PROBLEMS[problem_type]["short"])
    long_template = choice(rng, data.PROBLEMS[problem_type]["long"])
    context = {"duration_days": duration_days}
    template_seed = salted_seed(seed, 0, 0, "template")

    return SettlementProblem(
        type=problem_type,
        severity=severity,
        short_description=templates.render(short_template, context, template_seed),
        long_description=templates.render(long_template, context, template_seed),
        duration_days=duration_days,
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def generate_settlement(x: int, y: int, z: int, size: str) -> Settlement:
    """Generate the settlement at (x, y, z).  Same inputs, same settlement."""
    culture = generate_culture(salted_seed(x, y, z, "culture"))
    name = generate_name(salted_seed(x, y, z, "name"), culture)
    economy = generate_economy(salted_seed(x, y, z, "economy"), size)
    founded = generate_founded(salted_seed(x, y, z, "founded"), size)

    settlement = Settlement(
        id=settlement_id(x, y, z),
        coordinates=(x, y, z),
        name=name,
        size=size,
        population=generate_population(salted_seed(x, y, z, "population"), size),
        economy=tuple(economy),
        culture=culture,
        problem=generate_problem(salted_seed(x, y, z, "problem"), size),
        history=generate_history(salted_seed(x, y, z, "history"), founded),
        wealth_level=generate_wealth_level(salted_seed(x, y, z, "wealth"), size, economy),
        defense_level=generate_defense_level(salted_seed(x, y, z, "defense"), size, culture),
        founded=founded,
    )
    logger.debug(f"Generated {size} {settlement.name} ({culture}) at ({x}, {y}, {z})")
    return settlement
