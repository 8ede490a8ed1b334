"""Tunable world-generation settings.

None of these affect correctness, only pacing and density.  Defaults match
the live world; ``WorldConfig.from_env()`` lets a deployment override them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CountRule:
    """How many entries of one content kind a room receives.

    With probability ``empty_chance`` the room gets none; otherwise it gets
    ``minimum + floor(rng * spread)``.
    """

    empty_chance: float
    minimum: int
    spread: int


@dataclass(frozen=True)
class ContentRules:
    items: CountRule = CountRule(empty_chance=0.3, minimum=1, spread=3)
    enemies: CountRule = CountRule(empty_chance=0.4, minimum=1, spread=2)
    resources: CountRule = CountRule(empty_chance=0.6, minimum=1, spread=2)


@dataclass(frozen=True)
class WorldConfig:
    """Settings for difficulty pacing, settlement placement and content density.

    Difficulty is ``floor(max(|x|, |y|) / difficulty_scale) + 1`` plus a
    depth bonus of ``min(max_depth_bonus, |z|)`` underground, clamped to
    ``[1, max_difficulty]``.  Settlements sit on the surface wherever
    ``(x + y)`` is a multiple of ``settlement_spacing``.
    """

    max_difficulty: int = 10
    difficulty_scale: int = 5
    max_depth_bonus: int = 3
    settlement_spacing: int = 7
    content: ContentRules = field(default_factory=ContentRules)

    @classmethod
    def from_env(cls) -> "WorldConfig":
        """Build a config from WORLD_* environment variables, falling back to defaults."""
        defaults = cls()
        return cls(
            max_difficulty=_env_int("WORLD_MAX_DIFFICULTY", defaults.max_difficulty),
            difficulty_scale=_env_int("WORLD_DIFFICULTY_SCALE", defaults.difficulty_scale),
            max_depth_bonus=_env_int("WORLD_MAX_DEPTH_BONUS", defaults.max_depth_bonus),
            settlement_spacing=_env_int("WORLD_SETTLEMENT_SPACING", defaults.settlement_spacing),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}")
    if value < 1:
        raise ValueError(f"Environment variable {name} must be positive, got {value}")
    return value
