"""Deterministic randomness for world generation.

Every random decision in the generator is derived from a coordinate seed.
The seed hash and the stream generator are part of the world's identity:
changing either silently regenerates every room differently, so both are
frozen.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")

RandomStream = Callable[[], float]

_MODULUS = 2**32
_MULTIPLIER = 1664525
_INCREMENT = 1013904223


class SeedOffset:
    """Per-concern offsets added to a room seed.

    Each concern at a coordinate draws from its own stream so that, e.g.,
    adding an item to a pool never changes which exits a room has.
    """

    BIOME = 0
    NAME = 10
    DESCRIPTION = 20
    EXITS = 30
    ITEM_COUNT = 100
    ITEM_PICK = 101
    ENEMY_COUNT = 200
    ENEMY_PICK = 201
    RESOURCE_COUNT = 300
    RESOURCE_PICK = 301
    EXIT_FLAVOR = 400


def string_hash(text: str) -> int:
    """31-multiplier string hash, wrapped to a signed 32-bit integer."""
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def coord_seed(x: int, y: int, z: int) -> int:
    """Return the stable seed for a coordinate."""
    return abs(string_hash(f"{x},{y},{z}"))


def salted_seed(x: int, y: int, z: int, salt) -> int:
    """Return a seed for one named stage of generation at a coordinate.

    Used by the settlement pipeline, where each stage (culture, name,
    economy, npc_3, ...) gets its own independent stream.
    """
    return abs(string_hash(f"{x},{y},{z},{salt}"))


def offset_seed(seed: int, offset: int) -> int:
    """Derive a concern-specific seed from a room seed."""
    return (seed + offset) % _MODULUS


def stream(seed: int) -> RandomStream:
    """Return a linear congruential generator producing floats in [0, 1).

    Two streams created from the same seed yield identical sequences.
    """
    state = seed % _MODULUS

    def _next() -> float:
        nonlocal state
        state = (state * _MULTIPLIER + _INCREMENT) % _MODULUS
        return state / _MODULUS

    return _next


def choice(rng: RandomStream, options: Sequence[T]) -> T:
    """Pick one element of a non-empty sequence."""
    return options[int(rng() * len(options))]


def shuffled(rng: RandomStream, items: Sequence[T]) -> List[T]:
    """Fisher-Yates shuffle into a new list."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result
