"""Coordinates, room ids and directions.

Rooms are addressed only by integer (x, y, z) coordinates.  The canonical
room id is ``proc_{x}_{y}_{z}``; :func:`parse_room_id` accepts exactly the
strings :func:`make_room_id` produces, so the two are inverses.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

Coordinates = Tuple[int, int, int]

ROOM_ID_PREFIX = "proc"

_INT = r"(0|-?[1-9][0-9]*)"
_ROOM_ID_RE = re.compile(rf"^{ROOM_ID_PREFIX}_{_INT}_{_INT}_{_INT}$")

# Order matters: it is the order exits are listed in a room.
DIRECTIONS: Tuple[str, ...] = ("north", "south", "east", "west", "up", "down")
CARDINAL_DIRECTIONS: Tuple[str, ...] = ("north", "south", "east", "west")
VERTICAL_DIRECTIONS: Tuple[str, ...] = ("up", "down")

DIRECTION_DELTAS: Dict[str, Coordinates] = {
    "north": (0, -1, 0),
    "south": (0, 1, 0),
    "east": (1, 0, 0),
    "west": (-1, 0, 0),
    "up": (0, 0, 1),
    "down": (0, 0, -1),
}

OPPOSITE: Dict[str, str] = {
    "north": "south",
    "south": "north",
    "east": "west",
    "west": "east",
    "up": "down",
    "down": "up",
}


def make_room_id(x: int, y: int, z: int) -> str:
    """Encode a coordinate as its canonical room id."""
    return f"{ROOM_ID_PREFIX}_{int(x)}_{int(y)}_{int(z)}"


def parse_room_id(room_id: str) -> Coordinates:
    """Decode a canonical room id.

    Raises:
        ValueError: if ``room_id`` is not in canonical form.
    """
    match = _ROOM_ID_RE.fullmatch(room_id or "")
    if not match:
        raise ValueError(f"Not a canonical room id: {room_id!r}")
    x, y, z = (int(part) for part in match.groups())
    return (x, y, z)


def step(coords: Coordinates, direction: str) -> Coordinates:
    """Return the coordinate one step from ``coords`` in ``direction``."""
    dx, dy, dz = DIRECTION_DELTAS[direction]
    return (coords[0] + dx, coords[1] + dy, coords[2] + dz)


def neighbors(coords: Coordinates) -> List[Tuple[str, Coordinates]]:
    """All six (direction, coordinate) neighbors in canonical direction order."""
    return [(direction, step(coords, direction)) for direction in DIRECTIONS]


def is_vertical(direction: str) -> bool:
    return direction in VERTICAL_DIRECTIONS
