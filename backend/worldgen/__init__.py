"""Procedural world generation.

Rooms live on an unbounded integer grid and are generated on first visit.
Wilderness rooms pick a biome compatible with their generated neighbors
and are stocked from the biome's spawn pools; settlement locations run the
settlement pipeline (settlement, NPCs, buildings, quests).  Everything is
derived from coordinate seeds.

Usage:
    from worldgen import RoomGenerationService
    service = RoomGenerationService(store=default_room_store())
    view = service.get_room_view_with_adjacent(0, 0, 0)
"""

from __future__ import annotations

from .base import Biome, Exit, GeneratedRoom, WildernessContents
from .catalog import DefinitionCatalog, DynamoDefinitionStore, default_definition_store
from .config import WorldConfig
from .coords import DIRECTIONS, make_room_id, parse_room_id
from .errors import BiomeNotFoundError, WorldGenerationError
from .region import WorldRegionClassifier
from .service import RoomGenerationService
from .store import (
    DynamoRoomStore,
    InMemoryRoomStore,
    NullRoomStore,
    RoomCache,
    default_room_store,
)
from .views import RoomView

__all__ = [
    "Biome",
    "BiomeNotFoundError",
    "DIRECTIONS",
    "DefinitionCatalog",
    "DynamoDefinitionStore",
    "DynamoRoomStore",
    "Exit",
    "GeneratedRoom",
    "InMemoryRoomStore",
    "NullRoomStore",
    "RoomCache",
    "RoomGenerationService",
    "RoomView",
    "WildernessContents",
    "WorldConfig",
    "WorldGenerationError",
    "WorldRegionClassifier",
    "default_definition_store",
    "default_room_store",
    "make_room_id",
    "parse_room_id",
]
