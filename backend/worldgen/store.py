"""Two-tier room memoization: an in-process cache and a durable store.

The cache is owned by one world instance and passed in explicitly.  The
durable store is optional; :class:`NullRoomStore` stands in when there is
none, so callers never branch on its presence.
"""

from __future__ import annotations

import decimal
import json
import logging
import threading
from typing import Dict, Iterator, Optional, Protocol

from .aws_client import get_dynamodb_table, has_table_configured
from .base import GeneratedRoom

logger = logging.getLogger(__name__)

ROOM_TABLE_ENV = "ROOM_TABLE"


class DecimalEncoder(json.JSONEncoder):
    """Custom JSON encoder for Decimal types."""

    def default(self, obj):
        """Encode Decimal as int when integral, float otherwise."""
        if isinstance(obj, decimal.Decimal):
            return int(obj) if obj == obj.to_integral_value() else float(obj)
        return super(DecimalEncoder, self).default(obj)


# ---------------------------------------------------------------------------
# In-process cache
# ---------------------------------------------------------------------------


class RoomCache:
    """Shared, append-only map of room id to generated room.

    A room is only ever replaced by :meth:`replace`, which the service calls
    while holding that room's lock.
    """

    def __init__(self):
        self._rooms: Dict[str, GeneratedRoom] = {}
        self._lock = threading.Lock()

    def get(self, room_id: str) -> Optional[GeneratedRoom]:
        with self._lock:
            return self._rooms.get(room_id)

    def add(self, room: GeneratedRoom) -> GeneratedRoom:
        """Insert ``room`` unless one is already cached; return the cached room."""
        with self._lock:
            return self._rooms.setdefault(room.id, room)

    def replace(self, room: GeneratedRoom) -> None:
        with self._lock:
            if room.id not in self._rooms:
                raise KeyError(f"Room {room.id} is not cached")
            self._rooms[room.id] = room

    def __contains__(self, room_id: str) -> bool:
        with self._lock:
            return room_id in self._rooms

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)

    def __iter__(self) -> Iterator[GeneratedRoom]:
        with self._lock:
            return iter(list(self._rooms.values()))


# ---------------------------------------------------------------------------
# Durable stores
# ---------------------------------------------------------------------------


class RoomStore(Protocol):
    """Durable key-value persistence for generated rooms."""

    def get(self, room_id: str) -> Optional[GeneratedRoom]:
        """Return the stored room or None."""
        ...

    def put(self, room: GeneratedRoom) -> None:
        """Persist ``room``, overwriting any previous version."""
        ...


class NullRoomStore:
    """A store that remembers nothing."""

    def get(self, room_id: str) -> Optional[GeneratedRoom]:
        return None

    def put(self, room: GeneratedRoom) -> None:
        return None


class InMemoryRoomStore:
    """Process-local store, useful for tests and single-process servers."""

    def __init__(self):
        self._rooms: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def get(self, room_id: str) -> Optional[GeneratedRoom]:
        with self._lock:
            data = self._rooms.get(room_id)
        return GeneratedRoom.from_dict(data) if data is not None else None

    def put(self, room: GeneratedRoom) -> None:
        with self._lock:
            self._rooms[room.id] = room.to_dict()

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)


class DynamoRoomStore:
    """Rooms in a DynamoDB table with hash key ``id``."""

    def __init__(self, table_env_var: str = ROOM_TABLE_ENV):
        self._table_env_var = table_env_var

    @property
    def _table(self):
        """Return the DynamoDB table holding rooms."""
        return get_dynamodb_table(self._table_env_var)

    def get(self, room_id: str) -> Optional[GeneratedRoom]:
        item = self._table.get_item(Key={"id": room_id}).get("Item")
        if not item:
            return None
        return GeneratedRoom.from_dict(json.loads(json.dumps(item, cls=DecimalEncoder)))

    def put(self, room: GeneratedRoom) -> None:
        # DynamoDB rejects Python floats; round-trip numbers through Decimal.
        item = json.loads(json.dumps(room.to_dict()), parse_float=decimal.Decimal)
        self._table.put_item(Item=item)


def default_room_store() -> RoomStore:
    """DynamoDB-backed store when ROOM_TABLE is set, otherwise none."""
    if has_table_configured(ROOM_TABLE_ENV):
        return DynamoRoomStore()
    return NullRoomStore()
