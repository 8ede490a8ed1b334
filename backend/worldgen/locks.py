"""Per-room locks for at-most-once generation."""

from __future__ import annotations

import threading
from contextlib import ExitStack, contextmanager
from typing import Dict, Iterator


class RoomLocks:
    """Registry of one re-entrant lock per room id.

    ``hold`` acquires several rooms' locks in sorted id order, so two
    callers locking overlapping neighborhoods cannot deadlock.
    """

    def __init__(self):
        self._locks: Dict[str, threading.RLock] = {}
        self._guard = threading.Lock()

    def lock_for(self, room_id: str) -> threading.RLock:
        with self._guard:
            lock = self._locks.get(room_id)
            if lock is None:
                lock = self._locks[room_id] = threading.RLock()
            return lock

    @contextmanager
    def hold(self, *room_ids: str) -> Iterator[None]:
        with ExitStack() as stack:
            for room_id in sorted(set(room_ids)):
                stack.enter_context(self.lock_for(room_id))
            yield
