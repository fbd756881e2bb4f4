from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from .world import World


class WorldNotFoundError(KeyError):
    pass


class SessionStore:
    """In-memory worlds keyed by id, with one exclusive lock per world.

    ``session()`` holds the world's lock for the duration of the ``with``
    block, so a single world is never advanced by two callers at once while
    different worlds proceed independently.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._worlds: Dict[str, World] = {}
        self._locks: Dict[str, threading.Lock] = {}

    def add(self, world: World) -> World:
        with self._guard:
            self._worlds[world.id] = world
            self._locks.setdefault(world.id, threading.Lock())
        return world

    def setdefault(self, world: World) -> World:
        """Add ``world`` unless its id is already present; return the stored one."""
        with self._guard:
            stored = self._worlds.setdefault(world.id, world)
            self._locks.setdefault(world.id, threading.Lock())
        return stored

    def _entry(self, world_id: str) -> tuple[World, threading.Lock]:
        with self._guard:
            world = self._worlds.get(world_id)
            if world is None:
                raise WorldNotFoundError(world_id)
            return world, self._locks[world_id]

    def get(self, world_id: str) -> World:
        """Return a snapshot copy, taken while no one is mutating the world."""
        world, lock = self._entry(world_id)
        with lock:
            return World.from_dict(world.to_dict())

    @contextmanager
    def session(self, world_id: str) -> Iterator[World]:
        world, lock = self._entry(world_id)
        with lock:
            yield world

    def discard(self, world_id: str) -> None:
        with self._guard:
            self._worlds.pop(world_id, None)
            self._locks.pop(world_id, None)

    def ids(self) -> List[str]:
        with self._guard:
            return list(self._worlds)

    def __contains__(self, world_id: object) -> bool:
        with self._guard:
            return world_id in self._worlds

    def __len__(self) -> int:
        with self._guard:
            return len(self._worlds)
