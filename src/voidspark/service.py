from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .engine import advance, assemble_party
from .generator import generate_world
from .prompt import parse_prompt
from .repository import WorldRepository
from .store import SessionStore, WorldNotFoundError
from .world import World

logger = logging.getLogger(__name__)


class WorldService:
    """Entry points used by the web layer and the command line."""

    def __init__(
        self,
        store: SessionStore,
        repository: Optional[WorldRepository] = None,
        seed_source: Callable[[], int] = time.time_ns,
    ) -> None:
        self._store = store
        self._repository = repository
        self._seed_source = seed_source

    @property
    def repository(self) -> Optional[WorldRepository]:
        return self._repository

    def generate(self, prompt: str, seed: Optional[int] = None) -> World:
        traits = parse_prompt(prompt)
        world_seed = seed if seed is not None else self._seed_source()
        world = generate_world(traits.theme, traits.aesthetic, traits.dimension, world_seed)
        self._store.add(world)
        logger.info(f"Generated world {world.id} ({traits.theme}/{traits.aesthetic}, {len(world.rooms)} rooms)")
        with self._store.session(world.id) as stored:
            self._persist(stored)
            return World.from_dict(stored.to_dict())

    def form_party(self, world_id: str) -> World:
        self._ensure_loaded(world_id)
        with self._store.session(world_id) as world:
            assemble_party(world)
            self._persist(world)
            return World.from_dict(world.to_dict())

    def explore(self, world_id: str) -> World:
        self._ensure_loaded(world_id)
        with self._store.session(world_id) as world:
            advance(world)
            self._persist(world)
            return World.from_dict(world.to_dict())

    def state(self, world_id: str) -> World:
        self._ensure_loaded(world_id)
        return self._store.get(world_id)

    def latest(self) -> Optional[str]:
        if self._repository is None:
            return None
        return self._repository.latest()

    def _ensure_loaded(self, world_id: str) -> None:
        if world_id in self._store:
            return
        if self._repository is None:
            raise WorldNotFoundError(world_id)
        world = self._repository.load(world_id)
        self._store.setdefault(world)
        logger.info(f"Loaded world {world_id} from disk")

    def _persist(self, world: World) -> None:
        if self._repository is None:
            return
        try:
            self._repository.save(world)
        except OSError as exc:
            logger.warning(f"Failed to save world {world.id}: {exc}")
