from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from .store import WorldNotFoundError
from .world import World

logger = logging.getLogger(__name__)


class WorldRepository:
    """One ``world_<id>.json`` file per world inside ``directory``."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, world_id: str) -> Path:
        return self.directory / f"world_{world_id}.json"

    def save(self, world: World) -> Path:
        path = self.path_for(world.id)
        path.write_text(json.dumps(world.to_dict(), indent=2), encoding="utf-8")
        logger.debug(f"Saved world {world.id} to {path}")
        return path

    def load(self, world_id: str) -> World:
        path = self.path_for(world_id)
        if not path.exists():
            raise WorldNotFoundError(world_id)
        with path.open("r", encoding="utf-8") as handle:
            return World.from_dict(json.load(handle))

    def latest(self) -> Optional[str]:
        candidates = [path for path in self.directory.glob("world_*.json") if path.is_file()]
        if not candidates:
            return None
        newest = max(candidates, key=lambda path: (path.stat().st_mtime_ns, path.name))
        return newest.name
