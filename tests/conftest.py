from typing import Iterable

import pytest

from voidspark.party import create_party
from voidspark.repository import WorldRepository
from voidspark.service import WorldService
from voidspark.store import SessionStore
from voidspark.world import Room, World


def _make_world(room_types: Iterable[str], seed: int = 1234, with_party: bool = True) -> World:
    """World with a hand-picked room sequence."""
    rooms = [
        Room(index=i, type=kind, desc=f"A test {kind} room.")
        for i, kind in enumerate(room_types, start=1)
    ]
    return World(
        id=str(seed),
        dimension="2D",
        theme="dungeon",
        aesthetic="dark",
        rooms=rooms,
        seed=seed,
        party=create_party() if with_party else [],
        log=[f"Spawned world: dungeon (dark) seed={seed}"],
    )


@pytest.fixture
def make_world():
    return _make_world


@pytest.fixture
def party():
    return create_party()


@pytest.fixture
def repository(tmp_path):
    return WorldRepository(tmp_path / "worlds")


@pytest.fixture
def service(repository):
    seeds = iter(range(1000, 100000))
    return WorldService(SessionStore(), repository, seed_source=lambda: next(seeds))
