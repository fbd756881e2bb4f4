from __future__ import annotations

import logging
from typing import List

from .flavor import FLAVOR_TABLES, ROOM_KINDS
from .rng import seeded_random
from .world import EXPLORING, Room, World

logger = logging.getLogger(__name__)

MIN_ROOMS = 8
MAX_ROOMS = 12


def _describe(kind: str, subject: str, flavor: str) -> str:
    if kind == "combat":
        return f"A {subject} {flavor}."
    return f"A {subject}, {flavor}."


def generate_world(theme: str, aesthetic: str, dimension: str, seed: int) -> World:
    """Build a World whose rooms depend only on ``seed``.

    The room count and every room's kind, subject and flavor come from a
    single seeded stream, in that order, so the count draw
    shifts all later draws.
    """
    rng = seeded_random(seed)
    room_count = MIN_ROOMS + rng.randrange(MAX_ROOMS - MIN_ROOMS + 1)

    rooms: List[Room] = []
    for index in range(1, room_count + 1):
        kind = ROOM_KINDS[rng.randrange(len(ROOM_KINDS))]
        subjects, flavors = FLAVOR_TABLES[kind]
        subject = subjects[rng.randrange(len(subjects))]
        flavor = flavors[rng.randrange(len(flavors))]
        rooms.append(Room(index=index, type=kind, desc=_describe(kind, subject, flavor)))

    logger.debug(f"Generated {room_count} rooms for seed {seed}")
    return World(
        id=str(seed),
        dimension=dimension,
        theme=theme,
        aesthetic=aesthetic,
        rooms=rooms,
        seed=seed,
        current=0,
        game_state=EXPLORING,
        party=[],
        log=[f"Spawned world: {theme} ({aesthetic}) seed={seed}"],
    )
