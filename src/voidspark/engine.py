from __future__ import annotations

import logging

from .party import create_party, roles_list
from .resolvers import resolve_combat, resolve_loot, resolve_rest, resolve_trap
from .world import FINISHED, GAME_OVER, World

logger = logging.getLogger(__name__)

VICTORY_LINE = "You have reached the dungeon's end. Victory!"
DEFEAT_LINE = "All party members have fallen. Game over."


def is_terminal(world: World) -> bool:
    return world.terminal


def assemble_party(world: World) -> World:
    """Attach the starting roster once; later calls leave the world untouched."""
    if world.party:
        return world
    world.party = create_party(serial=world.seed % 1000)
    world.log.append("Party assembled: " + roles_list(world.party))
    logger.info(f"World {world.id}: party assembled")
    return world


def advance(world: World) -> World:
    """Resolve the next room of ``world`` in place and return it."""
    if world.terminal:
        return world

    if world.current >= len(world.rooms):
        world.log.append(VICTORY_LINE)
        world.game_state = FINISHED
        logger.info(f"World {world.id}: finished after {len(world.rooms)} rooms")
        return world

    room = world.rooms[world.current]
    world.log.append(f"Entering room {room.index}: {room.desc} ({room.type})")
    room_seed = world.seed + world.current
    if room.type == "combat":
        world.log.extend(resolve_combat(world.party, room_seed))
    elif room.type == "loot":
        world.log.append(resolve_loot(room_seed))
    elif room.type == "trap":
        world.log.append(resolve_trap(world.party, room_seed))
    elif room.type == "rest":
        healed = resolve_rest(world.party)
        world.log.append(f"Rested: healed {healed} HP total")
    world.current += 1

    if all(not hero.alive for hero in world.party):
        world.log.append(DEFEAT_LINE)
        world.game_state = GAME_OVER
        logger.info(f"World {world.id}: game over in room {room.index}")
    return world
