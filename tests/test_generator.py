"""Tests for seeded world generation."""

import random
import re

import pytest

from voidspark.flavor import FLAVOR_TABLES, ROOM_KINDS
from voidspark.generator import generate_world

SEEDS = [0, 1, 42, 1234567, 2**40 + 17, 1_700_000_000_123_456_789, -99]


def test_same_seed_same_world():
    a = generate_world("dungeon", "dark", "2D", 987654321)
    b = generate_world("dungeon", "dark", "2D", 987654321)
    assert a.to_dict() == b.to_dict()


def test_different_seeds_differ():
    worlds = {tuple(r.desc for r in generate_world("dungeon", "dark", "2D", s).rooms) for s in range(20)}
    assert len(worlds) > 1


def test_room_count_bounds():
    for seed in list(range(200)) + SEEDS:
        world = generate_world("dungeon", "dark", "2D", seed)
        assert 8 <= len(world.rooms) <= 12


def test_room_count_covers_range():
    counts = {len(generate_world("generic", "dark", "2D", seed).rooms) for seed in range(300)}
    assert counts == {8, 9, 10, 11, 12}


def test_rooms_indexed_from_one():
    world = generate_world("dungeon", "dark", "2D", 77)
    assert [room.index for room in world.rooms] == list(range(1, len(world.rooms) + 1))


def test_room_types_and_descriptions():
    for seed in SEEDS:
        for room in generate_world("dungeon", "dark", "2D", seed).rooms:
            assert room.type in ROOM_KINDS
            assert room.desc
            subjects, flavors = FLAVOR_TABLES[room.type]
            if room.type == "combat":
                pattern = r"^A (.+) (.+)\.$"
                assert any(room.desc == f"A {s} {f}." for s in subjects for f in flavors)
            else:
                pattern = r"^A (.+), (.+)\.$"
                assert any(room.desc == f"A {s}, {f}." for s in subjects for f in flavors)
            assert re.match(pattern, room.desc)


def test_initial_state():
    """Scenario A: a fresh dungeon world."""
    seed = 31337
    world = generate_world("dungeon", "glowing", "3D", seed)
    assert world.id == str(seed)
    assert world.seed == seed
    assert world.current == 0
    assert world.game_state == "exploring"
    assert world.party == []
    assert world.log == [f"Spawned world: dungeon (glowing) seed={seed}"]
    assert re.match(r"^Spawned world: dungeon \(.+\) seed=31337$", world.log[0])
    assert (world.theme, world.aesthetic, world.dimension) == ("dungeon", "glowing", "3D")


def test_tags_do_not_change_rooms():
    a = generate_world("dungeon", "dark", "2D", 5)
    b = generate_world("space station", "overgrown", "3D", 5)
    assert a.rooms == b.rooms


def test_opaque_tags_accepted():
    world = generate_world("", "", "", 3)
    assert world.log[0] == "Spawned world:  () seed=3"


# ── Stream order ─────────────────────────────────────────

UNSIGNED_64 = 0xFFFFFFFFFFFFFFFF


def replay_rooms(seed):
    """Expected rooms drawn from one stream: count, then kind/subject/flavor per room."""
    rng = random.Random(seed & UNSIGNED_64)
    count = 8 + rng.randrange(5)
    rooms = []
    for _ in range(count):
        kind = ("loot", "combat", "trap", "rest")[rng.randrange(4)]
        subjects, flavors = FLAVOR_TABLES[kind]
        subject = subjects[rng.randrange(len(subjects))]
        flavor = flavors[rng.randrange(len(flavors))]
        desc = f"A {subject} {flavor}." if kind == "combat" else f"A {subject}, {flavor}."
        rooms.append((kind, desc))
    return rooms


@pytest.mark.parametrize("seed", [42, 1_700_000_000_123_456_789, -7])
def test_rooms_follow_single_stream(seed):
    world = generate_world("dungeon", "dark", "2D", seed)
    assert [(room.type, room.desc) for room in world.rooms] == replay_rooms(seed)


def test_negative_seed_not_aliased():
    assert generate_world("dungeon", "dark", "2D", -7).rooms != generate_world("dungeon", "dark", "2D", 7).rooms


def test_negative_seed_reads_as_unsigned():
    a = generate_world("dungeon", "dark", "2D", -7)
    b = generate_world("dungeon", "dark", "2D", 2**64 - 7)
    assert a.rooms == b.rooms
    assert a.id == "-7"
