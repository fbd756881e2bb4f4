"""Tests for the starting roster and party assembly."""

from voidspark.engine import assemble_party
from voidspark.generator import generate_world
from voidspark.party import create_party


def test_roster_shape():
    party = create_party()
    assert [h.role for h in party] == ["tank", "attacker", "healer", "support"]
    assert [h.max_hp for h in party] == [120, 90, 80, 85]
    assert all(h.hp == h.max_hp for h in party)


def test_roster_stats():
    tank, attacker, healer, support = create_party()
    assert tank.stats == {"str": 8, "def": 8}
    assert attacker.stats == {"str": 10, "def": 4}
    assert healer.stats == {"int": 9, "def": 3}
    assert support.stats == {"dex": 7, "def": 4}


def test_names_use_serial():
    names = [h.name for h in create_party(serial=500)]
    assert names == ["Tank-501", "Attacker-502", "Healer-503", "Support-504"]
    assert len(set(names)) == 4


def test_stats_not_shared_between_parties():
    a = create_party()
    b = create_party()
    a[0].stats["str"] = 99
    assert b[0].stats["str"] == 8


def test_assemble_party_logs_roster():
    world = generate_world("dungeon", "dark", "2D", 1042)
    assemble_party(world)
    assert len(world.party) == 4
    assert world.log[-1] == (
        "Party assembled: Tank-43(tank), Attacker-44(attacker), Healer-45(healer), Support-46(support)"
    )


def test_assemble_party_idempotent():
    world = generate_world("dungeon", "dark", "2D", 7)
    assemble_party(world)
    world.party[0].hp = 10
    before = world.to_dict()
    assemble_party(world)
    assert world.to_dict() == before
