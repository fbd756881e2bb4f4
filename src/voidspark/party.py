from __future__ import annotations

from typing import Dict, List, Tuple

from .world import Hero

# role -> (display prefix, max hp, stats); list order is combat turn order
ROSTER: Tuple[Tuple[str, str, int, Dict[str, int]], ...] = (
    ("tank", "Tank", 120, {"str": 8, "def": 8}),
    ("attacker", "Attacker", 90, {"str": 10, "def": 4}),
    ("healer", "Healer", 80, {"int": 9, "def": 3}),
    ("support", "Support", 85, {"dex": 7, "def": 4}),
)


def create_party(serial: int = 0) -> List[Hero]:
    party: List[Hero] = []
    for offset, (role, prefix, max_hp, stats) in enumerate(ROSTER, start=1):
        party.append(
            Hero(
                name=f"{prefix}-{serial + offset}",
                role=role,
                hp=max_hp,
                max_hp=max_hp,
                stats=dict(stats),
            )
        )
    return party


def roles_list(party: List[Hero]) -> str:
    return ", ".join(f"{hero.name}({hero.role})" for hero in party)
