"""Room event resolvers."""

from __future__ import annotations

from typing import List, Sequence

from .flavor import LOOT_ITEMS
from .rng import seeded_random
from .world import Hero

COMBAT_SKIPPED = "No party present — combat skipped"
ATTACKER_BONUS = 4


def _living(party: Sequence[Hero]) -> List[Hero]:
    return [hero for hero in party if hero.alive]


def resolve_combat(party: Sequence[Hero], seed: int) -> List[str]:
    """Fight one or two enemies, mutating hero hp in place."""
    if not party:
        return [COMBAT_SKIPPED]

    rng = seeded_random(seed)
    lines: List[str] = []
    enemy_count = 1 + rng.randrange(2)
    for number in range(1, enemy_count + 1):
        enemy_hp = 30 + rng.randrange(30)
        lines.append(f"Enemy {number} appears with {enemy_hp} HP")
        while enemy_hp > 0:
            for hero in party:
                if not hero.alive:
                    continue
                damage = 5 + rng.randrange(8)
                if hero.role == "attacker":
                    damage += ATTACKER_BONUS
                enemy_hp -= damage
                lines.append(f"{hero.name} hits enemy for {damage} (enemy HP {max(enemy_hp, 0)})")
                if enemy_hp <= 0:
                    lines.append("Enemy defeated")
                    break
            if enemy_hp <= 0:
                break

            alive = _living(party)
            if not alive:
                lines.append("All heroes down")
                return lines
            target = alive[rng.randrange(len(alive))]
            hit = 6 + rng.randrange(8)
            target.take_damage(hit)
            lines.append(f"Enemy hits {target.name} for {hit} (HP {target.hp})")
    return lines


def resolve_loot(seed: int) -> str:
    rng = seeded_random(seed)
    item = LOOT_ITEMS[rng.randrange(len(LOOT_ITEMS))]
    return f"Found treasure: {item}"


def resolve_trap(party: Sequence[Hero], seed: int) -> str:
    rng = seeded_random(seed)
    damage = 5 + rng.randrange(16)
    alive = _living(party)
    if not alive:
        return "Trap triggers, but no one is alive to be affected."
    target = alive[rng.randrange(len(alive))]
    target.take_damage(damage)
    return f"Trap triggers: {target.name} takes {damage} damage (HP {target.hp})"


def resolve_rest(party: Sequence[Hero]) -> int:
    """Heal every living hero by half of its missing hp; return the total."""
    healed = 0
    for hero in party:
        if not hero.alive:
            continue
        amount = (hero.max_hp - hero.hp) // 2
        if amount <= 0:
            continue
        healed += hero.heal(amount)
    return healed
