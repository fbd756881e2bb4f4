from __future__ import annotations

from typing import Dict, Sequence, Tuple

# Draw order of the room kind roll; changing it changes every generated world.
ROOM_KINDS: Tuple[str, ...] = ("loot", "combat", "trap", "rest")

ENEMIES: Tuple[str, ...] = (
    "goblin",
    "skeleton",
    "slime",
    "bandit",
    "warg",
    "orc",
    "shadow knight",
    "rat swarm",
)
TREASURES: Tuple[str, ...] = (
    "ancient chest",
    "enchanted urn",
    "jeweled altar",
    "crystal coffer",
    "forgotten relic",
)
TRAPS: Tuple[str, ...] = (
    "collapsing floor",
    "poison gas nozzle",
    "arrow trap",
    "flame burst tile",
    "swinging axe",
)
REST_SPOTS: Tuple[str, ...] = (
    "quiet alcove",
    "hidden fountain",
    "warm torch-lit corner",
    "abandoned camp",
    "stone bench",
)

ENEMY_ACTIONS: Tuple[str, ...] = (
    "lurking in the shadows",
    "patrolling a mossy hallway",
    "guarding a cracked archway",
    "prowling near the entrance",
    "waiting beside a flickering torch",
    "snarling behind broken bars",
    "roaming the corridor aimlessly",
)
TREASURE_FLAVORS: Tuple[str, ...] = (
    "gleaming faintly in the dark",
    "sealed with ancient runes",
    "covered in glowing dust",
    "surrounded by gold coins",
    "hidden behind a loose wall stone",
)
TRAP_FLAVORS: Tuple[str, ...] = (
    "barely visible to the eye",
    "giving off a faint mechanical hum",
    "coated in strange residue",
    "cleverly disguised as safe ground",
    "making a faint clicking sound nearby",
)
REST_FLAVORS: Tuple[str, ...] = (
    "filled with soft candlelight",
    "surrounded by silence",
    "echoing faint dripping sounds",
    "carved with ancient runes of peace",
    "still warm from a previous traveler",
)

LOOT_ITEMS: Tuple[str, ...] = (
    "gold coins",
    "sapphire amulet",
    "rusty sword",
    "potion of healing",
    "weird trinket",
)

# kind -> (subjects, flavor phrases)
FLAVOR_TABLES: Dict[str, Tuple[Sequence[str], Sequence[str]]] = {
    "loot": (TREASURES, TREASURE_FLAVORS),
    "combat": (ENEMIES, ENEMY_ACTIONS),
    "trap": (TRAPS, TRAP_FLAVORS),
    "rest": (REST_SPOTS, REST_FLAVORS),
}
