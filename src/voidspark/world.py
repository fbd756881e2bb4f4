from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

EXPLORING = "exploring"
FINISHED = "finished"
GAME_OVER = "game_over"
TERMINAL_STATES = frozenset({FINISHED, GAME_OVER})


@dataclass(frozen=True)
class Room:
    index: int
    type: str
    desc: str

    def to_dict(self) -> Dict[str, object]:
        return {"index": self.index, "type": self.type, "desc": self.desc}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Room":
        return cls(index=int(data["index"]), type=str(data["type"]), desc=str(data["desc"]))


@dataclass
class Hero:
    """A party member. ``hp`` is clamped to ``[0, max_hp]`` by every mutator."""

    name: str
    role: str
    hp: int
    max_hp: int
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def take_damage(self, amount: int) -> int:
        self.hp = max(0, min(self.max_hp, self.hp - amount))
        return self.hp

    def heal(self, amount: int) -> int:
        before = self.hp
        self.hp = max(0, min(self.max_hp, self.hp + amount))
        return self.hp - before

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "role": self.role,
            "hp": self.hp,
            "max_hp": self.max_hp,
            "stats": dict(self.stats),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Hero":
        max_hp = max(0, int(data["max_hp"]))
        return cls(
            name=str(data["name"]),
            role=str(data["role"]),
            hp=max(0, min(max_hp, int(data["hp"]))),
            max_hp=max_hp,
            stats={str(key): int(value) for key, value in dict(data.get("stats") or {}).items()},
        )


@dataclass
class World:
    id: str
    dimension: str
    theme: str
    aesthetic: str
    rooms: List[Room]
    seed: int
    current: int = 0
    game_state: str = EXPLORING
    party: List[Hero] = field(default_factory=list)
    log: List[str] = field(default_factory=list)

    @property
    def terminal(self) -> bool:
        return self.game_state in TERMINAL_STATES

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "dimension": self.dimension,
            "theme": self.theme,
            "aesthetic": self.aesthetic,
            "rooms": [room.to_dict() for room in self.rooms],
            "seed": self.seed,
            "current": self.current,
            "game_state": self.game_state,
            "party": [hero.to_dict() for hero in self.party],
            "log": list(self.log),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "World":
        return cls(
            id=str(data["id"]),
            dimension=str(data.get("dimension", "")),
            theme=str(data.get("theme", "")),
            aesthetic=str(data.get("aesthetic", "")),
            rooms=[Room.from_dict(room) for room in data.get("rooms") or []],
            seed=int(data["seed"]),
            current=int(data.get("current", 0)),
            game_state=str(data.get("game_state", EXPLORING)),
            party=[Hero.from_dict(hero) for hero in data.get("party") or []],
            log=[str(line) for line in data.get("log") or []],
        )
