"""Seeded dungeon-crawl worlds generated from a text prompt."""

from .config import load_config
from .engine import advance, assemble_party
from .generator import generate_world
from .party import create_party
from .prompt import PromptTraits, parse_prompt
from .repository import WorldRepository
from .resolvers import resolve_combat, resolve_loot, resolve_rest, resolve_trap
from .service import WorldService
from .store import SessionStore, WorldNotFoundError
from .world import Hero, Room, World

__all__ = [
    "Hero",
    "PromptTraits",
    "Room",
    "SessionStore",
    "World",
    "WorldNotFoundError",
    "WorldRepository",
    "WorldService",
    "advance",
    "assemble_party",
    "create_party",
    "generate_world",
    "load_config",
    "parse_prompt",
    "resolve_combat",
    "resolve_loot",
    "resolve_rest",
    "resolve_trap",
]
