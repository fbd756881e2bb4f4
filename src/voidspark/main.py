from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from .client import WorldClient, WorldClientError
from .config import Config, default_config, load_config
from .engine import advance, assemble_party
from .generator import generate_world
from .prompt import parse_prompt
from .world import TERMINAL_STATES

logger = logging.getLogger(__name__)


def play_local(prompt: str, seed: int, max_steps: int) -> Dict[str, Any]:
    traits = parse_prompt(prompt)
    world = generate_world(traits.theme, traits.aesthetic, traits.dimension, seed)
    assemble_party(world)
    for _ in range(max_steps):
        if world.terminal:
            break
        advance(world)
    return world.to_dict()


def play_remote(client: WorldClient, prompt: str, max_steps: int) -> Dict[str, Any]:
    world = client.generate(prompt)
    world_id = str(world["id"])
    world = client.form_party(world_id)
    for _ in range(max_steps):
        if world.get("game_state") in TERMINAL_STATES:
            break
        world = client.explore(world_id)
    return world


def _render_text(world: Dict[str, Any]) -> str:
    header = (
        f"World {world['id']} [{world['theme']} / {world['aesthetic']} / {world['dimension']}] "
        f"- {world['game_state']} after {world['current']}/{len(world['rooms'])} rooms"
    )
    lines = [header, ""]
    lines.extend(world["log"])
    party = world.get("party") or []
    if party:
        lines.append("")
        lines.append("Party:")
        for hero in party:
            lines.append(f" - {hero['name']} ({hero['role']}): {hero['hp']}/{hero['max_hp']} HP")
    return "\n".join(lines)


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return default_config()
    return load_config(config_path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a dungeon from a prompt and play it to the end.")
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to a TOML config file (built-in defaults when omitted).")
    parser.add_argument("--prompt", default=None,
                        help="World prompt; defaults to game.default_prompt from the config.")
    parser.add_argument("--seed", type=int, default=None,
                        help="World seed for a local run (defaults to the current time in ns).")
    parser.add_argument("--url", default=None,
                        help="Play against a running Void Spark service instead of locally.")
    parser.add_argument("--format", choices=("json", "text"), default="text",
                        help="Choose the output format.")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="Upper bound on explore calls; defaults to game.max_steps.")
    args = parser.parse_args(argv)

    config = _load(args.config)
    logging.basicConfig(level=config.logging.level, format="%(levelname)s %(name)s: %(message)s")
    prompt = args.prompt or config.game.default_prompt
    max_steps = args.max_steps if args.max_steps is not None else config.game.max_steps

    if args.url:
        try:
            world = play_remote(WorldClient(args.url), prompt, max_steps)
        except WorldClientError as exc:
            logger.error(str(exc))
            return 1
    else:
        seed = args.seed if args.seed is not None else time.time_ns()
        world = play_local(prompt, seed, max_steps)

    if args.format == "json":
        print(json.dumps(world, indent=2))
    else:
        print(_render_text(world))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
