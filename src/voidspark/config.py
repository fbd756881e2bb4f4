from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Tuple

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for 3.10
    import tomli as tomllib  # type: ignore[no-redef]

DEFAULT_PROMPT = "a dark stone dungeon with countless treasure, candlelight, and traps"


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8080
    cors_origins: Tuple[str, ...] = ("*",)


@dataclass(frozen=True)
class StorageConfig:
    worlds_dir: Path = Path("worlds")


@dataclass(frozen=True)
class GameConfig:
    default_prompt: str = DEFAULT_PROMPT
    max_steps: int = 64


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def default_config() -> Config:
    return Config()


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = raw.get(name, {})
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ValueError(f"[{name}] must be a table if provided.")
    return section


def _parse_server(section: Mapping[str, Any]) -> ServerConfig:
    host = str(section.get("host", ServerConfig.host)).strip()
    if not host:
        raise ValueError("server.host must not be empty.")
    try:
        port = int(section.get("port", ServerConfig.port))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"server.port must be an integer: {section.get('port')!r}") from exc
    if not 0 < port < 65536:
        raise ValueError(f"server.port out of range: {port}")
    origins_raw = section.get("cors_origins", list(ServerConfig.cors_origins))
    if isinstance(origins_raw, str):
        origins: List[str] = [origins_raw]
    elif isinstance(origins_raw, list):
        origins = [str(origin) for origin in origins_raw]
    else:
        raise ValueError("server.cors_origins must be a string or a list of strings.")
    return ServerConfig(host=host, port=port, cors_origins=tuple(origins))


def _parse_storage(section: Mapping[str, Any], base_dir: Path) -> StorageConfig:
    worlds_dir = section.get("worlds_dir", str(StorageConfig.worlds_dir))
    if not isinstance(worlds_dir, str) or not worlds_dir.strip():
        raise ValueError("storage.worlds_dir must be a non-empty string.")
    path = Path(worlds_dir)
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return StorageConfig(worlds_dir=path)


def _parse_game(section: Mapping[str, Any]) -> GameConfig:
    prompt = str(section.get("default_prompt", DEFAULT_PROMPT)).strip() or DEFAULT_PROMPT
    try:
        max_steps = int(section.get("max_steps", GameConfig.max_steps))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"game.max_steps must be an integer: {section.get('max_steps')!r}") from exc
    return GameConfig(default_prompt=prompt, max_steps=max(1, max_steps))


def _parse_logging(section: Mapping[str, Any]) -> LoggingConfig:
    level = str(section.get("level", LoggingConfig.level)).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown logging.level '{level}'.")
    return LoggingConfig(level=level)


def load_config(path: str | Path) -> Config:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("rb") as handle:
        raw = tomllib.load(handle)

    base_dir = config_path.resolve().parent
    return Config(
        server=_parse_server(_section(raw, "server")),
        storage=_parse_storage(_section(raw, "storage"), base_dir),
        game=_parse_game(_section(raw, "game")),
        logging=_parse_logging(_section(raw, "logging")),
    )
