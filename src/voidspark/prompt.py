from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class PromptTraits:
    theme: str
    aesthetic: str
    dimension: str


# Later rules override earlier ones when several keywords match.
_THEME_RULES: Sequence[Tuple[str, Sequence[str]]] = (
    ("dungeon", ("dungeon", "treasure")),
    ("city", ("city", "race", "track")),
    ("space", ("space", "station")),
    ("cyberpunk", ("cyber", "neon")),
)
_AESTHETIC_RULES: Sequence[Tuple[str, Sequence[str]]] = (
    ("glowing", ("glow", "neon", "bright")),
    ("overgrown", ("moss", "overgrown")),
)
_THREE_D_MARKERS = ("3d", "3-d", "3 d")


def _classify(text: str, rules: Sequence[Tuple[str, Sequence[str]]], default: str) -> str:
    label = default
    for candidate, keywords in rules:
        if any(keyword in text for keyword in keywords):
            label = candidate
    return label


def parse_prompt(prompt: str) -> PromptTraits:
    text = prompt.lower()
    dimension = "3D" if any(marker in text for marker in _THREE_D_MARKERS) else "2D"
    return PromptTraits(
        theme=_classify(text, _THEME_RULES, "generic"),
        aesthetic=_classify(text, _AESTHETIC_RULES, "dark"),
        dimension=dimension,
    )
