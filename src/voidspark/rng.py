from __future__ import annotations

import random

SEED_MASK = 0xFFFFFFFFFFFFFFFF


def seeded_random(seed: int) -> random.Random:
    """Fresh stream for ``seed`` read as an unsigned 64-bit value."""
    return random.Random(seed & SEED_MASK)
