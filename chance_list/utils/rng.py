"""Random sources for chance tables.

Sampling only needs ``random() -> float`` in [0, 1), so anything with that
method can drive a ChanceList. Tests inject fixed sequences through it.

Seeded tables get their own ``random.Random`` keyed on the seed and the table
name. String seeds are hashed with SHA-512 by ``random.Random`` itself, so the
stream for a (seed, name) pair is the same in every process and does not move
when other tables are rolled.
"""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:
        """Return a float uniformly distributed over [0, 1)."""


def check_seed(seed: int | None) -> int | None:
    if seed is not None and seed < 0:
        raise ValueError("seed must be >= 0")
    return seed


def table_rng(seed: int | None, name: str) -> random.Random:
    """RNG for the named table; unseeded (OS entropy) when seed is None."""

    if check_seed(seed) is None:
        return random.Random()
    return random.Random(f"{seed}\x00{name}")
