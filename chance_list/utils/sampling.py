"""Weighted sampling over chance entries.

Only entries with a positive weight take part in a draw. The item itself is never
inspected, so ``None`` is a perfectly good outcome ("nothing happens").

Draws walk the eligible entries in store order, so for a given random value the
result depends only on the weights and their order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence, TypeVar

from .rng import RandomSource

if TYPE_CHECKING:
    from ..entry import ChanceEntry

T = TypeVar("T")


def clamp(x: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, x))


def eligible(entries: Iterable[ChanceEntry[T]]) -> list[ChanceEntry[T]]:
    """Entries with weight > 0, in order."""

    return [e for e in entries if e.weight > 0]


def _pick_index(rng: RandomSource, pool: Sequence[ChanceEntry[T]]) -> int:
    total = sum(e.weight for e in pool)
    if total <= 0:
        return 0
    r = rng.random() * total
    acc = 0
    for i, e in enumerate(pool):
        acc += e.weight
        if acc >= r:
            return i
    # Numeric edge-case
    return 0


def weighted_choice(rng: RandomSource, entries: Iterable[ChanceEntry[T]]) -> T | None:
    """Sample one item according to the entry weights.

    Returns None when no entry has a positive weight.
    """

    pool = eligible(entries)
    if not pool:
        return None
    return pool[_pick_index(rng, pool)].item


def weighted_choices(rng: RandomSource, entries: Iterable[ChanceEntry[T]], count: int) -> list[T | None]:
    """Draw ``count`` items independently (with repetition)."""

    pool = eligible(entries)
    return [weighted_choice(rng, pool) for _ in range(count)]


def weighted_unique(rng: RandomSource, entries: Iterable[ChanceEntry[T]], count: int) -> list[T]:
    """Draw up to ``count`` distinct entries without replacement.

    Each draw is proportional to the weights still left in the pool. Fewer than
    ``count`` items come back when there are fewer eligible entries.
    """

    if count <= 0:
        return []

    pool = eligible(entries)
    out: list[T] = []
    for _ in range(min(count, len(pool))):
        idx = _pick_index(rng, pool)
        out.append(pool.pop(idx).item)
    return out
