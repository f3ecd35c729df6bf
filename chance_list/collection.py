"""Weighted chance collection.

A ChanceList holds (item, weight, locked) entries in insertion order. Every
mutating call re-normalizes the weights so that they add up to 100%, with locked
entries keeping their value. Sampling reads the current weights and never
changes them.

Entries may hold ``None`` as their item: a draw that lands on it means
"nothing happens" and is not an error.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Generic, Iterable, Iterator, TypeVar, Union

from .entry import DEFAULT_WEIGHT, MAX_WEIGHT, MIN_WEIGHT, ChanceEntry
from .normalization import equalize_entries, normalize_entries
from .utils.rng import RandomSource
from .utils.sampling import clamp, weighted_choice, weighted_choices, weighted_unique

T = TypeVar("T")

EntryLike = Union[ChanceEntry[T], tuple]


def _coerce_entry(raw: EntryLike) -> ChanceEntry:
    if isinstance(raw, ChanceEntry):
        return ChanceEntry(raw.item, int(raw.weight), bool(raw.locked))
    if isinstance(raw, tuple) and 1 <= len(raw) <= 3:
        weight = int(raw[1]) if len(raw) > 1 else DEFAULT_WEIGHT
        locked = bool(raw[2]) if len(raw) > 2 else False
        return ChanceEntry(raw[0], weight, locked)
    raise TypeError(f"expected ChanceEntry or (item, weight[, locked]) tuple, got {raw!r}")


class ChanceList(Generic[T]):
    """Ordered, self-normalizing collection of weighted items.

    Entries passed to the constructor are stored as given (no normalization),
    like a collection restored from saved data. Call normalize() once the batch
    is in place.
    """

    def __init__(self, entries: Iterable[EntryLike] | None = None, rng: RandomSource | None = None):
        self._entries: list[ChanceEntry[T]] = [_coerce_entry(e) for e in (entries or ())]
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"Index {index} is out of range for ChanceList with {len(self._entries)} items")

    # Entry store

    @property
    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._entries[index].item

    def __setitem__(self, index: int, item: T) -> None:
        self._check_index(index)
        self._entries[index].item = item

    def __repr__(self) -> str:
        body = ", ".join(
            f"{e.item!r}:{e.weight}{' (locked)' if e.locked else ''}" for e in self._entries
        )
        return f"ChanceList([{body}])"

    def add_item(self, item: T, weight: int = DEFAULT_WEIGHT, locked: bool = False) -> None:
        """Append an item, then normalize.

        weight is clamped to 0..100 and may be changed by the normalization.
        """

        self._entries.append(ChanceEntry(item, clamp(int(weight), MIN_WEIGHT, MAX_WEIGHT), bool(locked)))
        self.normalize()

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        del self._entries[index]
        self.normalize()

    def set_chance(self, index: int, weight: int) -> None:
        """Set the weight of an entry (clamped to 0..100), then normalize."""

        self._check_index(index)
        self._entries[index].weight = clamp(int(weight), MIN_WEIGHT, MAX_WEIGHT)
        self.normalize()

    def get_chance(self, index: int) -> int:
        self._check_index(index)
        return self._entries[index].weight

    def set_locked(self, index: int, locked: bool) -> None:
        self._check_index(index)
        self._entries[index].locked = bool(locked)
        self.normalize()

    def is_locked(self, index: int) -> bool:
        self._check_index(index)
        return self._entries[index].locked

    def set_all_locked(self, locked: bool) -> None:
        for e in self._entries:
            e.locked = bool(locked)
        self.normalize()

    def clear(self) -> None:
        self._entries = []

    def to_list(self) -> list[T]:
        return [e.item for e in self._entries]

    def entries(self) -> tuple[ChanceEntry[T], ...]:
        """Snapshot copies of all entries; editing them does not affect the list."""

        return tuple(replace(e) for e in self._entries)

    @property
    def total_chance(self) -> int:
        return sum(e.weight for e in self._entries)

    # Normalization

    def normalize(self) -> None:
        """Redistribute unlocked weights so that the total is 100."""

        normalize_entries(self._entries)

    def equalize(self) -> None:
        """Split the unlocked share evenly across unlocked entries."""

        equalize_entries(self._entries)

    # Random selection

    def get_random_item(self) -> T | None:
        """Pick one item by weight. Returns None if no entry has a positive weight."""

        return weighted_choice(self.rng, self._entries)

    def get_random_items(self, count: int) -> list[T | None]:
        """Pick ``count`` items independently; the same item may repeat."""

        return weighted_choices(self.rng, self._entries, count)

    def get_unique_random_items(self, count: int) -> list[T | None]:
        """Pick up to ``count`` distinct entries without replacement."""

        return weighted_unique(self.rng, self._entries, count)
