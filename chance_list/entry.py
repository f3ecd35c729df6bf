"""Chance entry data structure and weight bounds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

MIN_WEIGHT = 0
MAX_WEIGHT = 100
DEFAULT_WEIGHT = 10


@dataclass
class ChanceEntry(Generic[T]):
    """One slot of a ChanceList.

    weight is a percentage (0..100). A locked entry keeps its weight while the
    others are redistributed around it.
    """

    item: T
    weight: int = DEFAULT_WEIGHT
    locked: bool = False
