"""Keep entry weights summing to 100%.

Locked entries keep whatever weight they have. The unlocked entries share what
is left (``100 - locked total``):

- If the unlocked entries carry no weight at all, the remainder is split evenly
  and the leftover units go to the first unlocked entries in order.
- Otherwise the unlocked weights are rescaled proportionally. Each rescaled
  weight is rounded to the nearest integer with ties away from zero. Any
  rounding drift is then corrected one unit at a time, starting from the
  heaviest entry (ties resolved by position).

If every entry is locked nothing changes, even when the total is not 100.

Running the normalization twice in a row is a no-op the second time.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .entry import MAX_WEIGHT, ChanceEntry

log = logging.getLogger(__name__)


def round_half_away(numerator: int, denominator: int) -> int:
    """Round numerator/denominator to the nearest int, ties away from zero.

    Computed with integers so that results do not depend on float precision.
    """

    if denominator <= 0:
        raise ValueError("denominator must be > 0")
    q = (abs(numerator) * 2 + denominator) // (2 * denominator)
    return q if numerator >= 0 else -q


def _split_evenly(unlocked: Sequence[ChanceEntry], amount: int) -> None:
    base, extra = divmod(amount, len(unlocked))
    for i, e in enumerate(unlocked):
        e.weight = base + (1 if i < extra else 0)


def _partition(entries: Sequence[ChanceEntry]) -> tuple[int, list[ChanceEntry]]:
    locked_total = 0
    unlocked: list[ChanceEntry] = []
    for e in entries:
        if e.locked:
            locked_total += max(0, e.weight)
        else:
            unlocked.append(e)
    return locked_total, unlocked


def normalize_entries(entries: Sequence[ChanceEntry]) -> None:
    """Normalize the weights of ``entries`` in place."""

    if not entries:
        return

    locked_total, unlocked = _partition(entries)
    if not unlocked:
        return

    remaining = max(0, MAX_WEIGHT - locked_total)
    unlocked_total = sum(max(0, e.weight) for e in unlocked)

    if unlocked_total <= 0:
        _split_evenly(unlocked, remaining)
    elif unlocked_total != remaining:
        log.debug("Rescaling %d unlocked weights from %d to %d", len(unlocked), unlocked_total, remaining)
        new_total = 0
        for e in unlocked:
            e.weight = round_half_away(max(0, e.weight) * remaining, unlocked_total)
            new_total += e.weight

        diff = remaining - new_total
        if diff != 0:
            log.debug("Correcting rounding drift of %+d", diff)
            # sorted() is stable, so equal weights keep their original order
            by_weight = sorted(unlocked, key=lambda e: -e.weight)
            for e in by_weight[: abs(diff)]:
                if diff > 0:
                    e.weight += 1
                elif e.weight > 0:
                    e.weight -= 1

    for e in entries:
        if e.weight < 0:
            e.weight = 0


def equalize_entries(entries: Sequence[ChanceEntry]) -> None:
    """Give every unlocked entry an equal share of ``100 - locked total``."""

    locked_total, unlocked = _partition(entries)
    if not unlocked:
        return
    _split_evenly(unlocked, max(0, MAX_WEIGHT - locked_total))
