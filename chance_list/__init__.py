"""chance_list

A weighted-chance collection: ordered (item, percentage, lock) entries that keep
a 100% total and support weighted random picks with and without repetition.

Primary entrypoints:
- chance_list.ChanceList
- python -m chance_list.cli
- console script: chance-list
"""

from __future__ import annotations

from .collection import ChanceList
from .entry import DEFAULT_WEIGHT, MAX_WEIGHT, ChanceEntry
from .normalization import equalize_entries, normalize_entries

__all__ = [
    "ChanceEntry",
    "ChanceList",
    "DEFAULT_WEIGHT",
    "MAX_WEIGHT",
    "__version__",
    "equalize_entries",
    "normalize_entries",
]

__version__ = "0.1.0"
