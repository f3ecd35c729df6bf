"""Chance table definitions.

This module defines:
- The dataclasses describing named chance tables.
- JSON/YAML config loading.
- Building a ready-to-roll ChanceList from a table definition.

A table entry is either a mapping ``{"item": ..., "weight": ..., "locked": ...}``
or a bare item, which gets the default weight. ``null`` items are kept: they
stand for "nothing drops".
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .collection import ChanceList
from .entry import DEFAULT_WEIGHT, MAX_WEIGHT, MIN_WEIGHT, ChanceEntry
from .utils.rng import check_seed, table_rng
from .utils.sampling import clamp

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryConfig:
    item: Any
    weight: int = DEFAULT_WEIGHT
    locked: bool = False


@dataclass(frozen=True)
class TableConfig:
    name: str
    entries: tuple[EntryConfig, ...] = ()


@dataclass(frozen=True)
class AppConfig:
    seed: int | None = None
    default_weight: int = DEFAULT_WEIGHT
    tables: dict[str, TableConfig] = field(default_factory=dict)


def _parse_entry(table: str, raw: Any, default_weight: int) -> EntryConfig:
    if not isinstance(raw, dict):
        return EntryConfig(item=raw, weight=default_weight)
    if "item" not in raw:
        raise ValueError(f"table {table!r}: entry {raw!r} has no 'item' key")
    try:
        weight = int(raw.get("weight", default_weight))
    except (TypeError, ValueError) as e:
        raise ValueError(f"table {table!r}: invalid weight {raw.get('weight')!r}") from e
    locked = raw.get("locked", False)
    if not isinstance(locked, bool):
        raise ValueError(f"table {table!r}: locked must be true or false, got {locked!r}")
    return EntryConfig(item=raw["item"], weight=clamp(weight, MIN_WEIGHT, MAX_WEIGHT), locked=locked)


def _read_raw(path: Path) -> dict[str, Any]:
    if path.suffix.lower() in {".yml", ".yaml"}:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    else:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"config root must be a mapping: {path}")
    return raw


def load_config(path: Path | None) -> AppConfig:
    """Load chance table definitions.

    Supports JSON by default.
    YAML is read with PyYAML when the file extension is .yml/.yaml.

    Schema (all keys optional):
    {
      "seed": 1234,
      "default_weight": 10,
      "tables": {
        "loot": [
          {"item": "sword", "weight": 20, "locked": true},
          {"item": null, "weight": 50},
          "shield"
        ]
      }
    }
    """

    if path is None:
        return AppConfig()

    path = path.expanduser().resolve()
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"config file not found: {path}")

    raw = _read_raw(path)
    base = AppConfig()

    seed = raw.get("seed", base.seed)
    if seed is not None:
        seed = check_seed(int(seed))
    default_weight = clamp(int(raw.get("default_weight", base.default_weight)), MIN_WEIGHT, MAX_WEIGHT)

    tables_raw = raw.get("tables") or {}
    if not isinstance(tables_raw, dict):
        raise ValueError("'tables' must be a mapping of table name to entry list")

    tables: dict[str, TableConfig] = {}
    for name, entries_raw in tables_raw.items():
        if not isinstance(entries_raw, list):
            raise ValueError(f"table {name!r} must be a list of entries")
        entries = tuple(_parse_entry(str(name), e, default_weight) for e in entries_raw)
        tables[str(name)] = TableConfig(name=str(name), entries=entries)

    log.debug("Loaded %d chance tables from %s", len(tables), path)
    return AppConfig(seed=seed, default_weight=default_weight, tables=tables)


def build_table(config: AppConfig, name: str, seed: int | None = None) -> ChanceList:
    """Create a normalized ChanceList for the named table.

    The RNG is keyed on the seed (the config seed when none is given) and the
    table name, so a seeded run rolls the same results every time.
    """

    if name not in config.tables:
        known = ", ".join(sorted(config.tables)) or "<none>"
        raise KeyError(f"unknown chance table {name!r} (known: {known})")

    if seed is None:
        seed = config.seed

    table = config.tables[name]
    chances: ChanceList = ChanceList(
        (ChanceEntry(e.item, e.weight, e.locked) for e in table.entries),
        rng=table_rng(seed, name),
    )
    chances.normalize()
    if chances.count and chances.total_chance != MAX_WEIGHT:
        log.warning("Table %r totals %d%% after normalization", name, chances.total_chance)
    return chances
