"""Command line interface for chance_list."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import build_table, load_config

NOTHING = "<nothing>"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="chance-list",
        description="Roll items from a weighted chance table defined in a JSON/YAML file.",
    )

    p.add_argument("config", type=Path, help="JSON/YAML file with chance table definitions")
    p.add_argument("table", help="Name of the table to roll")

    p.add_argument("--count", type=int, default=1, help="Number of items to draw")
    p.add_argument("--unique", action="store_true", help="Draw without repetition")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible draws (overrides config)")
    p.add_argument("--show-weights", action="store_true", help="Print the normalized table instead of rolling")
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return p


def _fmt(item: object) -> str:
    return NOTHING if item is None else str(item)


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = _build_parser()
    ns = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    log = logging.getLogger(__name__)

    try:
        config = load_config(ns.config)
        seed = ns.seed if ns.seed is not None else config.seed
        chances = build_table(config, ns.table, seed)

        if ns.show_weights:
            for e in chances.entries():
                lock = " locked" if e.locked else ""
                sys.stdout.write(f"{e.weight:3d}%{lock} {_fmt(e.item)}\n")
            return 0

        if ns.unique:
            items = chances.get_unique_random_items(ns.count)
        else:
            items = chances.get_random_items(ns.count)
        log.debug("Drew %d item(s) from %r", len(items), ns.table)

        for item in items:
            sys.stdout.write(_fmt(item) + "\n")
        return 0
    except Exception as e:
        log.error(str(e))
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
