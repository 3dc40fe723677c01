#!/usr/bin/env python3
"""Dump the extracted model of saved problem pages.

Usage:
    python scripts/inspect_page.py page.html                  # Stage, test cases, answers
    python scripts/inspect_page.py a.html b.html --merge      # Fold pages into one record, in order
    python scripts/inspect_page.py page.html --votes          # Show each stage signal's vote
    python scripts/inspect_page.py page.html --config config/parser_config.yaml
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[1] / ".env")

from aoc_page import AocPage, ConfigError, DayRecord, PageModelError, load_config
from aoc_page.model import collect_votes

logger = logging.getLogger(__name__)


def _as_json(obj) -> str:
    def default(value):
        if dataclasses.is_dataclass(value):
            return dataclasses.asdict(value)
        if hasattr(value, "value"):
            return value.value
        raise TypeError(f"cannot serialise {type(value).__name__}")

    return json.dumps(obj, default=default, indent=2)


def inspect(path: Path, page: AocPage, show_votes: bool):
    print(f"\n{'=' * 60}")
    print(f"{path}  [{page.handle.edition.name}]  stage={page.stage.value}")
    print("=" * 60)
    if show_votes:
        for name, vote in collect_votes(page.handle).items():
            print(f"  vote {name}: {vote.value if vote is not None else 'abstain'}")
    print("Test cases:")
    print(_as_json(page.test_cases()))
    print("Answers:")
    print(_as_json(page.answers()))
    embedded = page.embedded_puzzle_input()
    if embedded is not None:
        print(f"Embedded input ({len(embedded)} chars): {embedded[:80]!r}")


def main():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("pages", nargs="+", type=Path, help="Saved problem page HTML files")
    parser.add_argument("--config", type=Path, default=None, help="YAML parser config override")
    parser.add_argument("--merge", action="store_true", help="Merge the pages into one day record")
    parser.add_argument("--votes", action="store_true", help="Print every stage signal's vote")
    parser.add_argument("--year", type=int, default=0)
    parser.add_argument("--day", type=int, default=0)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(2)

    record: DayRecord | None = None
    failed = 0

    for path in args.pages:
        try:
            page = AocPage.from_html(path.read_text(encoding="utf-8"), config)
        except PageModelError as e:
            logger.error("%s: %s", path, e)
            failed += 1
            continue

        inspect(path, page, args.votes)

        if args.merge:
            try:
                if record is None:
                    record = DayRecord.from_page(args.year, args.day, page)
                else:
                    record.absorb(page)
            except PageModelError as e:
                logger.error("%s: merge failed: %s", path, e)
                failed += 1

    if record is not None:
        print(f"\n{'=' * 60}")
        print(f"Merged record: {record}")
        print("=" * 60)
        print(_as_json(record))

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
