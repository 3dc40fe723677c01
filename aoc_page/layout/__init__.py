"""Edition detection, part-anchor location and scoped queries."""

from __future__ import annotations

from aoc_page.layout.edition import Edition, guess
from aoc_page.layout.locator import PageHandle, load_page, parse
from aoc_page.layout.query import (
    QueryScope,
    embedded_puzzle_input,
    example_answers,
    example_blocks,
    puzzle_answers,
    search,
    success_banners,
)

__all__ = [
    "Edition",
    "PageHandle",
    "QueryScope",
    "embedded_puzzle_input",
    "example_answers",
    "example_blocks",
    "guess",
    "load_page",
    "parse",
    "puzzle_answers",
    "search",
    "success_banners",
]
