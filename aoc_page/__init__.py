"""Structured model extraction for Advent of Code problem pages.

Typical use by a fetch loop::

    page = AocPage.from_html(html)
    record.absorb(page)          # or DayRecord.from_page(year, day, page)

Subpackages:
- aoc_page.dom – arena DOM built from BeautifulSoup
- aoc_page.layout – editions, part anchors and scoped queries
- aoc_page.model – stage voting, test cases, answers and merging
"""

from __future__ import annotations

from aoc_page.config import DEFAULT_CONFIG, ParserConfig, load_config
from aoc_page.errors import (
    AmbiguousStage,
    ConfigError,
    InvalidMerge,
    MissingExpectedAnswer,
    MissingRequiredAnchor,
    PageModelError,
    UnrecognizedLayout,
)
from aoc_page.model import (
    AocPage,
    DayRecord,
    ProblemStage,
    ProblemStageWithAnswers,
    TestCase,
    TestCases,
    is_unreleased,
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguousStage",
    "AocPage",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DayRecord",
    "InvalidMerge",
    "MissingExpectedAnswer",
    "MissingRequiredAnchor",
    "PageModelError",
    "ParserConfig",
    "ProblemStage",
    "ProblemStageWithAnswers",
    "TestCase",
    "TestCases",
    "UnrecognizedLayout",
    "is_unreleased",
    "load_config",
]
