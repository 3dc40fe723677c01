"""One fetched problem page and everything derivable from it."""

from __future__ import annotations

import logging

from aoc_page.config import DEFAULT_CONFIG, ParserConfig
from aoc_page.layout import PageHandle, embedded_puzzle_input, load_page
from aoc_page.model.answers import ProblemStageWithAnswers, extract_answers
from aoc_page.model.stage import ProblemStage, infer_stage
from aoc_page.model.test_cases import TestCases, extract_test_cases

logger = logging.getLogger(__name__)


def is_unreleased(html: str, config: ParserConfig = DEFAULT_CONFIG) -> bool:
    """True for the placeholder served before a puzzle unlocks; retry later."""
    return config.unreleased_marker in html


class AocPage:
    """Parses a problem page once and derives its model on demand."""

    def __init__(self, handle: PageHandle):
        self.handle = handle
        self.stage: ProblemStage = infer_stage(handle)

    @classmethod
    def from_html(cls, html: str, config: ParserConfig | None = None) -> AocPage:
        """Raises ``UnrecognizedLayout`` or ``AmbiguousStage`` on unparseable pages."""
        return cls(load_page(html, config or DEFAULT_CONFIG))

    def __repr__(self) -> str:
        return f"<AocPage {self.handle.edition.name} stage={self.stage.value}>"

    def test_cases(self) -> TestCases:
        return extract_test_cases(self.handle, self.stage)

    def answers(self) -> ProblemStageWithAnswers:
        return extract_answers(self.handle, self.stage)

    def embedded_puzzle_input(self) -> str | None:
        return embedded_puzzle_input(self.handle)
