"""Per-day cache record upgraded across repeated fetches of the same page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from aoc_page.model.answers import ProblemStageWithAnswers
from aoc_page.model.page import AocPage
from aoc_page.model.stage import ProblemStage
from aoc_page.model.test_cases import TestCases

logger = logging.getLogger(__name__)


@dataclass
class DayRecord:
    year: int
    day: int
    test_cases: TestCases
    answers: ProblemStageWithAnswers
    embedded_input: Optional[str] = None

    def __post_init__(self):
        if self.test_cases.has_part2 != (self.answers.stage.rank >= 1):
            raise ValueError(
                f"test cases with part2={self.test_cases.has_part2} "
                f"do not fit stage {self.answers.stage.value}"
            )

    @classmethod
    def from_page(cls, year: int, day: int, page: AocPage) -> DayRecord:
        return cls(
            year=year,
            day=day,
            test_cases=page.test_cases(),
            answers=page.answers(),
            embedded_input=page.embedded_puzzle_input(),
        )

    def __str__(self) -> str:
        return f"{self.year} day {self.day} ({self.stage.value})"

    @property
    def stage(self) -> ProblemStage:
        return self.answers.stage

    def absorb(self, page: AocPage) -> None:
        """Fold a freshly fetched page into this record.

        Raises:
            InvalidMerge: the page shows less progress than the record.
        """
        before = self.stage
        # Answers first: a backward page fails there before anything changes.
        self.answers.merge(page.answers())
        self.test_cases.merge(page.test_cases())
        if self.embedded_input is None:
            self.embedded_input = page.embedded_puzzle_input()
        if self.stage is not before:
            logger.info("%s advanced from %s", self, before.value)
