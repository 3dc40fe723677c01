"""Accepted answers revealed on a problem page, shaped by the problem stage."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from aoc_page.errors import InvalidMerge, MissingExpectedAnswer
from aoc_page.layout import PageHandle, puzzle_answers
from aoc_page.model.stage import ProblemStage, infer_stage

logger = logging.getLogger(__name__)


@dataclass
class ProblemStageWithAnswers:
    """A stage together with the answers that stage implies.

    - PART1: no accepted answers; rejected part 1 guesses.
    - PART2: the part 1 answer; rejected part 2 guesses.
    - COMPLETE: both answers.
    """
    stage: ProblemStage
    part1_answer: Optional[str] = None
    part2_answer: Optional[str] = None
    part1_incorrect_guesses: list[str] = field(default_factory=list)
    part2_incorrect_guesses: list[str] = field(default_factory=list)

    def __post_init__(self):
        expected_answers = self.stage.rank
        present = (self.part1_answer is not None, self.part2_answer is not None)
        if present != (expected_answers >= 1, expected_answers >= 2):
            raise ValueError(f"answers {present} do not fit stage {self.stage.value}")
        if self.stage is not ProblemStage.PART1 and self.part1_incorrect_guesses:
            raise ValueError(f"part 1 guesses only belong to stage part1, not {self.stage.value}")
        if self.stage is not ProblemStage.PART2 and self.part2_incorrect_guesses:
            raise ValueError(f"part 2 guesses only belong to stage part2, not {self.stage.value}")

    @classmethod
    def part1(cls, incorrect_guesses: list[str] | None = None) -> ProblemStageWithAnswers:
        return cls(ProblemStage.PART1, part1_incorrect_guesses=list(incorrect_guesses or []))

    @classmethod
    def part2(
        cls, part1_answer: str, incorrect_guesses: list[str] | None = None
    ) -> ProblemStageWithAnswers:
        return cls(
            ProblemStage.PART2,
            part1_answer=part1_answer,
            part2_incorrect_guesses=list(incorrect_guesses or []),
        )

    @classmethod
    def complete(cls, part1_answer: str, part2_answer: str) -> ProblemStageWithAnswers:
        return cls(ProblemStage.COMPLETE, part1_answer=part1_answer, part2_answer=part2_answer)

    def merge(self, other: ProblemStageWithAnswers) -> None:
        """Advance this record in place to *other*'s stage.

        Same stage is a no-op. Moving forward adopts *other* wholesale.

        Raises:
            InvalidMerge: *other* is at an earlier stage than this record.
        """
        if other.stage.rank < self.stage.rank:
            raise InvalidMerge(f"cannot reduce state from {self!r} to {other!r}")

        if other.stage is self.stage:
            if (other.part1_answer, other.part2_answer) != (self.part1_answer, self.part2_answer):
                logger.warning(
                    "Ignoring differing answers at stage %s: kept %s, got %s",
                    self.stage.value,
                    (self.part1_answer, self.part2_answer),
                    (other.part1_answer, other.part2_answer),
                )
            return

        self.stage = other.stage
        self.part1_answer = other.part1_answer
        self.part2_answer = other.part2_answer
        self.part1_incorrect_guesses = list(other.part1_incorrect_guesses)
        self.part2_incorrect_guesses = list(other.part2_incorrect_guesses)

    def add_incorrect_guess(self, guess: str) -> None:
        """Remember a rejected submission for the part currently being solved."""
        if self.stage is ProblemStage.PART1:
            guesses = self.part1_incorrect_guesses
        elif self.stage is ProblemStage.PART2:
            guesses = self.part2_incorrect_guesses
        else:
            raise ValueError("puzzle is complete, no part accepts guesses")
        if guess not in guesses:
            guesses.append(guess)


def extract_answers(page: PageHandle, stage: ProblemStage | None = None) -> ProblemStageWithAnswers:
    """Collect the accepted answers the page reveals for its stage.

    Raises:
        MissingExpectedAnswer: fewer answers than the stage requires.
    """
    if stage is None:
        stage = infer_stage(page)
    answers = list(puzzle_answers(page))

    for part in range(1, stage.rank + 1):
        if len(answers) < part:
            raise MissingExpectedAnswer(stage, part, len(answers))

    if stage is ProblemStage.PART1:
        return ProblemStageWithAnswers.part1()
    if stage is ProblemStage.PART2:
        return ProblemStageWithAnswers.part2(answers[0])
    return ProblemStageWithAnswers.complete(answers[0], answers[1])
