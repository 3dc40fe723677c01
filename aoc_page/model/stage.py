"""Infer how much of a puzzle is unlocked from three independent page signals.

Each signal casts at most one vote. The page is only assigned a stage
when every vote that was cast agrees; anything else means the page
format drifted and is raised instead of guessed around.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from aoc_page.errors import AmbiguousStage
from aoc_page.layout import PageHandle, puzzle_answers, success_banners

logger = logging.getLogger(__name__)


class ProblemStage(Enum):
    # Part 1 unsolved, part 2 locked (0 stars).
    PART1 = "part1"
    # Part 1 solved, part 2 unsolved (1 star).
    PART2 = "part2"
    # Both parts solved (2 stars).
    COMPLETE = "complete"

    @property
    def rank(self) -> int:
        """Position in the unlock order; also the number of solved parts."""
        return _RANKS[self]


_RANKS = {ProblemStage.PART1: 0, ProblemStage.PART2: 1, ProblemStage.COMPLETE: 2}

Vote = Optional[ProblemStage]


def stage_for_answer_count(count: int) -> ProblemStage:
    if count == 0:
        return ProblemStage.PART1
    if count == 1:
        return ProblemStage.PART2
    return ProblemStage.COMPLETE


def _success_banner_vote(page: PageHandle) -> Vote:
    banners = list(success_banners(page))
    if not banners:
        return ProblemStage.PART1
    if len(banners) > 1:
        logger.warning("found %d day-success paragraphs, classifying the first", len(banners))

    text = banners[0].text()
    if text.startswith(page.config.first_half_complete):
        return ProblemStage.PART2
    if text.startswith(page.config.both_parts_complete):
        return ProblemStage.COMPLETE
    logger.error("unknown day success string: `%s`", text)
    return None


def _revealed_answers_vote(page: PageHandle) -> Vote:
    return stage_for_answer_count(sum(1 for _ in puzzle_answers(page)))


def _anchor_vote(page: PageHandle) -> Vote:
    if page.part2_revealed:
        # Part 2 and complete pages both show two descriptions.
        return None
    return ProblemStage.PART1


SIGNALS: tuple[tuple[str, Callable[[PageHandle], Vote]], ...] = (
    ("success_banner", _success_banner_vote),
    ("revealed_answers", _revealed_answers_vote),
    ("anchors", _anchor_vote),
)


def collect_votes(page: PageHandle) -> dict[str, Vote]:
    """Each signal's vote, keyed by signal name."""
    return {name: evaluate(page) for name, evaluate in SIGNALS}


def infer_stage(page: PageHandle) -> ProblemStage:
    """Return the single stage all voting signals agree on.

    Raises:
        AmbiguousStage: signals disagree, or all of them abstained.
    """
    votes = collect_votes(page)
    tally = {stage: 0 for stage in ProblemStage}
    for vote in votes.values():
        if vote is not None:
            tally[vote] += 1

    winners = [stage for stage, count in tally.items() if count]
    if len(winners) != 1:
        raise AmbiguousStage(votes, tally)

    logger.debug("Stage %s from votes %s", winners[0].value, votes)
    return winners[0]
