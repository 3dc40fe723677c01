"""Exception hierarchy for page model extraction.

Every failure caused by the shape of a fetched page derives from
``PageModelError`` so callers can separate format drift from bugs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aoc_page.dom.document import Document
    from aoc_page.layout.edition import Edition
    from aoc_page.model.stage import ProblemStage


class PageModelError(Exception):
    """Base class for page model failures."""


class ConfigError(Exception):
    """The parser configuration file is malformed.

    Not a ``PageModelError``: a bad local file is not page format drift.
    """


class MissingRequiredAnchor(PageModelError):
    """No part 1 description region was found.

    Returned (not raised) by ``layout.locator.parse`` so the edition
    fallback chain can hand the document to the next candidate.
    """

    def __init__(self, document: Document, edition: Edition):
        super().__init__(f"failed to find part 1 article (edition {edition.name})")
        self.document = document
        self.edition = edition


class UnrecognizedLayout(PageModelError):
    """No known edition could parse the page."""

    def __init__(self, document: Document, attempts: list[MissingRequiredAnchor]):
        tried = ", ".join(a.edition.name for a in attempts) or "none"
        super().__init__(f"could not parse page as any edition (tried: {tried})")
        self.document = document
        self.attempts = attempts


class AmbiguousStage(PageModelError):
    """The stage signals disagree, or every signal abstained."""

    def __init__(
        self,
        votes: dict[str, ProblemStage | None],
        tally: dict[ProblemStage, int],
    ):
        winners = {stage.value: count for stage, count in tally.items() if count}
        if winners:
            msg = f"multiple winners: {winners} (votes: {_fmt_votes(votes)})"
        else:
            msg = f"no votes cast for problem stage (votes: {_fmt_votes(votes)})"
        super().__init__(msg)
        self.votes = votes
        self.tally = tally


class MissingExpectedAnswer(PageModelError):
    """Fewer accepted answers on the page than the stage requires."""

    def __init__(self, stage: ProblemStage, part: int, found: int):
        super().__init__(
            f"missing part {part} answer text (stage {stage.value}, found {found} answers)"
        )
        self.stage = stage
        self.part = part
        self.found = found


class InvalidMerge(PageModelError):
    """A merge would move a record backwards through the stage lattice."""


def _fmt_votes(votes: dict[str, ProblemStage | None]) -> str:
    return ", ".join(
        f"{name}={vote.value if vote is not None else 'abstain'}"
        for name, vote in votes.items()
    )
