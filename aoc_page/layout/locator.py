"""Locate the part 1 / part 2 description regions of a problem page."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from aoc_page.config import DEFAULT_CONFIG, ParserConfig
from aoc_page.dom import Class, Document, Name, Node, load
from aoc_page.errors import MissingRequiredAnchor, UnrecognizedLayout
from aoc_page.layout.edition import Edition, guess

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageHandle:
    """A parsed page plus the indices of its part description anchors.

    ``part2_index`` is ``None`` exactly when part 2 has not been revealed.
    """
    document: Document
    part1_index: int
    part2_index: int | None
    edition: Edition
    config: ParserConfig = field(default=DEFAULT_CONFIG, repr=False)

    def part1_node(self) -> Node:
        return Node(self.document, self.part1_index)

    def part2_node(self) -> Node | None:
        if self.part2_index is None:
            return None
        return Node(self.document, self.part2_index)

    @property
    def part2_revealed(self) -> bool:
        return self.part2_index is not None


def _parse_post_2015(doc: Document, config: ParserConfig) -> PageHandle | MissingRequiredAnchor:
    anchor = Name(config.part_anchor_tag) & Class(config.part_anchor_class)
    articles = doc.find(anchor)

    part1 = next(articles, None)
    part2 = next(articles, None)
    if part1 is None:
        if part2 is not None:
            # find() yields in document order, so this cannot happen.
            raise RuntimeError("page contains a part 2 anchor but no part 1 anchor")
        return MissingRequiredAnchor(doc, Edition.POST_2015)

    for extra in articles:
        logger.warning("html has extra part!? %r: `%s`", extra, extra.text()[:200])

    return PageHandle(
        document=doc,
        part1_index=part1.index,
        part2_index=part2.index if part2 is not None else None,
        edition=Edition.POST_2015,
        config=config,
    )


_PARSERS: dict[Edition, Callable[[Document, ParserConfig], PageHandle | MissingRequiredAnchor]] = {
    Edition.POST_2015: _parse_post_2015,
}


def parse(
    edition: Edition,
    doc: Document,
    config: ParserConfig = DEFAULT_CONFIG,
) -> PageHandle | MissingRequiredAnchor:
    """Parse *doc* with *edition*'s rules.

    Failure is returned rather than raised; the returned error carries
    the document so the caller can try the next edition with it.
    """
    return _PARSERS[edition](doc, config)


def load_page(html: str, config: ParserConfig = DEFAULT_CONFIG) -> PageHandle:
    """Load *html* and locate its part anchors, falling back across editions.

    Raises:
        UnrecognizedLayout: no known edition could parse the page.
    """
    doc = load(html)

    guessed = guess(doc, config)
    if guessed is None:
        logger.warning("failed to guess edition")
        candidates = list(Edition.all())
    else:
        candidates = [guessed] + [e for e in Edition.all() if e is not guessed]

    failures: list[MissingRequiredAnchor] = []
    for edition in candidates:
        result = parse(edition, doc, config)
        if isinstance(result, PageHandle):
            if failures:
                logger.info("Parsed page as %s after %d failed editions", edition.name, len(failures))
            return result
        logger.info("Edition %s did not match: %s", edition.name, result)
        failures.append(result)
        doc = result.document

    raise UnrecognizedLayout(doc, failures)
