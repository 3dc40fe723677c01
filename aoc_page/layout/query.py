"""Scoped structural searches over a located page.

Every function here is a fresh, lazy traversal: calling it twice walks
the document twice and nothing is cached on the handle.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator

from aoc_page.dom import Class, Name, Node, Predicate
from aoc_page.layout.locator import PageHandle

logger = logging.getLogger(__name__)

EXAMPLE_BLOCK = Name("pre").descendant(Name("code"))
# Most example answers are <code><em>, but some days (2022 day 1) use <em><code>.
ANSWER_CODE_EM = Name("code").descendant(Name("em"))
ANSWER_EM_CODE = Name("em").descendant(Name("code"))


class QueryScope(Enum):
    # Only the part 1 description.
    PART1 = "part1"
    # Only the part 2 description; empty while part 2 is locked.
    PART2 = "part2"
    # Part 1 then part 2.
    BOTH = "both"
    # The whole document, anchors ignored.
    ENTIRE_PAGE = "entire_page"


def _roots(page: PageHandle, scope: QueryScope) -> list[Node]:
    if scope is QueryScope.ENTIRE_PAGE:
        return [page.document.root]

    roots = []
    if scope in (QueryScope.PART1, QueryScope.BOTH):
        roots.append(page.part1_node())
    if scope in (QueryScope.PART2, QueryScope.BOTH):
        part2 = page.part2_node()
        if part2 is not None:
            roots.append(part2)
    return roots


def search(page: PageHandle, scope: QueryScope, predicate: Predicate) -> Iterator[Node]:
    """Yield nodes matching *predicate* below each scope root, root by root."""
    for root in _roots(page, scope):
        yield from root.find(predicate)


def example_blocks(page: PageHandle, scope: QueryScope) -> Iterator[Node]:
    """``<code>`` nodes inside ``<pre>``: example inputs."""
    return search(page, scope, EXAMPLE_BLOCK)


def example_answers(page: PageHandle, scope: QueryScope) -> Iterator[Node]:
    """Emphasised code fragments: every ``<code><em>`` first, then every ``<em><code>``."""
    yield from search(page, scope, ANSWER_CODE_EM)
    yield from search(page, scope, ANSWER_EM_CODE)


def puzzle_answers(page: PageHandle) -> Iterator[str]:
    """Accepted answers, from paragraphs reading ``Your puzzle answer was <code>...</code>``."""
    prefix = page.config.answer_prefix
    for code in page.document.find(Name("p").descendant(Name("code"))):
        parent = code.parent()
        if parent is not None and parent.text().startswith(prefix):
            yield code.text()


def success_banners(page: PageHandle) -> Iterator[Node]:
    return page.document.find(Name("p") & Class(page.config.success_class))


def embedded_puzzle_input(page: PageHandle) -> str | None:
    """The puzzle input some days inline into the page, exactly as written."""
    predicate = Name("code") & Class(page.config.puzzle_input_class)
    node = next(page.document.find(predicate), None)
    if node is None:
        return None
    return node.text()
