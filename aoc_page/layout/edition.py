"""Page-layout editions and title-based edition guessing."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterator

from aoc_page.config import DEFAULT_CONFIG, ParserConfig
from aoc_page.dom import Document, Name

logger = logging.getLogger(__name__)

_YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)")


class Edition(Enum):
    """A group of mutually compatible page layouts.

    Every day within one edition is parsed with the same rules.
    """
    # Every event since the first one marks parts with <article class="day-desc">.
    POST_2015 = "post_2015"

    @classmethod
    def all(cls) -> Iterator[Edition]:
        """All editions in the order the fallback chain tries them."""
        return iter([cls.POST_2015])


def guess(doc: Document, config: ParserConfig = DEFAULT_CONFIG) -> Edition | None:
    """Guess which edition *doc* uses from the year in its ``<title>``."""
    title = next(doc.find(Name("title")), None)
    if title is None:
        logger.debug("No <title> element to guess edition from")
        return None

    text = title.text()
    for match in _YEAR_RE.finditer(text):
        if int(match.group(1)) >= config.first_edition_year:
            return Edition.POST_2015

    logger.debug("No edition year marker in title %r", text)
    return None
