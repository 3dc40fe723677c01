"""Arena-backed HTML document.

BeautifulSoup does the lenient parsing; the resulting tree is flattened
into a node table in pre-order so every node is addressed by a stable
integer index and every subtree is a contiguous index range.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from bs4 import BeautifulSoup
from bs4.element import PreformattedString, Tag

from aoc_page.dom.predicates import Predicate

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    ROOT = "root"
    ELEMENT = "element"
    TEXT = "text"
    # Comments, doctypes, CDATA and processing instructions.
    OTHER = "other"


@dataclass(frozen=True)
class _Record:
    kind: NodeKind
    name: Optional[str]
    attrs: dict[str, str]
    data: str
    parent: Optional[int]
    children: tuple[int, ...]
    # Index of the last node in this node's subtree.
    end: int


class Document:
    """Immutable parsed page. Build with ``load``."""

    def __init__(self, records: list[_Record]):
        self._records = records

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"<Document nodes={len(self._records)}>"

    @property
    def root(self) -> Node:
        return Node(self, 0)

    def nth(self, index: int) -> Node | None:
        if 0 <= index < len(self._records):
            return Node(self, index)
        return None

    def find(self, predicate: Predicate) -> Iterator[Node]:
        """Yield every node in the document matching *predicate*, in document order."""
        for index in range(len(self._records)):
            node = Node(self, index)
            if predicate.matches(node):
                yield node

    def _record(self, index: int) -> _Record:
        return self._records[index]


@dataclass(frozen=True)
class Node:
    """Handle to one node of a ``Document``; cheap to copy and compare."""
    document: Document
    index: int

    def __repr__(self) -> str:
        rec = self._rec
        if rec.kind is NodeKind.ELEMENT:
            return f"<Node {rec.name} #{self.index}>"
        return f"<Node {rec.kind.value} #{self.index}>"

    @property
    def _rec(self) -> _Record:
        return self.document._record(self.index)

    @property
    def kind(self) -> NodeKind:
        return self._rec.kind

    @property
    def name(self) -> str | None:
        return self._rec.name

    @property
    def attrs(self) -> dict[str, str]:
        return dict(self._rec.attrs)

    @property
    def classes(self) -> list[str]:
        return self._rec.attrs.get("class", "").split()

    def attr(self, key: str) -> str | None:
        return self._rec.attrs.get(key)

    def parent(self) -> Node | None:
        parent = self._rec.parent
        return None if parent is None else Node(self.document, parent)

    def children(self) -> list[Node]:
        return [Node(self.document, i) for i in self._rec.children]

    def descendants(self) -> Iterator[Node]:
        """Strict descendants in document order."""
        for index in range(self.index + 1, self._rec.end + 1):
            yield Node(self.document, index)

    def find(self, predicate: Predicate) -> Iterator[Node]:
        """Yield strict descendants matching *predicate*, in document order."""
        for node in self.descendants():
            if predicate.matches(node):
                yield node

    def text(self) -> str:
        """Concatenated text of this node and everything below it."""
        parts = []
        for index in range(self.index, self._rec.end + 1):
            rec = self.document._record(index)
            if rec.kind is NodeKind.TEXT:
                parts.append(rec.data)
        return "".join(parts)


def _attrs_of(tag: Tag) -> dict[str, str]:
    # Multi-valued attributes (class, rel, ...) come back from bs4 as lists.
    attrs = {}
    for key, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        attrs[key] = value
    return attrs


def load(html: str) -> Document:
    """Parse *html* into a ``Document``. Malformed markup is repaired, never rejected."""
    soup = BeautifulSoup(html, "html.parser")

    kinds: list[NodeKind] = []
    names: list[Optional[str]] = []
    attrs: list[dict[str, str]] = []
    data: list[str] = []
    parents: list[Optional[int]] = []
    children: list[list[int]] = []

    # Explicit stack: deeply nested pages must not hit the recursion limit.
    stack: list[tuple[object, Optional[int]]] = [(soup, None)]
    while stack:
        element, parent = stack.pop()
        index = len(kinds)
        if parent is not None:
            children[parent].append(index)
        parents.append(parent)
        children.append([])

        if element is soup:
            kinds.append(NodeKind.ROOT)
            names.append(None)
            attrs.append({})
            data.append("")
        elif isinstance(element, Tag):
            kinds.append(NodeKind.ELEMENT)
            names.append(element.name)
            attrs.append(_attrs_of(element))
            data.append("")
        elif isinstance(element, PreformattedString):
            kinds.append(NodeKind.OTHER)
            names.append(None)
            attrs.append({})
            data.append(str(element))
        else:
            kinds.append(NodeKind.TEXT)
            names.append(None)
            attrs.append({})
            data.append(str(element))

        if isinstance(element, Tag):
            for child in reversed(element.contents):
                stack.append((child, index))

    ends = list(range(len(kinds)))
    for index in reversed(range(len(kinds))):
        if children[index]:
            ends[index] = ends[children[index][-1]]

    records = [
        _Record(
            kind=kinds[i],
            name=names[i],
            attrs=attrs[i],
            data=data[i],
            parent=parents[i],
            children=tuple(children[i]),
            end=ends[i],
        )
        for i in range(len(kinds))
    ]
    logger.debug("Loaded document with %d nodes", len(records))
    return Document(records)
