"""Node predicates: tag name, class, attribute, conjunction and ancestry.

Predicates compose the same way CSS selectors do for the handful of
shapes the extractors need::

    Name("pre").descendant(Name("code"))      # pre code
    Name("p") & Class("day-success")          # p.day-success
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aoc_page.dom.document import Node


class Predicate:
    """Base class; subclasses implement ``matches``."""

    def matches(self, node: Node) -> bool:
        raise NotImplementedError

    def __and__(self, other: Predicate) -> Predicate:
        return And(self, other)

    def descendant(self, other: Predicate) -> Predicate:
        """Match nodes satisfying *other* that sit somewhere below a node satisfying self."""
        return Descendant(self, other)


@dataclass(frozen=True)
class Any(Predicate):
    def matches(self, node: Node) -> bool:
        return True


@dataclass(frozen=True)
class Name(Predicate):
    name: str

    def matches(self, node: Node) -> bool:
        return node.name == self.name


@dataclass(frozen=True)
class Class(Predicate):
    cls: str

    def matches(self, node: Node) -> bool:
        return self.cls in node.classes


@dataclass(frozen=True)
class Attr(Predicate):
    """Attribute presence, or equality when *value* is given."""
    key: str
    value: str | None = None

    def matches(self, node: Node) -> bool:
        actual = node.attr(self.key)
        if actual is None:
            return False
        return self.value is None or actual == self.value


@dataclass(frozen=True)
class And(Predicate):
    left: Predicate
    right: Predicate

    def matches(self, node: Node) -> bool:
        return self.left.matches(node) and self.right.matches(node)


@dataclass(frozen=True)
class Descendant(Predicate):
    ancestor: Predicate
    child: Predicate

    def matches(self, node: Node) -> bool:
        if not self.child.matches(node):
            return False
        parent = node.parent()
        while parent is not None:
            if self.ancestor.matches(parent):
                return True
            parent = parent.parent()
        return False
