"""Arena DOM: lenient HTML loading and predicate-based descendant search."""

from __future__ import annotations

from aoc_page.dom.document import Document, Node, NodeKind, load
from aoc_page.dom.predicates import And, Any, Attr, Class, Descendant, Name, Predicate

__all__ = [
    "And",
    "Any",
    "Attr",
    "Class",
    "Descendant",
    "Document",
    "Name",
    "Node",
    "NodeKind",
    "Predicate",
    "load",
]
