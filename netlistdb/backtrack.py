"""Book-keeping of matched nodes during graph pattern matching."""

from __future__ import annotations

import enum
from typing import Dict, List, Optional, Set

from .netlist import Node


class MatchCheck(enum.Enum):
    """Result of checking whether a graph node can match a query node."""

    ALREADY_MATCHES = enum.auto()
    CAN_MATCH = enum.auto()
    CAN_NOT_MATCH = enum.auto()


class BackTrackingContext:
    """A branch of a backtracking search over a shared match dictionary.

    ``match`` maps query nodes to graph nodes and is shared by the whole
    tree of contexts; ``private_match`` holds the query nodes matched in
    this context, which are forgotten when the context is discarded.
    """

    def __init__(self, match: Dict[Node, Node]) -> None:
        self.match = match
        self.private_match: Set[Node] = set()
        self.children: List[BackTrackingContext] = []

    def child(self) -> "BackTrackingContext":
        """Create and return a child context sharing the same match."""
        ch = BackTrackingContext(self.match)
        self.children.append(ch)
        return ch

    def is_my_child(self, c: Optional["BackTrackingContext"]) -> bool:
        """Return True if ``c`` is a descendant of this context."""
        if c is None:
            return False
        return any(ch is c or ch.is_my_child(c) for ch in self.children)

    def discard(self) -> None:
        """Forget the matches made in this context and drop its children."""
        self.children.clear()
        for item in self.private_match:
            self.match.pop(item, None)

    def check_can_match(self, ref: Node, n: Node) -> MatchCheck:
        """Check whether graph node ``n`` can match query node ``ref``."""
        matched = self.match.get(ref)
        if matched is None:
            return MatchCheck.CAN_MATCH
        if matched is n:
            return MatchCheck.ALREADY_MATCHES
        return MatchCheck.CAN_NOT_MATCH

    def insert_match(self, ref: Node, n: Node) -> None:
        """Record that ``ref`` matches ``n`` unless ``ref`` is matched already."""
        if ref not in self.match:
            self.private_match.add(ref)
            self.match[ref] = n

    def pop_child(self) -> None:
        """Drop the most recently created child context."""
        self.children.pop()