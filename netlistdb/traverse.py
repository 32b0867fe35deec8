"""Traversal of the netlist graph that visits every reached node once."""

from __future__ import annotations

import threading
from typing import Callable, Iterable, List, Optional

from .netlist import Node

Select = Callable[[Node], None]
TraverseCallback = Callable[[Node, Select], None]


def neighbours_callback(n: Node, select: Select) -> None:
    """Select every driver/input and every endpoint/output of ``n``."""

    def pick(node: Node) -> bool:
        select(node)
        return False

    n.backward(pick)
    n.forward(pick)


class QueryTraverse:
    """Walks the graph from start nodes, calling a callback on each node once.

    Visit flags are indexed by ``Node.index`` and are reset lazily before
    each traversal, so one instance can be reused for many traversals.
    """

    def __init__(self, max_items: int) -> None:
        self.max_items = max_items
        self.visited = bytearray(max_items)
        self.visited_clean = False
        self.load_balance_limit = 128
        self.callback: Optional[TraverseCallback] = None
        self._lock = threading.Lock()

    def is_visited(self, n: Node) -> bool:
        """Mark ``n`` as visited and return whether it was visited before."""
        index = n.index
        if index is None or not 0 <= index < self.max_items:
            raise IndexError(f"node index {index!r} is outside of the visit flags")
        with self._lock:
            was = bool(self.visited[index])
            self.visited[index] = 1
        return was

    def clean_visit_flags(self) -> None:
        """Reset all visit flags."""
        with self._lock:
            self.visited[:] = bytes(self.max_items)
        self.visited_clean = True

    def traverse(self, starts: Iterable[Node], callback: TraverseCallback) -> None:
        """Call ``callback`` exactly once on each node reached from ``starts``.

        The callback receives the node and a ``select`` function; calling
        ``select`` on a node schedules it for a visit.
        """
        start_nodes = list(starts)
        if not start_nodes:
            return
        self.callback = callback
        if not self.visited_clean:
            self.clean_visit_flags()
        self.visited_clean = False
        for item in start_nodes:
            if not self.is_visited(item):
                self._traverse_from(item)

    def _traverse_from(self, n: Node) -> None:
        stack: List[Node] = [n]

        def select(item: Node) -> None:
            if not self.is_visited(item):
                stack.append(item)

        callback = self.callback
        while stack:
            node = stack.pop()
            callback(node, select)