"""Search for a forward path between two nodes."""

from __future__ import annotations

from typing import List

from .netlist import Node


def _extend_path(a: Node, b: Node, path: List[Node]) -> bool:
    path.append(a)
    if a is b:
        return True

    found = False

    def visit(node: Node) -> bool:
        nonlocal found
        if not any(p is node for p in path):
            found = _extend_path(node, b, path)
        return found

    a.forward(visit)
    if found:
        return True
    path.pop()
    return False


def find_path(a: Node, b: Node) -> List[Node]:
    """Return the nodes of a forward path from ``a`` to ``b``.

    The path starts with ``a`` and ends with ``b``; it is empty if ``b``
    cannot be reached from ``a``.
    """
    path: List[Node] = []
    _extend_path(a, b, path)
    return path