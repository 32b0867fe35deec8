"""Graph pattern matching: search a netlist for sub-graphs like a query."""

from __future__ import annotations

from typing import Dict, List

from .backtrack import BackTrackingContext, MatchCheck
from .netlist import Direction, FunctionCall, Net, Netlist, Node
from .ordered_set import OrderedSet


def _find_matching_permutation(
    ref: OrderedSet,
    graph_io: OrderedSet,
    ctx: BackTrackingContext,
    allow_more_in_graph: bool,
) -> bool:
    """Find a graph node for each query node, in any order."""
    if allow_more_in_graph:
        if len(graph_io) < len(ref):
            return False
    elif len(ref) != len(graph_io):
        return False

    match_found = True
    for ref_node in ref:
        match_found = False
        ctx_for_endpoint = ctx.child()
        for graph_node in graph_io:
            if _search_recurse(ref_node, graph_node, ctx_for_endpoint):
                match_found = True
                break
            ctx_for_endpoint.discard()
        if not match_found:
            # one query node has no counterpart, the graph can not match
            ctx.pop_child()
            break
    return match_found


def _search_call(ref: FunctionCall, call: FunctionCall, ctx: BackTrackingContext) -> bool:
    check = ctx.check_can_match(ref, call)
    if check is MatchCheck.ALREADY_MATCHES:
        return True
    if check is MatchCheck.CAN_NOT_MATCH:
        return False
    if len(ref.args) != len(call.args):
        return False

    ctx.insert_match(ref, call)
    if not _search_net(ref.res, call.res, ctx):
        return False
    return all(_search_net(r, a, ctx) for r, a in zip(ref.args, call.args))


def _search_net(ref: Net, net: Net, ctx: BackTrackingContext) -> bool:
    """A net matches if all its neighbours match in some order."""
    check = ctx.check_can_match(ref, net)
    if check is MatchCheck.ALREADY_MATCHES:
        return True
    if check is MatchCheck.CAN_NOT_MATCH:
        return False
    ctx.insert_match(ref, net)

    ignore_drivers = ref.direction is Direction.IN
    ignore_endpoints = ref.direction is Direction.OUT
    child_ctx = ctx.child()

    if ignore_drivers:
        # an input of the query may have extra endpoints in the graph
        return _find_matching_permutation(
            ref.endpoints, net.endpoints, child_ctx, True
        )

    if len(ref.drivers) != len(net.drivers) or len(ref.endpoints) != len(net.endpoints):
        return False
    if not _find_matching_permutation(ref.drivers, net.drivers, child_ctx, False):
        return False
    return ignore_endpoints or _find_matching_permutation(
        ref.endpoints, net.endpoints, child_ctx, False
    )


def _search_recurse(ref: Node, n: Node, ctx: BackTrackingContext) -> bool:
    ref_is_call = isinstance(ref, FunctionCall)
    n_is_call = isinstance(n, FunctionCall)
    if ref_is_call and n_is_call:
        return _search_call(ref, n, ctx)
    if ref_is_call or n_is_call:
        return False

    ref_is_net = isinstance(ref, Net)
    n_is_net = isinstance(n, Net)
    if ref_is_net and n_is_net:
        return _search_net(ref, n, ctx)
    return False


class QueryMatch(Netlist):
    """A query graph; build it like a netlist, then search other netlists.

    The query graph has to form a single connected component.  Input
    ports of the query may have extra endpoints in the searched graph,
    output ports may have any endpoints.
    """

    def __init__(self) -> None:
        super().__init__("")

    def search(self, netlist: Netlist) -> List[Dict[Node, Node]]:
        """Return every match of this query in ``netlist``.

        Each match maps query nodes to nodes of ``netlist``.
        """
        matches: List[Dict[Node, Node]] = []
        root = next((n for n in self.nets if n is not None), None)
        if root is None:
            return matches

        for net in netlist.nets:
            if net is None:
                continue
            current: Dict[Node, Node] = {}
            ctx = BackTrackingContext(current)
            if _search_recurse(root, net, ctx):
                matches.append(dict(current))
            ctx.discard()
        return matches