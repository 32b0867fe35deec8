import pytest

from netlistdb.hw_type import hw_uint8
from netlistdb.netlist import Netlist
from netlistdb.traverse import QueryTraverse, neighbours_callback


def _build():
    nl = Netlist("top")
    a = nl.sig_in("a", hw_uint8)
    b = ~a
    c = b & a
    return nl, a, b, c


def _collector():
    seen = []

    def cb(node, select):
        seen.append(node)
        neighbours_callback(node, select)

    return seen, cb


def test_visits_every_reachable_node_once():
    nl, a, _, _ = _build()
    trav = QueryTraverse(len(nl.nodes))
    seen, cb = _collector()
    trav.traverse([a], cb)
    assert len(seen) == len(nl.nodes)
    assert {id(n) for n in seen} == {id(n) for n in nl.nodes}


def test_traverse_can_be_repeated():
    nl, a, _, c = _build()
    trav = QueryTraverse(len(nl.nodes))
    first, cb1 = _collector()
    trav.traverse([a], cb1)
    second, cb2 = _collector()
    trav.traverse([c, a], cb2)
    assert len(first) == len(second) == len(nl.nodes)


def test_duplicate_starts_visited_once():
    nl, a, _, _ = _build()
    trav = QueryTraverse(len(nl.nodes))
    seen, cb = _collector()
    trav.traverse([a, a], cb)
    assert len(seen) == len(nl.nodes)


def test_empty_starts_do_nothing():
    nl, a, _, _ = _build()
    trav = QueryTraverse(len(nl.nodes))
    seen, cb = _collector()
    trav.traverse([], cb)
    assert seen == []
    trav.clean_visit_flags()
    assert trav.is_visited(a) is False


def test_forward_only_callback_does_not_go_back():
    nl, a, b, c = _build()
    trav = QueryTraverse(len(nl.nodes))
    seen = []

    def cb(node, select):
        seen.append(node)

        def pick(n):
            select(n)
            return False

        node.forward(pick)

    trav.traverse([b], cb)
    assert any(n is c for n in seen)
    assert not any(n is a for n in seen)
    assert trav.is_visited(c) is True
    assert trav.is_visited(a) is False


def test_is_visited_exchanges_flag():
    nl, a, _, _ = _build()
    trav = QueryTraverse(len(nl.nodes))
    trav.clean_visit_flags()
    assert trav.is_visited(a) is False
    assert trav.is_visited(a) is True
    trav.clean_visit_flags()
    assert trav.is_visited(a) is False


def test_index_out_of_range_raises():
    nl, _, _, c = _build()
    trav = QueryTraverse(1)
    with pytest.raises(IndexError):
        trav.is_visited(c)