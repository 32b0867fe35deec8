from netlistdb.hw_type import hw_uint8
from netlistdb.netlist import Netlist
from netlistdb.query_match import QueryMatch


def test_empty_query_has_no_matches():
    g = Netlist("g")
    x = g.sig_in("x", hw_uint8)
    _ = ~x
    assert QueryMatch().search(g) == []


def test_single_inverter_matches_once():
    q = QueryMatch()
    a = q.sig_in("a", hw_uint8)
    ra = ~a
    g = Netlist("g")
    x = g.sig_in("x", hw_uint8)
    y = ~x
    matches = q.search(g)
    assert len(matches) == 1
    m = matches[0]
    assert m[a] is x
    assert m[ra] is y
    assert len(m) == 3


def test_two_independent_inverters_match_twice():
    q = QueryMatch()
    a = q.sig_in("a", hw_uint8)
    _ = ~a
    g = Netlist("g")
    x1 = g.sig_in("x1", hw_uint8)
    x2 = g.sig_in("x2", hw_uint8)
    _ = ~x1
    _ = ~x2
    matches = q.search(g)
    assert len(matches) == 2
    roots = [m[a] for m in matches]
    assert roots[0] is x1
    assert roots[1] is x2


def test_no_call_no_match():
    q = QueryMatch()
    a = q.sig_in("a", hw_uint8)
    _ = ~a
    g = Netlist("g")
    g.sig_in("x", hw_uint8)
    g.sig_in("y", hw_uint8)
    assert q.search(g) == []


def test_input_may_have_extra_endpoints_in_graph():
    q = QueryMatch()
    a = q.sig_in("a", hw_uint8)
    _ = ~a
    g = Netlist("g")
    x = g.sig_in("x", hw_uint8)
    _ = ~x
    _ = x + x
    matches = q.search(g)
    assert len(matches) == 1
    assert matches[0][a] is x


def test_binary_call_maps_arguments_in_order():
    q = QueryMatch()
    a = q.sig_in("a", hw_uint8)
    b = q.sig_in("b", hw_uint8)
    r = a & b
    g = Netlist("g")
    x = g.sig_in("x", hw_uint8)
    y = g.sig_in("y", hw_uint8)
    z = x & y
    matches = q.search(g)
    assert len(matches) == 1
    m = matches[0]
    assert m[a] is x
    assert m[b] is y
    assert m[r] is z