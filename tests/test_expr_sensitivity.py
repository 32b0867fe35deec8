from netlistdb.expr_sensitivity import probe, probe_function_call, probe_net
from netlistdb.hw_type import hw_bit, hw_uint8
from netlistdb.netlist import FunctionCall, Netlist
from netlistdb.operators import OpNeg
from netlistdb.sensitivity import SensitivityCtx


def test_combinational_expression():
    ctx = Netlist("top")
    a = ctx.sig_in("a", hw_bit)
    b = ctx.sig_in("b", hw_bit)
    c = a + b
    sens = SensitivityCtx()
    seen = set()
    probe(c, seen, sens)
    assert [n.id.name for n in sens] == ["a", "b"]
    assert sens.contains_event_dep is False
    assert c in seen and c.drivers[0] in seen


def test_event_operator_hides_casual_sensitivity():
    ctx = Netlist("top")
    clk = ctx.sig_in("clk", hw_bit)
    en = ctx.sig_in("en", hw_bit)
    r = clk.rising()
    cond = r & en
    sens = SensitivityCtx()
    probe(cond, set(), sens)
    assert sens.contains_event_dep is True
    assert len(sens) == 1
    assert sens[0] is r.drivers[0]


def test_constants_are_ignored():
    ctx = Netlist("top")
    a = ctx.sig_in("a", hw_uint8)
    sens = SensitivityCtx()
    probe(a + 1, set(), sens)
    assert [n.id.name for n in sens] == ["a"]


def test_net_with_several_drivers_is_casual():
    ctx = Netlist("top")
    a = ctx.sig_in("a", hw_bit)
    b = ctx.sig_in("b", hw_bit)
    n = ctx.sig(hw_bit, "n")
    FunctionCall(OpNeg, [a], n)
    FunctionCall(OpNeg, [b], n)
    casual = set()
    sens = SensitivityCtx()
    probe_net(n, casual, set(), sens)
    assert casual == {n}
    assert len(sens) == 0


def test_probe_net_collects_into_casual_only():
    ctx = Netlist("top")
    a = ctx.sig_in("a", hw_bit)
    c = ~a
    casual = set()
    sens = SensitivityCtx()
    probe_net(c, casual, set(), sens)
    assert casual == {a}
    assert len(sens) == 0


def test_probe_function_call_skips_seen_operands():
    ctx = Netlist("top")
    a = ctx.sig_in("a", hw_bit)
    b = ctx.sig_in("b", hw_bit)
    call = (a | b).drivers[0]
    casual = set()
    seen = {a}
    probe_function_call(call, casual, seen, SensitivityCtx())
    assert casual == {b}
    assert call in seen