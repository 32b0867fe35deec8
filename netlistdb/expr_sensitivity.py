"""Discovery of the sensitivity of an expression.

The probe follows only function calls and stops at nets driven by
anything else (statements, components, several drivers).
"""

from __future__ import annotations

from typing import MutableSet, Set

from .netlist import FunctionCall, Net, Node
from .operators import is_event_op
from .ordered_set import OrderedSet
from .sensitivity import SensitivityCtx


def probe_function_call(
    fn_call: FunctionCall,
    casual_sensitivity: MutableSet,
    seen: Set[Node],
    ctx: SensitivityCtx,
) -> None:
    """Probe a function call; event operators go straight to ``ctx``."""
    seen.add(fn_call)
    if is_event_op(fn_call.fn):
        ctx.contains_event_dep = True
        ctx.add(fn_call)
        return
    for operand in fn_call.args:
        if operand not in seen:
            probe_net(operand, casual_sensitivity, seen, ctx)


def probe_net(
    net: Net,
    casual_sensitivity: MutableSet,
    seen: Set[Node],
    ctx: SensitivityCtx,
) -> None:
    """Probe a net; nets not driven by a single call are casual sensitivity."""
    seen.add(net)
    if net.is_const():
        return

    op = None
    if len(net.drivers) == 1 and isinstance(net.drivers[0], FunctionCall):
        op = net.drivers[0]

    if op is None:
        casual_sensitivity.add(net)
        return

    probe_function_call(op, casual_sensitivity, seen, ctx)


def probe(net: Net, seen: Set[Node], ctx: SensitivityCtx) -> None:
    """Add the sensitivity of the expression behind ``net`` to ``ctx``.

    If an event operator is found, the casual sensitivity is left out.
    """
    casual: OrderedSet = OrderedSet()
    probe_net(net, casual, seen, ctx)
    if not ctx.contains_event_dep:
        ctx.extend(casual)