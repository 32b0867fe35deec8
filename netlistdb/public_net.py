"""Walk of the public nets an expression is built from."""

from __future__ import annotations

from typing import Callable, FrozenSet, Iterable, Optional, Union

from .netlist import FunctionCall, Net


def _walk_net(net: Net, fn: Callable[[Net], None], seen: FrozenSet) -> None:
    seen = seen | {net}
    if not net.id.hidden:
        fn(net)
        return

    if not net.drivers and net.nop_val is None and net.val is None:
        raise ValueError(f"hidden net {net.id.name!r} has no driver and no value")

    for driver in net.drivers:
        if isinstance(driver, FunctionCall):
            _walk_call(driver, fn, seen)


def _walk_call(call: FunctionCall, fn: Callable[[Net], None], seen: FrozenSet) -> None:
    for arg in call.args:
        if arg not in seen:
            _walk_net(arg, fn, seen)


def walk(
    node: Union[Net, FunctionCall],
    fn: Callable[[Net], None],
    seen: Optional[Iterable[Net]] = None,
) -> None:
    """Call ``fn`` on every non-hidden net the expression behind ``node`` uses.

    Hidden nets are followed through the function calls that drive them;
    a net is not entered again while it is on the current path.  Nets in
    ``seen`` are treated as already on the path.
    """
    visited = frozenset(seen) if seen is not None else frozenset()
    if isinstance(node, Net):
        _walk_net(node, fn, visited)
    elif isinstance(node, FunctionCall):
        _walk_call(node, fn, visited)
    else:
        raise TypeError(f"cannot walk {type(node).__name__}")