"""Base class of statements (assignments, if-statements, processes)."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from .netlist import Netlist, Node, OperationNode, Predicate
from .ordered_set import OrderedSet
from .sensitivity import SensitivityCtx


@dataclass(eq=False)
class SensitivityInfo:
    """Sensitivity and enclosure information of a statement.

    ``is_completely_event_dependent``: the statement has no combinational
    or asynchronous part.
    ``now_is_event_dependent``: the statement depends on a clock but may
    still contain asynchronous logic.
    ``enclosed_for``: outputs for which every code branch drives a value.
    ``sensitivity``: input nets or event operators the statement reacts to.
    """

    is_completely_event_dependent: bool = False
    now_is_event_dependent: bool = False
    enclosed_for: OrderedSet = field(default_factory=OrderedSet)
    sensitivity: SensitivityCtx = field(default_factory=SensitivityCtx)


class Statement(OperationNode):
    """A statement in the netlist.

    Only a top-level statement is connected to its nets and registered in
    the netlist; nested statements hand their IO to the top statement.
    ``rank`` is the number of branches used, a pre-filter for comparison.
    The sensitivity has to be discovered explicitly.
    """

    def __init__(self) -> None:
        self.parent: "Statement | None" = None
        self.inputs: OrderedSet = OrderedSet()
        self.outputs: OrderedSet = OrderedSet()
        self.sens = SensitivityInfo()
        self.rank = 0
        self.doc = ""

    @abstractmethod
    def visit_child_stm(self, fn: Callable[["Statement"], bool]) -> None:
        """Call ``fn`` on each direct child statement until it returns True."""

    def get_context(self) -> Netlist:
        """Return the netlist owning the nets connected to this statement."""
        found: List[Netlist] = []

        def grab(node: Node) -> bool:
            found.append(node.ctx)
            return True

        self.forward(grab)
        if found:
            return found[0]

        self.backward(grab)
        if found:
            return found[0]

        def from_child(stm: "Statement") -> bool:
            found.append(stm.get_context())
            return True

        self.visit_child_stm(from_child)
        if found:
            return found[0]

        raise RuntimeError("the statement is entirely disconnected, the context is lost")

    def on_parent_event_dependent(self) -> None:
        """Mark this statement and its children as completely event dependent."""
        if self.sens.is_completely_event_dependent:
            return
        self.sens.is_completely_event_dependent = True

        def propagate(stm: "Statement") -> bool:
            stm.on_parent_event_dependent()
            return False

        self.visit_child_stm(propagate)

    def set_parent_stm(self, stm: "Statement") -> None:
        """Nest this statement in ``stm``, moving its IO to the top statement."""
        was_top = self.parent is None
        self.parent = stm
        if not self.sens.now_is_event_dependent and stm.sens.now_is_event_dependent:
            self.on_parent_event_dependent()

        top = stm
        while top.parent is not None:
            top = top.parent

        if was_top:
            for inp in self.inputs:
                inp.endpoints.discard(self)
                inp.endpoints.add(top)
                top.inputs.add(inp)
            for outp in self.outputs:
                outp.drivers.discard(self)
                outp.drivers.add(top)
                top.outputs.add(outp)
            # the statement now lives inside another statement
            self.get_context().unregister_node(self)

        stm.rank += self.rank

    def register_statements(
        self, statements: Sequence["Statement"], target: List["Statement"]
    ) -> None:
        """Nest each of ``statements`` in this statement and append it to ``target``."""
        for stm in statements:
            if stm.parent is not None:
                raise ValueError("the statement already has a parent statement")
            stm.set_parent_stm(self)
            target.append(stm)

    def forward(self, fn: Predicate) -> None:
        for out in self.outputs:
            if fn(out):
                return

    def backward(self, fn: Predicate) -> None:
        for inp in self.inputs:
            if fn(inp):
                return