"""Core graph of the netlist: nets, function calls, components and netlists."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from .hw_type import HwInt, HwType, HwTypeValue
from .operators import (
    FunctionDef,
    OpAdd,
    OpAnd,
    OpConcat,
    OpDiv,
    OpDownto,
    OpEq,
    OpFalling,
    OpGE,
    OpGt,
    OpLE,
    OpLt,
    OpMul,
    OpNeg,
    OpNeq,
    OpOr,
    OpRising,
    OpSlice,
    OpSub,
    OpUnMinus,
    OpXor,
)
from .ordered_set import OrderedSet

Predicate = Callable[["Node"], bool]


class Direction(enum.Enum):
    """Direction of a signal used as IO."""

    UNKNOWN = 0
    IN = 1
    OUT = 2
    INOUT = 3


@dataclass
class VarId:
    """Name of a variable and whether it is hidden in the output."""

    name: str
    hidden: bool = True


class Node(ABC):
    """A node of the netlist graph.

    ``index`` is the position of the node in ``Netlist.nodes``.
    """

    index: Optional[int] = None

    @abstractmethod
    def forward(self, fn: Predicate) -> None:
        """Call ``fn`` on successors until it returns True."""

    @abstractmethod
    def backward(self, fn: Predicate) -> None:
        """Call ``fn`` on predecessors until it returns True."""


class OperationNode(Node):
    """A node that drives or consumes nets (statement, call, component)."""


class UsageCacheKey:
    """Key of the net usage cache: a function and its argument nets by identity."""

    __slots__ = ("fn", "args")

    def __init__(self, fn: FunctionDef, args: Sequence["Net"]) -> None:
        self.fn = fn
        self.args = tuple(args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UsageCacheKey):
            return NotImplemented
        return (
            self.fn is other.fn
            and len(self.args) == len(other.args)
            and all(a is b for a, b in zip(self.args, other.args))
        )

    def __hash__(self) -> int:
        return hash((id(self.fn),) + tuple(id(a) for a in self.args))


def _stop_on_true(nodes, fn: Predicate) -> None:
    for node in nodes:
        if fn(node):
            return


class FunctionCall(OperationNode):
    """Call of a function (or operator) on argument nets producing ``res``."""

    def __init__(self, fn: FunctionDef, args: Sequence["Net"], res: "Net") -> None:
        self.fn = fn
        self.args: List[Net] = list(args)
        if not self.args:
            raise ValueError("a function call needs at least one argument")
        self.res = res
        self.args[0].ctx.register_node(self)
        for arg in self.args:
            arg.endpoints.add(self)
        res.drivers.add(self)

    def forward(self, fn: Predicate) -> None:
        fn(self.res)

    def backward(self, fn: Predicate) -> None:
        _stop_on_true(self.args, fn)

    def __repr__(self) -> str:
        return f"<FunctionCall {self.fn.name} index={self.index}>"


class ComponentMap(OperationNode):
    """Connects nets of a parent netlist to the IO nets of a child netlist."""

    def __init__(self, parent: "Netlist", component: "Netlist") -> None:
        self.parent = parent
        self.component = component
        self.parent_to_child: Dict[Net, Net] = {}
        self.child_to_parent: Dict[Net, Net] = {}

    def connect(self, parent_net: "Net", component_port: "Net") -> None:
        """Connect ``parent_net`` to the child net ``component_port``.

        The direction of the connection follows the child net's direction.
        """
        if parent_net.ctx is not self.parent:
            raise ValueError("parent net does not belong to the parent netlist")
        if component_port.ctx is not self.component:
            raise ValueError("child net does not belong to the component netlist")
        if parent_net in self.parent_to_child:
            raise ValueError(f"net {parent_net.id.name!r} is already connected")
        if component_port in self.child_to_parent:
            raise ValueError(f"child net {component_port.id.name!r} is already connected")

        self.parent_to_child[parent_net] = component_port
        self.child_to_parent[component_port] = parent_net

        d = component_port.direction
        if d in (Direction.OUT, Direction.INOUT):
            parent_net.drivers.add(self)
            component_port.endpoints.add(self)
        elif d is Direction.IN:
            parent_net.endpoints.add(self)
            component_port.drivers.add(self)

    def forward(self, fn: Predicate) -> None:
        _stop_on_true(
            (
                child
                for child in self.child_to_parent
                if child.direction in (Direction.OUT, Direction.INOUT)
            ),
            fn,
        )

    def backward(self, fn: Predicate) -> None:
        _stop_on_true(
            (
                child
                for child in self.child_to_parent
                if child.direction in (Direction.IN, Direction.INOUT)
            ),
            fn,
        )


class Netlist:
    """Circuit graph: owns all nets, statements, calls and component maps."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.nets: List[Optional[Net]] = []
        self.nodes: List[Optional[Node]] = []
        self.doc = ""

    def sig_in(self, name: str, t: HwType) -> "Net":
        """Create an input signal."""
        net = Net(self, t, name, Direction.IN)
        net.id.hidden = False
        return net

    def sig_out(self, name: str, t: HwType) -> "Net":
        """Create an output signal."""
        net = Net(self, t, name, Direction.OUT)
        net.id.hidden = False
        return net

    def sig(self, t: HwType, name: str = "sig_") -> "Net":
        """Create an internal signal."""
        return Net(self, t, name, Direction.UNKNOWN)

    def add_component(self, component: "Netlist") -> ComponentMap:
        """Instantiate ``component`` inside this netlist."""
        cmap = ComponentMap(self, component)
        self.register_node(cmap)
        return cmap

    def register_node(self, node: Node) -> None:
        """Append ``node`` to ``nodes`` (and to ``nets`` if it is a net)."""
        if isinstance(node, Net):
            node.net_index = len(self.nets)
            self.nets.append(node)
        node.index = len(self.nodes)
        self.nodes.append(node)

    def unregister_node(self, node: Node) -> None:
        """Clear the slot of ``node`` in ``nodes`` (and in ``nets``)."""
        if isinstance(node, Net):
            self.nets[node.net_index] = None
        self.nodes[node.index] = None

    def integrity_assert(self) -> None:
        """Check that node indexes and neighbour references are consistent.

        Raises AssertionError on the first inconsistency found.
        """
        problems: List[str] = []

        def check_neighbour(neighbour: Node) -> bool:
            idx = neighbour.index
            if idx is None or idx >= len(self.nodes) or self.nodes[idx] is not neighbour:
                problems.append(f"neighbour {neighbour!r} is not registered at its index")
                return True
            return False

        for i, node in enumerate(self.nodes):
            if node is None:
                continue
            if node.index != i:
                raise AssertionError(f"node {node!r} has index {node.index}, expected {i}")
            node.forward(check_neighbour)
            if problems:
                raise AssertionError(problems[0])

        for i, net in enumerate(self.nets):
            if net is None:
                continue
            if net.index is None or self.nodes[net.index] is not net:
                raise AssertionError(f"net {net!r} is not in nodes at its index")
            if net.net_index != i:
                raise AssertionError(
                    f"net {net!r} has net_index {net.net_index}, expected {i}"
                )

    def __repr__(self) -> str:
        return f"<Netlist {self.name!r}>"


class Net(Node):
    """A signal of a netlist; a hyper-edge between drivers and endpoints.

    Arithmetic, bitwise and comparison operators build expressions in the
    owning netlist and return the result net.
    """

    def __init__(
        self,
        ctx: Netlist,
        t: HwType,
        name: str,
        direction: Direction = Direction.UNKNOWN,
    ) -> None:
        self.id = VarId(name)
        self.ctx = ctx
        self.net_index: Optional[int] = None
        self.t = t
        self.val: Optional[HwTypeValue] = None
        self.nop_val: Optional[Net] = None
        self.def_val: Optional[Net] = None
        self.direction = direction
        self.drivers: OrderedSet[OperationNode] = OrderedSet()
        self.endpoints: OrderedSet[OperationNode] = OrderedSet()
        self.usage_cache: Dict[UsageCacheKey, Net] = {}
        self.doc = ""
        ctx.register_node(self)

    __hash__ = Node.__hash__

    def is_const(self) -> bool:
        return self.val is not None

    def _wrap_const(self, val: int) -> "Net":
        if isinstance(self.t, HwInt):
            return self.t(self.ctx, val)
        raise TypeError(f"unknown type {self.t!r} for automatic const instantiation")

    def _operand(self, other) -> Optional["Net"]:
        if isinstance(other, Net):
            return other
        if isinstance(other, int):
            return self._wrap_const(other)
        return None

    def _binary(self, fn: FunctionDef, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return apply_call(fn, self, operand)

    def _binary_strict(self, fn: FunctionDef, other) -> "Net":
        operand = self._operand(other)
        if operand is None:
            raise TypeError(f"unsupported operand {other!r} for {fn.name}")
        return apply_call(fn, self, operand)

    # bitwise
    def __invert__(self) -> "Net":
        return apply_call(OpNeg, self)

    def __or__(self, other):
        return self._binary(OpOr, other)

    def __and__(self, other):
        return self._binary(OpAnd, other)

    def __xor__(self, other):
        return self._binary(OpXor, other)

    # comparison
    def __le__(self, other):
        return self._binary(OpLE, other)

    def __lt__(self, other):
        return self._binary(OpLt, other)

    def __ge__(self, other):
        return self._binary(OpGE, other)

    def __gt__(self, other):
        return self._binary(OpGt, other)

    def __eq__(self, other):
        return self._binary(OpEq, other)

    def __ne__(self, other):
        return self._binary(OpNeq, other)

    # arithmetic
    def __neg__(self) -> "Net":
        return apply_call(OpUnMinus, self)

    def __add__(self, other):
        return self._binary(OpAdd, other)

    def __sub__(self, other):
        return self._binary(OpSub, other)

    def __mul__(self, other):
        return self._binary(OpMul, other)

    def __truediv__(self, other):
        return self._binary(OpDiv, other)

    # structural
    def __getitem__(self, index) -> "Net":
        return self._binary_strict(OpSlice, index)

    def downto(self, lower) -> "Net":
        return self._binary_strict(OpDownto, lower)

    def concat(self, other: "Net") -> "Net":
        return self._binary_strict(OpConcat, other)

    def rising(self) -> "Net":
        return apply_call(OpRising, self)

    def falling(self) -> "Net":
        return apply_call(OpFalling, self)

    # graph
    def forward(self, fn: Predicate) -> None:
        _stop_on_true(self.endpoints, fn)

    def backward(self, fn: Predicate) -> None:
        _stop_on_true(self.drivers, fn)

    def forward_disconnect(self, pred: Callable[[Node], bool]) -> None:
        """Remove every endpoint for which ``pred`` is true."""
        for endpoint in [e for e in self.endpoints if pred(e)]:
            self.endpoints.discard(endpoint)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"<Net {self.id.name!r} index={self.index}>"


def apply_call(fn: FunctionDef, *args: Net) -> Net:
    """Return the net holding ``fn(*args)``, reusing an existing call if any."""
    if len(args) != fn.arg_cnt:
        raise ValueError(
            f"{fn.name!r} takes {fn.arg_cnt} argument(s), {len(args)} given"
        )
    first = args[0]
    if any(a.ctx is not first.ctx for a in args[1:]):
        raise ValueError("all arguments have to belong to the same netlist")

    key = UsageCacheKey(fn, args)
    cached = first.usage_cache.get(key)
    if cached is not None:
        return cached

    res = first.ctx.sig(first.t)
    FunctionCall(fn, args, res)
    for arg in args:
        arg.usage_cache[key] = res
    return res