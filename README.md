# netlistdb

An in-memory database for digital circuit netlists. A netlist is a graph of
nets (signals), function calls (operators), statements and component
instances. Expressions are built with ordinary Python operators on nets.
Identical sub-expressions are shared through a usage cache.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a netlist

```python
from netlistdb.netlist import Netlist
from netlistdb.hw_type import HwInt

u8 = HwInt(8, False, False)

nl = Netlist("adder")
a = nl.sig_in("a", u8)
b = nl.sig_in("b", u8)
y = nl.sig_out("y", u8)

s = a + b            # creates a FunctionCall node and a result net
assert (a + b) is s  # the same expression is reused

c = u8(nl, 5, u8.all_mask)  # a constant net
assert c.is_const()

nl.integrity_assert()
```

`Netlist` has these methods:

- `sig_in(name, t)` and `sig_out(name, t)` create IO nets, which are not hidden.
- `sig(t, name="sig_")` creates an internal, hidden net.
- `add_component(other_netlist)` returns a `ComponentMap`. Its
  `connect(parent_net, component_port)` method wires a net of this netlist to
  a net of the child netlist. The direction of the child net decides which side
  drives the connection.
- `register_node` and `unregister_node` manage `nodes` and `nets`. A removed
  node leaves `None` in its slot.
- `integrity_assert()` raises `AssertionError` if node indexes or neighbour
  references are inconsistent.

Nets support these operators:

- `~`, `|`, `&` and `^`
- the comparisons `<`, `<=`, `>`, `>=`, `==` and `!=`
- unary `-`, `+`, `-`, `*` and `/`
- indexing (`net[index]`)
- the methods `downto`, `concat`, `rising` and `falling`

Each of these adds a `FunctionCall` to the netlist and returns the result net.
This includes `==` and `!=`: they build expressions and do not compare nets.

A plain `int` operand on the right-hand side is wrapped into a constant net of the net's
type. This works only for `HwInt` nets. For any other type it raises `TypeError`.

`netlistdb.netlist.apply_call(fn, *args)` applies any `FunctionDef` directly.
It checks the number of arguments and that all arguments belong to the same
netlist.

The built-in operators (`OpAnd`, `OpAdd`, `OpRising`, ...) and `is_event_op`
are in `netlistdb.operators`.

## Types and bit utilities

`netlistdb.hw_type` provides the following:

- `HwInt(bit_length, is_signed, has_to_be_vector)` and its values (`HwIntValue`).
  A mask wider than the type raises `ValueError`.
- Array types built with `t[size]` (`HwArrayType`).
- Ready-made integer types such as `hw_uint8`, `hw_int32`, `hw_bit` and `hw_bool`.

`netlistdb.bit_utils` has `mask`, `select_bits` and `set_bits` for
arbitrary-width integers.

`netlistdb.ordered_set.OrderedSet` is the insertion-ordered set used for
drivers and endpoints. `netlistdb.sensitivity.SensitivityCtx` is an
`OrderedSet` with a `contains_event_dep` flag.

## Statements

`netlistdb.statement.Statement` is an abstract base for statements. Subclasses
implement `visit_child_stm`. The base class provides the following:

- `get_context()` returns the owning netlist.
- `set_parent_stm` and `register_statements` nest statements. The IO of a
  nested statement moves to the top statement.
- `on_parent_event_dependent()` propagates the event-dependency flag to the
  child statements.

## Queries

- `netlistdb.query_path.find_path(a, b)` returns a forward path from `a` to
  `b` as a list of nodes. The list is empty if `b` cannot be reached.
- `netlistdb.public_net.walk(node, fn, seen=None)` calls `fn` on every
  non-hidden net that the expression behind `node` is built from.
- `netlistdb.expr_sensitivity.probe(net, seen, ctx)` collects the sensitivity
  of an expression into a `SensitivityCtx`. Event operators (`rising`,
  `falling`) replace the plain input nets.
- `netlistdb.traverse.QueryTraverse(max_items)` has a `traverse(starts, callback)`
  method that calls the callback exactly once on every node reached. The
  callback chooses the next nodes through a `select` function, and
  `neighbours_callback` selects all neighbours. The traversal runs on the
  calling thread.
- `netlistdb.query_match.QueryMatch` is a netlist used as a pattern. Its
  `search(netlist)` method returns one dictionary per match, mapping query
  nodes to nodes of the searched netlist. Input nets of the query may have
  extra endpoints in the searched graph. Pattern matching covers nets and
  function calls. The bookkeeping for it is in `netlistdb.backtrack`.

## What the package does not do

The package has no concrete statement kinds, such as assignments or
if-statements. It cannot write a netlist out as HDL text and has no
transformations that rewrite or simplify a netlist. It keeps netlists in memory
only: there is no file format, storage or command-line tool.