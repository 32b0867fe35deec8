"""Function definitions and the built-in operators of the netlist."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False, frozen=True)
class FunctionDef:
    """Definition of a function; operators are functions too.

    Definitions are compared by identity, so two operators that share a
    symbol (unary and binary minus) stay distinct.
    """

    name: str
    arg_cnt: int


# bitwise
OpNeg = FunctionDef("~", 1)
OpAnd = FunctionDef("and", 2)
OpOr = FunctionDef("or", 2)
OpXor = FunctionDef("xor", 2)

# comparison
OpLE = FunctionDef("<=", 2)
OpGE = FunctionDef(">=", 2)
OpGt = FunctionDef(">", 2)
OpLt = FunctionDef("<", 2)
OpEq = FunctionDef("==", 2)
OpNeq = FunctionDef("!=", 2)

# arithmetic
OpUnMinus = FunctionDef("-", 1)
OpAdd = FunctionDef("+", 2)
OpSub = FunctionDef("-", 2)
OpDiv = FunctionDef("/", 2)
OpMul = FunctionDef("*", 2)

# structural
OpConcat = FunctionDef("concat", 2)
OpSlice = FunctionDef("slice", 2)
OpDownto = FunctionDef("downto", 2)

# events
OpRising = FunctionDef("rising", 1)
OpFalling = FunctionDef("falling", 1)


def is_event_op(op: FunctionDef) -> bool:
    """Return True if ``op`` is an event operator (rising or falling edge)."""
    return op is OpRising or op is OpFalling