"""Debug rendering of value graphs.

Each node is shown with its type, live reference count and an opaque
identity, e.g.

    [0x7f3a... pair with 1 refs: ([0x7f3b... number with 1 refs: 1] . [nil])]
"""

from __future__ import annotations

from io import StringIO

from sublisp import LispValue
from sublisp.printer import write_expr
from sublisp.types.pair import Pair


def node_id(expr: LispValue) -> str:
    return f"{id(expr):#x}"


def write_debug_expr(expr: LispValue, buffer: StringIO) -> None:
    buffer.write("[")
    if expr is None:
        buffer.write("nil")
    else:
        buffer.write(f"{node_id(expr)} {expr.type_name} with {expr.refs} refs: ")
        if isinstance(expr, Pair):
            buffer.write("(")
            write_debug_expr(expr.head, buffer)
            buffer.write(" . ")
            write_debug_expr(expr.tail, buffer)
            buffer.write(")")
        else:
            write_expr(expr, buffer)
    buffer.write("]")


def to_debug_string(expr: LispValue) -> str:
    with StringIO() as buffer:
        write_debug_expr(expr, buffer)
        return buffer.getvalue()
