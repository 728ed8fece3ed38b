"""Canonical textual form of values.

    nil          -> ()
    Number       -> shortest round-trip float, trailing ".0" dropped
    String       -> "text" (no escaping)
    Pair         -> (a b c) or (a b . c)
    Builtin      -> [builtin name]
    Lambda       -> (lambda params body)
"""

from __future__ import annotations

from io import StringIO

from sublisp import LispValue
from sublisp.types.builtin_fn import Builtin
from sublisp.types.lambda_fn import Lambda
from sublisp.types.pair import Pair
from sublisp.types.symbol import Symbol
from sublisp.types.value import Number, String


def format_number(value: float) -> str:
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def write_expr(expr: LispValue, buffer: StringIO) -> None:
    if expr is None:
        buffer.write("()")
    elif isinstance(expr, Symbol):
        buffer.write(expr.name)
    elif isinstance(expr, Number):
        buffer.write(format_number(expr.value))
    elif isinstance(expr, String):
        buffer.write(f'"{expr.text}"')
    elif isinstance(expr, Pair):
        buffer.write("(")
        while isinstance(expr, Pair):
            write_expr(expr.head, buffer)
            expr = expr.tail
            if isinstance(expr, Pair):
                buffer.write(" ")
        if expr is not None:
            # trailing element of an improper list
            buffer.write(" . ")
            write_expr(expr, buffer)
        buffer.write(")")
    elif isinstance(expr, Builtin):
        buffer.write(f"[builtin {expr.name}]")
    elif isinstance(expr, Lambda):
        buffer.write("(lambda ")
        write_expr(expr.params, buffer)
        buffer.write(" ")
        write_expr(expr.body, buffer)
        buffer.write(")")
    else:
        raise TypeError(f"Cannot print {expr!r}")


def to_string(expr: LispValue) -> str:
    with StringIO() as buffer:
        write_expr(expr, buffer)
        return buffer.getvalue()
