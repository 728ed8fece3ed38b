from __future__ import annotations

from typing import TYPE_CHECKING

from sublisp import SExpression, LispValue
from sublisp.errors import TypeMismatch
from sublisp.evaluation.arguments import check_arg_count
from sublisp.evaluation.evaluator import evaluate
from sublisp.types.symbol import Symbol

if TYPE_CHECKING:
    from sublisp.interpreter import Interpreter


def define_form(interp: Interpreter, args: SExpression) -> LispValue:
    """
    (define name value)
    Evaluates value and binds it to the symbol name in the global
    environment. Returns nil.
    """
    name, val_expr = check_arg_count(args, 2, "define")
    if not isinstance(name, Symbol):
        raise TypeMismatch(f"Cannot define non-symbol {'()' if name is None else name}")

    value = evaluate(val_expr, interp)  # normal evaluation
    interp.env.define(name, value)
    return None
