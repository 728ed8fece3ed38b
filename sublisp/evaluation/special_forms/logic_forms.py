from __future__ import annotations

from typing import TYPE_CHECKING

from sublisp import SExpression, LispValue
from sublisp.evaluation.evaluator import evaluate
from sublisp.types.pair import iter_list

if TYPE_CHECKING:
    from sublisp.interpreter import Interpreter


def and_form(interp: Interpreter, args: SExpression) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns false as
    soon as one evaluates to the false symbol. Otherwise returns true; any
    other result is passed over. With zero operands, returns true.
    """
    for expr in iter_list(args):
        if evaluate(expr, interp) is interp.false:
            return interp.false
    return interp.true


def or_form(interp: Interpreter, args: SExpression) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns true as
    soon as one evaluates to the true symbol. Otherwise returns false. With
    zero operands, returns false.
    """
    for expr in iter_list(args):
        if evaluate(expr, interp) is interp.true:
            return interp.true
    return interp.false
