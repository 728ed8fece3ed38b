from __future__ import annotations

from typing import TYPE_CHECKING

from sublisp import SExpression, LispValue
from sublisp.errors import InvalidTruthValue
from sublisp.evaluation.arguments import check_arg_count
from sublisp.evaluation.evaluator import evaluate

if TYPE_CHECKING:
    from sublisp.interpreter import Interpreter


def if_form(interp: Interpreter, args: SExpression) -> LispValue:
    """(if test then else)

    test must evaluate to the true or the false symbol; there is no general
    truthiness.
    """
    test, then_expr, else_expr = check_arg_count(args, 3, "if")

    cond = evaluate(test, interp)
    if cond is interp.true:
        return evaluate(then_expr, interp)
    if cond is interp.false:
        return evaluate(else_expr, interp)
    raise InvalidTruthValue(
        f"if: condition must be true or false, got {'()' if cond is None else cond}"
    )
