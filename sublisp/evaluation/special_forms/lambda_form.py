from __future__ import annotations

from typing import TYPE_CHECKING

from sublisp import SExpression, LispValue
from sublisp.evaluation.arguments import check_arg_count

if TYPE_CHECKING:
    from sublisp.interpreter import Interpreter


def lambda_form(interp: Interpreter, args: SExpression) -> LispValue:
    # (lambda params body): a single body form, nothing is evaluated.
    # params are checked when the lambda is applied.
    params, body = check_arg_count(args, 2, "lambda")
    return interp.store.make_lambda(params, body)
