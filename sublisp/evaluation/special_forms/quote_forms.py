from __future__ import annotations

from typing import TYPE_CHECKING

from sublisp import SExpression, LispValue
from sublisp.evaluation.arguments import check_arg_count

if TYPE_CHECKING:
    from sublisp.interpreter import Interpreter


def quote_form(interp: Interpreter, args: SExpression) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    (expr,) = check_arg_count(args, 1, "quote")
    return expr
