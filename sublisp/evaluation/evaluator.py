"""Core evaluator for the sublisp interpreter.

Symbols are looked up in the global environment, pairs are calls and every
other value evaluates to itself. Special forms are Builtins flagged as
special: they receive the raw argument list. Everything else gets its
arguments evaluated left to right first.

Evaluation recurses on the host stack; there is no trampoline, so deep
recursion in Lisp code is limited by Python's recursion limit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sublisp import SExpression, LispValue
from sublisp.errors import NotCallable
from sublisp.evaluation.apply import apply
from sublisp.types.builtin_fn import Builtin
from sublisp.types.lambda_fn import Lambda
from sublisp.types.pair import Pair, iter_list
from sublisp.types.symbol import Symbol

if TYPE_CHECKING:
    from sublisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, interp: Interpreter) -> LispValue:
    """Evaluate one expression. nil is a valid result."""
    match expr:
        case None:
            return None
        case Symbol():
            return interp.env.lookup(expr)
        case Pair(head=head, tail=args):
            fn = evaluate(head, interp)
            return call_function(fn, args, interp)

    # --- Atoms return as-is ---
    return expr


def eval_each(args: SExpression, interp: Interpreter) -> LispValue:
    """Evaluate every element of an argument list, left to right."""
    values = [evaluate(arg, interp) for arg in iter_list(args)]
    result = None
    for value in reversed(values):
        result = interp.store.make_pair(value, result)
    return result


def call_function(fn: LispValue, args: SExpression, interp: Interpreter) -> LispValue:
    """Apply fn to the raw argument list of a call form."""
    if fn is None:
        raise NotCallable("Trying to call non-function nil")
    if isinstance(fn, Builtin):
        if not fn.special:
            args = eval_each(args, interp)
    elif isinstance(fn, Lambda):
        args = eval_each(args, interp)
    else:
        raise NotCallable(f"Trying to call non-function of type {fn.type_name}: {fn}")

    if interp.debug:
        logger.debug("applying %s to %s", fn, "()" if args is None else args)
    return apply(fn, args, interp, evaluate)
