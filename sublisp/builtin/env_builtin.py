"""Built-in functions for the sublisp runtime environment.

This module defines core arithmetic, comparison, list processing, predicates,
application helpers, and registration utilities exposed to Lisp code. Every
function here receives its arguments already evaluated, as a Lisp list.
"""
from __future__ import annotations

import logging
import math
from functools import reduce
from typing import TYPE_CHECKING

from sublisp import LispValue
from sublisp.errors import TypeMismatch
from sublisp.evaluation.apply import apply as apply_engine
from sublisp.evaluation.arguments import check_arg_count, check_min_args, expect_number
from sublisp.evaluation.evaluator import evaluate
from sublisp.evaluation.special_forms import SPECIAL_FORMS
from sublisp.types.pair import Pair, from_iterable, is_proper_list, iter_list
from sublisp.types.value import Number

if TYPE_CHECKING:
    from sublisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


# -------------------------------
# List operations
# -------------------------------
def cons(interp: Interpreter, args: LispValue) -> LispValue:
    head, tail = check_arg_count(args, 2, "cons")
    return interp.store.make_pair(head, tail)


def car(interp: Interpreter, args: LispValue) -> LispValue:
    (lst,) = check_arg_count(args, 1, "car")
    if not isinstance(lst, Pair):
        raise TypeMismatch(f"Taking car of non-pair {'()' if lst is None else lst}")
    return lst.head


def cdr(interp: Interpreter, args: LispValue) -> LispValue:
    (lst,) = check_arg_count(args, 1, "cdr")
    if not isinstance(lst, Pair):
        raise TypeMismatch(f"Taking cdr of non-pair {'()' if lst is None else lst}")
    return lst.tail


def list_builtin(interp: Interpreter, args: LispValue) -> LispValue:
    # the evaluated argument list already is the result
    return args


def copy_expr(expr: LispValue, interp: Interpreter) -> LispValue:
    """Copy every pair reachable from expr; atoms are shared."""
    if not isinstance(expr, Pair):
        return expr
    items = []
    while isinstance(expr, Pair):
        items.append(copy_expr(expr.head, interp))
        expr = expr.tail
    return from_iterable(interp.store, items, expr)


def append(interp: Interpreter, args: LispValue) -> LispValue:
    """(append xs ys): a copy of xs with ys spliced onto its end."""
    first, second = check_arg_count(args, 2, "append")
    if first is None:
        return second
    if not isinstance(first, Pair) or not is_proper_list(first):
        raise TypeMismatch(f"append: expected a proper list, got {first}")
    items = [copy_expr(item, interp) for item in iter_list(first)]
    return from_iterable(interp.store, items, second)


# -------------------------------
# Equality and basic predicates
# -------------------------------
def eq(interp: Interpreter, args: LispValue) -> LispValue:
    """Identity, except that numbers compare by value."""
    a, b = check_arg_count(args, 2, "eq")
    if isinstance(a, Number) and isinstance(b, Number):
        return interp.truth(a.value == b.value)
    return interp.truth(a is b)


def is_pair(interp: Interpreter, args: LispValue) -> LispValue:
    (value,) = check_arg_count(args, 1, "pair")
    return interp.truth(isinstance(value, Pair))


# -------------------------------
# Arithmetic
# -------------------------------
def _numbers(args: LispValue, name: str) -> list[float]:
    return [expect_number(arg, name) for arg in iter_list(args)]


def _divide(a: float, b: float) -> float:
    # IEEE semantics, as with C doubles
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf
    except ValueError:
        # zero to a negative power, or a fractional power of a negative
        return math.inf if a == 0 else math.nan


def add(interp: Interpreter, args: LispValue) -> LispValue:
    return interp.store.make_number(sum(_numbers(args, "+"), 0.0))


def mul(interp: Interpreter, args: LispValue) -> LispValue:
    return interp.store.make_number(math.prod(_numbers(args, "*")))


def sub(interp: Interpreter, args: LispValue) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    check_min_args(args, 1, "-")
    numbers = _numbers(args, "-")
    if len(numbers) == 1:
        return interp.store.make_number(-numbers[0])
    return interp.store.make_number(reduce(lambda a, b: a - b, numbers))


def div(interp: Interpreter, args: LispValue) -> LispValue:
    """Divide the first number by the rest; reciprocal for one arg."""
    check_min_args(args, 1, "/")
    numbers = _numbers(args, "/")
    if len(numbers) == 1:
        return interp.store.make_number(_divide(1.0, numbers[0]))
    return interp.store.make_number(reduce(_divide, numbers))


def power(interp: Interpreter, args: LispValue) -> LispValue:
    check_min_args(args, 1, "^")
    return interp.store.make_number(reduce(_power, _numbers(args, "^")))


# -------------------------------
# Comparison
# -------------------------------
def lt(interp: Interpreter, args: LispValue) -> LispValue:
    a, b = check_arg_count(args, 2, "<")
    return interp.truth(expect_number(a, "<") < expect_number(b, "<"))


def num_eq(interp: Interpreter, args: LispValue) -> LispValue:
    a, b = check_arg_count(args, 2, "=")
    return interp.truth(expect_number(a, "=") == expect_number(b, "="))


# -------------------------------
# Function application
# -------------------------------
def apply(interp: Interpreter, args: LispValue) -> LispValue:
    """(apply fn args): call fn with an already built argument list."""
    fn, fn_args = check_arg_count(args, 2, "apply")
    if not is_proper_list(fn_args):
        raise TypeMismatch(f"apply: argument list must be a proper list, got {fn_args}")
    return apply_engine(fn, fn_args, interp, evaluate)


# -------------------------------
# Interpreter control
# -------------------------------
def debug(interp: Interpreter, args: LispValue) -> LispValue:
    """Toggle diagnostic output; returns the new state."""
    check_arg_count(args, 0, "debug")
    interp.set_debug(not interp.debug)
    if interp.debug:
        logger.debug("globals: %s", interp.env)
    return interp.truth(interp.debug)


def exit_builtin(interp: Interpreter, args: LispValue) -> LispValue:
    items = list(iter_list(args))
    if items:
        (status,) = check_arg_count(args, 1, "exit")
        code = expect_number(status, "exit")
        if not math.isfinite(code):
            raise TypeMismatch(f"exit: status must be finite, got {status}")
        raise SystemExit(int(code))
    raise SystemExit(0)


BUILTINS = {
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "eq": eq,
    "list": list_builtin,
    "append": append,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "^": power,
    "<": lt,
    "=": num_eq,
    "pair": is_pair,
    "apply": apply,
    "debug": debug,
    "exit": exit_builtin,
}


# -------------------------------
# Registration
# -------------------------------
def register(interp: Interpreter) -> None:
    for name, func in SPECIAL_FORMS.items():
        interp.create_builtin(name, func, special=True)
    for name, func in BUILTINS.items():
        interp.create_builtin(name, func, special=False)
