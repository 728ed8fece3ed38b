"""Application engine for sublisp.

This module centralizes function application semantics for the interpreter:
- Builtins are invoked with the interpreter and their argument list.
- Lambdas are applied by substitution: each parameter symbol in the body is
  replaced by its argument value and the rewritten body is evaluated.

Substitution is a copy-on-write tree rewrite. Only the pairs on a path to a
replaced symbol are reallocated; untouched sub-trees are shared. List
arguments are wrapped in (quote ...) so they are not evaluated as calls.

This is not lexical scoping. Parameters are substituted one after another,
so a later parameter's name that occurs inside an earlier argument's data
is replaced too. The only shadowing honoured is a nested (lambda params
body) form that names the same parameter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sublisp import EvaluatorFn, LispValue, SExpression
from sublisp.errors import ArityMismatch, NotCallable, TypeMismatch
from sublisp.types.builtin_fn import Builtin
from sublisp.types.lambda_fn import Lambda
from sublisp.types.pair import Pair, is_proper_list, iter_list, list_length
from sublisp.types.symbol import Symbol

if TYPE_CHECKING:
    from sublisp.interpreter import Interpreter


def _binds(form: Pair, symbol: Symbol, interp: Interpreter) -> bool:
    """True if form is a (lambda params body) that lists symbol in params."""
    if form.head is not interp.lambda_symbol or not isinstance(form.tail, Pair):
        return False
    params = form.tail.head
    while isinstance(params, Pair):
        if params.head is symbol:
            return True
        params = params.tail
    return False


def substitute(
    expr: SExpression, symbol: Symbol, value: LispValue, interp: Interpreter
) -> SExpression:
    """Return expr with every free occurrence of symbol replaced by value."""
    if expr is symbol:
        return value
    if not isinstance(expr, Pair):
        return expr
    if _binds(expr, symbol, interp):
        return expr

    head = substitute(expr.head, symbol, value, interp)
    tail = substitute(expr.tail, symbol, value, interp)
    if head is expr.head and tail is expr.tail:
        return expr
    return interp.store.make_pair(head, tail)


def quote_if_list(value: LispValue, interp: Interpreter) -> LispValue:
    """Wrap list values in (quote ...) so substitution keeps them as data."""
    if isinstance(value, Pair):
        store = interp.store
        return store.make_pair(interp.quote_symbol, store.make_pair(value, None))
    return value


def bind_arguments(fn: Lambda, args: LispValue, interp: Interpreter) -> SExpression:
    """Substitute each argument into fn's body, returning the new body.

    Raises TypeMismatch if the parameter list is not a proper list of
    symbols, and ArityMismatch if the argument count differs.
    """
    if not is_proper_list(fn.params) or not all(
        isinstance(p, Symbol) for p in iter_list(fn.params)
    ):
        raise TypeMismatch(f"Lambda parameters must be a list of symbols, got {fn.params}")

    expected = list_length(fn.params)
    provided = list_length(args)
    if expected != provided:
        raise ArityMismatch(
            f"Invalid number of arguments: expected {expected}, got {provided}"
        )

    body = fn.body
    params = fn.params
    while params is not None:
        body = substitute(body, params.head, quote_if_list(args.head, interp), interp)
        params, args = params.tail, args.tail
    return body


def apply_lambda(
    fn: Lambda, args: LispValue, interp: Interpreter, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply a Lambda to already-evaluated arguments."""
    body = bind_arguments(fn, args, interp)
    return evaluate_fn(body, interp)


def apply(
    head: LispValue, args: LispValue, interp: Interpreter, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Apply either a Builtin or a Lambda.

    - For Lambda, args must already be evaluated.
    - For Builtin, args are passed as given: evaluated for regular builtins,
      raw for special forms.
    - Otherwise, raise NotCallable.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, interp, evaluate_fn)
    if isinstance(head, Builtin):
        return head.func(interp, args)
    if head is None:
        raise NotCallable("Trying to call non-function nil")
    raise NotCallable(f"Trying to call non-function of type {head.type_name}: {head}")
