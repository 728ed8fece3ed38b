"""Lambda value: a parameter list and a body, with no captured environment."""

from __future__ import annotations

from sublisp import SExpression
from sublisp.types.value import Value


class Lambda(Value):
    """A first-class lambda with formal parameters and a body.

    Application substitutes argument values into the body (see
    sublisp.evaluation.apply); there is no closure environment. The store
    retains params and body when the lambda is made but never releases
    them, so a freed lambda leaks its sub-values.
    """

    __slots__ = ("params", "body")

    type_name = "lambda"

    def __init__(self, params: SExpression, body: SExpression):
        super().__init__()
        self.params: SExpression = params
        self.body: SExpression = body

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
