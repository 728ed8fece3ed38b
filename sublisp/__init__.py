# Core type aliases for sublisp's data model.
# Runtime values are instances of the classes in sublisp.types; the empty
# list (nil) is represented by None rather than by a distinguished value.
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` so they can be imported from anywhere in the
# package without creating import cycles with sublisp.types.

from typing import Any, Callable

# Runtime value alias (a Value instance or None for nil)
LispValue = Any
# Forms alias (code and data share one representation)
SExpression = LispValue

# Evaluator function type, passed to the application engine
EvaluatorFn = Callable[..., LispValue]

# Native function type stored in Builtin values: fn(interp, args) -> value
BuiltinFn = Callable[..., LispValue]
