from __future__ import annotations

from sublisp import BuiltinFn
from sublisp.types.value import Value


class Builtin(Value):
    """A native operation.

    Special forms receive their argument list unevaluated; regular builtins
    receive the list of evaluated arguments.
    """

    __slots__ = ("func", "special", "name")

    type_name = "builtin"

    def __init__(self, func: BuiltinFn, special: bool, name: str):
        super().__init__()
        self.func: BuiltinFn = func
        self.special: bool = special
        # only used for display
        self.name: str = name

    def __repr__(self):
        kind = "special form" if self.special else "builtin"
        return f"<{kind} {self.name}>"
