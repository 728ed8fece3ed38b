"""Reference-counted value store.

Every Value is registered here when it is made, with a reference count of
zero. Holders (pairs, lambdas, the environment and the symbol table) call
retain/release as they gain and drop references. collect() frees every
registered value whose count is zero. Freeing a pair releases its head and
tail, which can drop them to zero in turn, so the sweep repeats until a
pass frees nothing.

Only acyclic garbage is reclaimed. Lambda params and bodies are retained
on construction and never released, so they outlive a freed lambda.
collect() must only run between top-level evaluations: a value that is
still in use further up the call stack but not retained would be freed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sublisp import BuiltinFn, LispValue, SExpression
from sublisp.errors import InternalInvariantViolation
from sublisp.types.builtin_fn import Builtin
from sublisp.types.lambda_fn import Lambda
from sublisp.types.pair import Pair
from sublisp.types.value import Number, String, Value

logger = logging.getLogger(__name__)


@dataclass
class StoreStats:
    live: int
    allocated: int
    freed: int


class ValueStore:
    """Registry of every allocated value."""

    def __init__(self):
        # keyed by id(); insertion ordered so sweeps are deterministic
        self._values: dict[int, Value] = {}
        self.allocated = 0
        self.freed = 0

    # --- Allocation ---
    def alloc(self, value: Value) -> Value:
        value.refs = 0
        value.freed = False
        self._values[id(value)] = value
        self.allocated += 1
        return value

    def make_number(self, number: float) -> Number:
        return self.alloc(Number(number))

    def make_string(self, text: str) -> String:
        return self.alloc(String(text))

    def make_pair(self, head: LispValue, tail: LispValue) -> Pair:
        # children first: an interrupted allocation may leak but never over-release
        self.retain(head)
        self.retain(tail)
        return self.alloc(Pair(head, tail))

    def make_builtin(self, func: BuiltinFn, special: bool, name: str) -> Builtin:
        return self.alloc(Builtin(func, special, name))

    def make_lambda(self, params: SExpression, body: SExpression) -> Lambda:
        self.retain(params)
        self.retain(body)
        return self.alloc(Lambda(params, body))

    # --- Reference counting ---
    def retain(self, value: LispValue) -> None:
        if value is None:
            return
        value.refs += 1

    def release(self, value: LispValue) -> None:
        if value is None:
            return
        if value.refs <= 0:
            raise InternalInvariantViolation(f"Releasing unreferenced {value.type_name}")
        value.refs -= 1

    # --- Collection ---
    def _free(self, value: Value) -> None:
        del self._values[id(value)]
        value.freed = True
        value.release_children(self)
        self.freed += 1

    def collect(self) -> int:
        """Free unreferenced values until a full pass frees nothing.

        Returns the number of values freed.
        """
        total = 0
        while True:
            freed = 0
            for value in list(self._values.values()):
                # a value freed earlier in this pass is no longer registered
                if value.refs == 0 and not value.freed:
                    self._free(value)
                    freed += 1
            total += freed
            if freed == 0:
                break
        if total:
            logger.debug("collected %d values, %d live", total, len(self._values))
        return total

    # --- Introspection ---
    def __contains__(self, value: object) -> bool:
        return isinstance(value, Value) and self._values.get(id(value)) is value

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(list(self._values.values()))

    def stats(self) -> StoreStats:
        return StoreStats(live=len(self._values), allocated=self.allocated, freed=self.freed)
