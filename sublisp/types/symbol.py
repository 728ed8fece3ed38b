from __future__ import annotations
import sys

from sublisp.errors import SymbolTooLong
from sublisp.types.value import Value


class Symbol(Value):
    """An interned name. Only SymbolTable creates these."""

    __slots__ = ("name",)

    type_name = "symbol"

    def __init__(self, name: str):
        super().__init__()
        self.name = sys.intern(name)

    def __repr__(self):
        return f"Symbol({self.name!r})"


class SymbolTable:
    """Deduplicates symbol names so symbols compare by identity.

    The table retains every symbol it hands out, so interned symbols live as
    long as the interpreter that owns the table.
    """

    __slots__ = ("store", "maxlen", "_symbols")

    def __init__(self, store, maxlen: int):
        self.store = store
        self.maxlen = maxlen
        self._symbols: dict[str, Symbol] = {}

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is not None:
            return sym
        if len(name) > self.maxlen:
            raise SymbolTooLong(
                f"Too long symbol {name[:self.maxlen]}...: at most {self.maxlen} characters allowed"
            )
        sym = self.store.alloc(Symbol(name))
        self.store.retain(sym)
        self._symbols[sym.name] = sym
        return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
