"""Global variable environment for sublisp.

Bindings live in an unbalanced binary search tree ordered by symbol name.
Symbols are interned, so a node is matched by identity; text comparison is
only used to choose a branch. Entries are created on the first define of a
symbol and updated in place afterwards; nothing is ever removed.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from sublisp import LispValue
from sublisp.errors import InternalInvariantViolation, TypeMismatch, UndefinedVariable
from sublisp.types.symbol import Symbol


class _Entry:
    __slots__ = ("symbol", "value", "left", "right")

    def __init__(self, symbol: Symbol, value: LispValue):
        self.symbol: Symbol = symbol
        self.value: LispValue = value
        self.left: Optional[_Entry] = None
        self.right: Optional[_Entry] = None


class Environment:
    """Mapping from interned Symbols to values, retaining what it holds."""

    __slots__ = ("store", "_root", "_size")

    def __init__(self, store):
        self.store = store
        self._root: Optional[_Entry] = None
        self._size = 0

    @staticmethod
    def _branch(symbol: Symbol, entry: _Entry) -> str:
        if symbol.name < entry.symbol.name:
            return "left"
        if symbol.name > entry.symbol.name:
            return "right"
        # symbols should not be equal if identities differ
        raise InternalInvariantViolation(f"Symbol {symbol.name} is not interned")

    def _find(self, symbol: Symbol) -> Optional[_Entry]:
        entry = self._root
        while entry is not None:
            if entry.symbol is symbol:
                return entry
            entry = getattr(entry, self._branch(symbol, entry))
        return None

    def define(self, symbol: Symbol, value: LispValue) -> None:
        """Bind `symbol` to `value`, replacing any existing binding.

        The new value is retained before the old one is released, so
        redefining a symbol to its current value is safe.
        Raises TypeMismatch if `symbol` is not a Symbol.
        """
        if not isinstance(symbol, Symbol):
            raise TypeMismatch(f"Cannot define non-symbol {symbol}")

        if self._root is None:
            self._root = _Entry(symbol, value)
            self._size += 1
            self.store.retain(value)
            return

        entry = self._root
        while True:
            if entry.symbol is symbol:
                self.store.retain(value)
                self.store.release(entry.value)
                entry.value = value
                return
            side = self._branch(symbol, entry)
            child = getattr(entry, side)
            if child is None:
                setattr(entry, side, _Entry(symbol, value))
                self._size += 1
                self.store.retain(value)
                return
            entry = child

    def lookup(self, symbol: Symbol) -> LispValue:
        """Return the value bound to `symbol`.

        Raises UndefinedVariable if the symbol has never been defined.
        """
        entry = self._find(symbol)
        if entry is None:
            raise UndefinedVariable(f"Undefined variable {symbol.name}")
        return entry.value

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, Symbol) and self._find(symbol) is not None

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[tuple[Symbol, LispValue]]:
        """In-order (alphabetical) walk of the bindings."""
        stack: list[_Entry] = []
        entry = self._root
        while stack or entry is not None:
            while entry is not None:
                stack.append(entry)
                entry = entry.left
            entry = stack.pop()
            yield entry.symbol, entry.value
            entry = entry.right

    def __iter__(self) -> Iterator[Symbol]:
        for symbol, _ in self.items():
            yield symbol

    def depth(self) -> int:
        """Height of the tree; a degenerate tree has depth == len(self)."""
        def _depth(entry: Optional[_Entry]) -> int:
            if entry is None:
                return 0
            return 1 + max(_depth(entry.left), _depth(entry.right))
        return _depth(self._root)

    def __str__(self) -> str:
        """Human-readable view of the bindings."""
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for symbol, value in self.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{symbol.name}: {'()' if value is None else value}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self)} bindings>"
