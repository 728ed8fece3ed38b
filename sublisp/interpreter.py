"""Interpreter handle: owns all state for one sublisp session.

The value store, symbol table, global environment and debug flag live on
the Interpreter and are passed to every reader, evaluator and builtin call.
Two interpreters share nothing.
"""

from __future__ import annotations

import logging
import math
import sys
from pathlib import Path
from typing import Iterator, Optional

from sublisp import BuiltinFn, LispValue, SExpression
from sublisp import config
from sublisp.builtin.env_builtin import register
from sublisp.debug_utils.pprint import to_debug_string
from sublisp.errors import RecursionDepthExceeded
from sublisp.evaluation.evaluator import evaluate
from sublisp.memory import ValueStore
from sublisp.prelude import load_prelude
from sublisp.printer import to_string
from sublisp.reader.parser import Reader
from sublisp.types.builtin_fn import Builtin
from sublisp.types.environment import Environment
from sublisp.types.lambda_fn import Lambda
from sublisp.types.symbol import Symbol, SymbolTable

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A sublisp interpreter: read, evaluate and print values.
    Definitions persist across calls on the same instance.
    """

    def __init__(
        self,
        prelude: bool = True,
        debug: Optional[bool] = None,
        symbol_maxlen: Optional[int] = None,
    ):
        # evaluation recurses on the Python stack
        limit = config.get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        self.store = ValueStore()
        self.symbols = SymbolTable(
            self.store, symbol_maxlen if symbol_maxlen is not None else config.get_symbol_maxlen()
        )
        self.env = Environment(self.store)
        self.debug = False

        self.true: Symbol = self.symbols.intern("true")
        self.false: Symbol = self.symbols.intern("false")
        self.quote_symbol: Symbol = self.symbols.intern("quote")
        self.lambda_symbol: Symbol = self.symbols.intern("lambda")

        # create built-in variables
        self.env.define(self.true, self.true)
        self.env.define(self.false, self.false)
        self.env.define(self.symbols.intern("nil"), None)
        self.env.define(self.symbols.intern("pi"), self.store.make_number(math.pi))
        register(self)
        if prelude:
            load_prelude(self)
        # drop the parse leftovers of the prelude
        self.store.collect()

        self.set_debug(config.get_debug_default() if debug is None else debug)

    # --- Startup helpers ---
    def create_builtin(self, name: str, func: BuiltinFn, special: bool = False) -> Builtin:
        """Bind a native function under name."""
        builtin = self.store.make_builtin(func, special, name)
        self.env.define(self.symbols.intern(name), builtin)
        return builtin

    def create_function(self, name: str, params: str, body: str) -> Lambda:
        """Bind a lambda built from parameter-list and body source text."""
        params_expr, _ = self.read(params)
        body_expr, _ = self.read(body)
        fn = self.store.make_lambda(params_expr, body_expr)
        self.env.define(self.symbols.intern(name), fn)
        return fn

    def truth(self, flag: bool) -> Symbol:
        return self.true if flag else self.false

    def set_debug(self, flag: bool) -> None:
        self.debug = bool(flag)
        logging.getLogger("sublisp").setLevel(logging.DEBUG if self.debug else logging.NOTSET)

    # --- Core interface ---
    def reader(self, text: str) -> Reader:
        return Reader(text, self.store, self.symbols, self.quote_symbol)

    def read(self, text: str) -> tuple[SExpression, str]:
        """Parse one expression, returning it and the unconsumed remainder.

        Raises ParseError on malformed or unterminated input.
        """
        try:
            expr, pos = self.reader(text).read_expr(0)
        except RecursionError as exc:
            raise RecursionDepthExceeded("Expression nested too deeply to read") from exc
        return expr, text[pos:]

    def read_all(self, text: str) -> Iterator[SExpression]:
        """Lazily parse every top-level expression in text."""
        forms = self.reader(text).read_all()
        while True:
            try:
                expr = next(forms)
            except StopIteration:
                return
            except RecursionError as exc:
                raise RecursionDepthExceeded("Expression nested too deeply to read") from exc
            yield expr

    def evaluate(self, expr: SExpression) -> LispValue:
        """Evaluate one expression. Raises an EvalError subclass on failure."""
        try:
            return evaluate(expr, self)
        except RecursionError as exc:
            raise RecursionDepthExceeded("Maximum recursion depth exceeded") from exc

    def eval(self, code: str) -> LispValue:
        """Read and evaluate every form in code, returning the last result."""
        result = None
        for expr in self.read_all(code):
            if self.debug:
                logger.debug("parsed expression: %s", to_string(expr))
            result = self.evaluate(expr)
        return result

    def run_file(self, path: str | Path) -> LispValue:
        """Evaluate a source file form by form, collecting garbage in between."""
        code = Path(path).read_text(encoding="utf-8")
        result = None
        for expr in self.read_all(code):
            result = self.evaluate(expr)
            # keep the latest result alive across the sweep
            self.store.retain(result)
            self.collect()
            self.store.release(result)
        return result

    def collect(self) -> int:
        """Free unreferenced values. Only call between top-level evaluations."""
        freed = self.store.collect()
        if self.debug:
            stats = self.store.stats()
            logger.debug("collect freed %d values (%d live)", freed, stats.live)
        return freed

    # --- Printing ---
    def to_string(self, value: LispValue) -> str:
        return to_string(value)

    def to_debug_string(self, value: LispValue) -> str:
        return to_debug_string(value)
