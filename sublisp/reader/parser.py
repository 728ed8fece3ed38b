"""
  Lisp Reader

Recursive-descent reader from text to values allocated in a ValueStore.

    (a b c)     -> proper list of Pairs
    (a b . c)   -> improper list
    'x          -> (quote x)
    "text"      -> String, no escape processing
    12, -3.5e2  -> Number (a digit, or '-' and a digit, starts a number)
    anything else up to whitespace or one of ( ) " ' .  -> Symbol

The reader never evaluates. read_expr returns the value and the position of
the first unconsumed character so callers can reject trailing text.
"""

from __future__ import annotations

import re
from typing import Iterator

from sublisp import SExpression
from sublisp.errors import ParseError

NON_SYMBOL_CHARS = "()\"'."

NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]*)?(?:[eE][-+]?[0-9]+)?")
DIGITS = "0123456789"
SYMBOL_RE = re.compile(r"[^\s()\"'.]+")
SPACE_RE = re.compile(r"\s*")


class Reader:
    """Reads expressions from one source text."""

    def __init__(self, text: str, store, symbols, quote_symbol=None):
        self.text = text
        self.store = store
        self.symbols = symbols
        self.quote_symbol = quote_symbol if quote_symbol is not None else symbols.intern("quote")

    def skip_spaces(self, pos: int) -> int:
        """Return the position of the first non-space at or after pos."""
        return SPACE_RE.match(self.text, pos).end()

    def at_end(self, pos: int) -> bool:
        return self.skip_spaces(pos) >= len(self.text)

    def read_expr(self, pos: int = 0) -> tuple[SExpression, int]:
        pos = self.skip_spaces(pos)
        if pos >= len(self.text):
            raise ParseError("Unexpected end of input")

        ch = self.text[pos]
        if ch == "(":
            return self.read_list(pos + 1)
        if ch == '"':
            return self.read_string(pos + 1)
        if ch == "'":
            expr, pos = self.read_expr(pos + 1)
            quoted = self.store.make_pair(
                self.quote_symbol, self.store.make_pair(expr, None)
            )
            return quoted, pos
        if ch in DIGITS or (ch == "-" and pos + 1 < len(self.text) and self.text[pos + 1] in DIGITS):
            return self.read_number(pos)
        if ch not in NON_SYMBOL_CHARS:
            return self.read_symbol(pos)
        raise ParseError(f"No parse for remaining input: {self.text[pos:]!r}")

    def read_list(self, pos: int) -> tuple[SExpression, int]:
        """Read list elements up to the closing paren; pos is just after '('."""
        items: list[SExpression] = []
        tail: SExpression = None
        while True:
            pos = self.skip_spaces(pos)
            if pos >= len(self.text):
                raise ParseError("Unexpected end of input: unterminated list")
            ch = self.text[pos]
            if ch == ")":
                pos += 1
                break
            if ch == ".":
                if not items:
                    raise ParseError("Dotted tail without a preceding element")
                tail, pos = self.read_expr(pos + 1)
                pos = self.skip_spaces(pos)
                if pos >= len(self.text):
                    raise ParseError("Unexpected end of input: unterminated list")
                if self.text[pos] != ")":
                    raise ParseError("Expected ')' after dotted tail")
                pos += 1
                break
            item, pos = self.read_expr(pos)
            items.append(item)

        result = tail
        for item in reversed(items):
            result = self.store.make_pair(item, result)
        return result, pos

    def read_string(self, pos: int) -> tuple[SExpression, int]:
        """Read up to the closing quote; pos is just after the opening one."""
        end = self.text.find('"', pos)
        if end < 0:
            raise ParseError("Unexpected end of input: unterminated string")
        return self.store.make_string(self.text[pos:end]), end + 1

    def read_number(self, pos: int) -> tuple[SExpression, int]:
        m = NUMBER_RE.match(self.text, pos)
        if m is None:
            raise ParseError(f"Malformed number at {pos}")
        return self.store.make_number(float(m.group())), m.end()

    def read_symbol(self, pos: int) -> tuple[SExpression, int]:
        m = SYMBOL_RE.match(self.text, pos)
        if m is None:
            raise ParseError(f"No parse for remaining input: {self.text[pos:]!r}")
        return self.symbols.intern(m.group()), m.end()

    def read_all(self) -> Iterator[SExpression]:
        pos = 0
        while not self.at_end(pos):
            expr, pos = self.read_expr(pos)
            yield expr


def read(text: str, store, symbols) -> tuple[SExpression, str]:
    """Read one expression, returning it and the unconsumed remainder."""
    reader = Reader(text, store, symbols)
    expr, pos = reader.read_expr(0)
    return expr, text[pos:]


def read_all(text: str, store, symbols) -> Iterator[SExpression]:
    """Lazily read every top-level expression in text."""
    return Reader(text, store, symbols).read_all()
