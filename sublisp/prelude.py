"""Standard library functions written in sublisp itself.

Each entry is (name, parameter list text, body text). At startup both texts
go through the reader and the resulting lambda is bound to the name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sublisp.interpreter import Interpreter

LIBRARY: tuple[tuple[str, str, str], ...] = (
    ("not", "(x)", "(if x false true)"),
    ("null", "(x)", "(eq x ())"),
    ("<=", "(a b)", "(or (< a b) (= a b))"),
    (">", "(a b)", "(< b a)"),
    (">=", "(a b)", "(<= b a)"),
    ("abs", "(x)", "(if (< x 0) (- x) x)"),
    ("equal", "(a b)",
     "(if (pair a)"
     "    (if (pair b)"
     "        (and (equal (car a) (car b)) (equal (cdr a) (cdr b)))"
     "        false)"
     "    (eq a b))"),
    ("map", "(f xs)",
     "(if (null xs) () (cons (f (car xs)) (map f (cdr xs))))"),
    ("length", "(xs)",
     "(if (null xs) 0 (+ 1 (length (cdr xs))))"),
    ("member", "(x xs)",
     "(if (null xs) false (if (equal x (car xs)) true (member x (cdr xs))))"),
)


def load_prelude(interp: Interpreter) -> None:
    for name, params, body in LIBRARY:
        interp.create_function(name, params, body)
