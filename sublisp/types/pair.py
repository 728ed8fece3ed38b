"""Cons cells and the list helpers built on them.

A list is a right-leaning chain of Pairs ending in None (nil). Any other
non-Pair tail makes the list improper.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from sublisp import LispValue
from sublisp.errors import InternalInvariantViolation
from sublisp.types.value import Value


class Pair(Value):
    __slots__ = ("head", "tail")

    type_name = "pair"

    def __init__(self, head: LispValue, tail: LispValue):
        super().__init__()
        self.head: LispValue = head
        self.tail: LispValue = tail

    def release_children(self, store) -> None:
        store.release(self.head)
        store.release(self.tail)

    def __repr__(self):
        return f"Pair({self.head!r}, {self.tail!r})"


def iter_list(lst: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a proper list."""
    while lst is not None:
        if not isinstance(lst, Pair):
            raise InternalInvariantViolation(f"Expected a proper list, found tail {lst}")
        yield lst.head
        lst = lst.tail


def list_length(lst: LispValue) -> int:
    length = 0
    for _ in iter_list(lst):
        length += 1
    return length


def is_proper_list(lst: LispValue) -> bool:
    while isinstance(lst, Pair):
        lst = lst.tail
    return lst is None


def from_iterable(store, items: Iterable[LispValue], tail: LispValue = None) -> LispValue:
    """Build a list from items, ending in tail (nil by default)."""
    result = tail
    for item in reversed(list(items)):
        result = store.make_pair(item, result)
    return result
