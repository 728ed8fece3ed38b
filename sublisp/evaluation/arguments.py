"""Argument list checks shared by builtins and special forms."""

from __future__ import annotations

from sublisp import LispValue
from sublisp.errors import ArityMismatch, TypeMismatch
from sublisp.types.pair import iter_list
from sublisp.types.value import Number


def check_arg_count(args: LispValue, count: int, name: str) -> list[LispValue]:
    """Return the arguments as a Python list, requiring exactly `count`."""
    items = list(iter_list(args))
    if len(items) != count:
        raise ArityMismatch(
            f"{name}: invalid number of arguments: expected {count}, got {len(items)}"
        )
    return items


def check_min_args(args: LispValue, count: int, name: str) -> list[LispValue]:
    items = list(iter_list(args))
    if len(items) < count:
        raise ArityMismatch(
            f"{name}: invalid number of arguments: expected at least {count}, got {len(items)}"
        )
    return items


def expect_number(value: LispValue, name: str) -> float:
    if not isinstance(value, Number):
        shown = "()" if value is None else str(value)
        raise TypeMismatch(f"{name}: expected a number, got {shown}")
    return value.value
