"""Base value class and the scalar value kinds (Number, String).

Every runtime datum except nil is an instance of a Value subclass. Values
carry a reference count maintained by the ValueStore; they are only ever
created through the store so that they are registered for collection.
"""

from __future__ import annotations


class Value:
    """A registered, reference-counted datum."""

    __slots__ = ("refs", "freed")

    type_name = "value"

    def __init__(self):
        self.refs: int = 0
        self.freed: bool = False

    def release_children(self, store) -> None:
        """Drop the references this value holds when it is freed."""

    def __str__(self) -> str:
        from sublisp.printer import to_string
        return to_string(self)


class Number(Value):
    __slots__ = ("value",)

    type_name = "number"

    def __init__(self, value: float):
        super().__init__()
        self.value: float = float(value)

    def __repr__(self):
        return f"Number({self.value!r})"


class String(Value):
    __slots__ = ("text",)

    type_name = "string"

    def __init__(self, text: str):
        super().__init__()
        self.text: str | None = text

    def release_children(self, store) -> None:
        # the buffer goes with the value
        self.text = None

    def __repr__(self):
        return f"String({self.text!r})"
