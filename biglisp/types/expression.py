"""AST node variants produced by the reader.

The node set is closed: every dispatch site matches on these classes with a
``match`` statement. Nodes are frozen and own their children (tuples), so a
parsed tree is immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True, eq=False)
class Literal:
    """An Integer, Float, String or Boolean literal.

    Equality includes the value's kind, so `1`, `1.0` and `true` stay distinct.
    """
    value: int | float | str | bool
    pos: int = field(default=0, compare=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))

    def __str__(self) -> str:
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        if isinstance(self.value, str):
            return '"' + self.value.replace("\\", "\\\\").replace('"', '\\"') + '"'
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Symbol:
    """An identifier, resolved against the environment at evaluation time."""
    name: str
    pos: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class VectorLiteral:
    """``[a b c]``: evaluates each element, left to right, into a List."""
    items: tuple[Node, ...]
    pos: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return "[" + " ".join(str(i) for i in self.items) + "]"


@dataclass(frozen=True, slots=True)
class Bindings:
    """The ``[name expr name expr ...]`` vector of a ``let``, already paired."""
    pairs: tuple[tuple[Symbol, Node], ...]
    pos: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return "[" + " ".join(f"{n} {e}" for n, e in self.pairs) + "]"


@dataclass(frozen=True, slots=True)
class Form:
    """``(op arg ...)``: an operator symbol applied to argument expressions."""
    op: Symbol
    args: tuple[Node, ...]
    pos: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if not self.args:
            return f"({self.op})"
        return f"({self.op} " + " ".join(str(a) for a in self.args) + ")"


Node = Union[Literal, Symbol, VectorLiteral, Bindings, Form]
