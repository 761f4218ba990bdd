"""Value kinds, truthiness, equality and display forms.

Values are plain Python objects; this module is the single place that maps them
onto the language's value kinds. `bool` is tested before `int` everywhere because
Python treats booleans as integers and the language does not.
"""

from __future__ import annotations

from typing import Any

from biglisp import LispValue
from biglisp.errors import TypeMismatch
from biglisp.types.function import Function
from biglisp.types.unit import Unit, UnitType

INTEGER = "integer"
FLOAT = "float"
STRING = "string"
BOOLEAN = "boolean"
LIST = "list"
FUNCTION = "function"
UNIT = "unit"


def kind_of(value: LispValue) -> str:
    """Return the value kind name of a runtime value."""
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, int):
        return INTEGER
    if isinstance(value, float):
        return FLOAT
    if isinstance(value, str):
        return STRING
    if isinstance(value, tuple):
        return LIST
    if isinstance(value, Function):
        return FUNCTION
    if isinstance(value, UnitType):
        return UNIT
    raise TypeMismatch(f"Not a BigLisp value: {value!r}")


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_truthy(value: LispValue) -> bool:
    # Only the Boolean false is falsy; 0, "", [] and nil are all truthy.
    return value is not False


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; cross-kind comparison (other than int/float) is an error."""
    if is_number(a) and is_number(b):
        return a == b
    ka, kb = kind_of(a), kind_of(b)
    if ka != kb:
        raise TypeMismatch(f"Cannot compare {ka} with {kb}")
    if ka == LIST:
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    if ka == FUNCTION:
        return a is b
    return a == b


def display(value: LispValue) -> str:
    """Display form used by `str` and `println`: strings print raw."""
    if isinstance(value, str):
        return value
    return represent(value)


def represent(value: LispValue) -> str:
    """Readable form: strings are quoted, as they are inside lists."""
    kind = kind_of(value)
    if kind == BOOLEAN:
        return "true" if value else "false"
    if kind == STRING:
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    if kind == LIST:
        return "[" + " ".join(represent(v) for v in value) + "]"
    if kind == UNIT:
        return "nil"
    return str(value)


def from_host(value: Any) -> LispValue:
    """Convert a host (Python) object supplied as a captured variable into a value."""
    if value is None:
        return Unit
    if isinstance(value, (bool, int, float, str, Function, UnitType)):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(from_host(v) for v in value)
    raise TypeMismatch(f"Cannot capture host value of type {type(value).__name__}")
