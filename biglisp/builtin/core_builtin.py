"""Built-in operators for the BigLisp runtime.

This module defines arithmetic, comparison, list processing, string, and numeric
utility operators. Each receives its arguments already evaluated, left to right,
and is registered by name in BUILTINS, which the evaluator consults after the
special forms.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from biglisp import LispValue
from biglisp.errors import ArityMismatch, DivisionByZero, EmptyList, TypeMismatch
from biglisp.types.environment import Environment
from biglisp.types.values import (
    is_integer,
    is_number,
    is_truthy,
    kind_of,
    display,
    values_equal,
)

Builtin = Callable[[Environment, list[LispValue]], LispValue]


def _numbers(name: str, expr: list[LispValue]) -> list[int | float]:
    for x in expr:
        if not is_number(x):
            raise TypeMismatch(f"All arguments to {name} must be numbers, got {kind_of(x)}")
    return expr


def _promote(expr: list[int | float]) -> list[int | float]:
    # Any Float operand promotes the whole fold to Float.
    if any(isinstance(x, float) for x in expr):
        return [float(x) for x in expr]
    return expr


def _check_arity(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        raise ArityMismatch(f"{name} requires exactly {n} argument(s), got {len(expr)}")


def _int_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _divide(a: int | float, b: int | float) -> int | float:
    if b == 0:
        raise DivisionByZero("Division by zero")
    if isinstance(a, int) and isinstance(b, int):
        return _int_div(a, b)
    return a / b


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; 0 with no arguments."""
    return reduce(operator.add, _promote(_numbers("+", expr)), 0)


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise ArityMismatch("- requires at least 1 argument")
    nums = _promote(_numbers("-", expr))
    if len(nums) == 1:
        return -nums[0]
    return reduce(operator.sub, nums[1:], nums[0])


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments; 1 with no arguments."""
    return reduce(operator.mul, _promote(_numbers("*", expr)), 1)


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal.

    Integer operands divide with truncation toward zero; any Float operand
    makes the whole fold Float.
    """
    if not expr:
        raise ArityMismatch("/ requires at least 1 argument")
    nums = _promote(_numbers("/", expr))
    if len(nums) == 1:
        one = 1.0 if isinstance(nums[0], float) else 1
        return _divide(one, nums[0])
    return reduce(_divide, nums[1:], nums[0])


def mod(env: Environment, expr: list[LispValue]) -> LispValue:
    """(% n d) => remainder of n / d, carrying the sign of n."""
    _check_arity("%", expr, 2)
    n, d = _promote(_numbers("%", expr))
    if d == 0:
        raise DivisionByZero("Modulo by zero")
    if isinstance(n, int):
        return n - d * _int_div(n, d)
    return math.fmod(n, d)


# -------------------------------
# Comparison
# -------------------------------
def _ordered(name: str, a: LispValue, b: LispValue) -> None:
    if is_number(a) and is_number(b):
        return
    if isinstance(a, str) and isinstance(b, str):
        return
    raise TypeMismatch(f"Cannot order {kind_of(a)} and {kind_of(b)} with {name}")


def _chain(name: str, expr: list[LispValue], test: Callable[[LispValue, LispValue], bool]) -> bool:
    """Apply `test` to each adjacent pair, left to right; all pairs must hold."""
    if len(expr) < 2:
        raise ArityMismatch(f"{name} requires at least 2 arguments")
    # Every pair is tested, so a type mismatch is reported even after a failing pair.
    result = True
    for a, b in zip(expr, expr[1:]):
        if not test(a, b):
            result = False
    return result


def equals(env: Environment, expr: list[LispValue]) -> bool:
    """True if every adjacent pair of arguments is equal."""
    return _chain("=", expr, values_equal)


def not_equals(env: Environment, expr: list[LispValue]) -> bool:
    """(ne a b ...) is (not (= a b ...))."""
    return not _chain("ne", expr, values_equal)


def _less(name: str) -> Callable[[LispValue, LispValue], bool]:
    def test(a, b):
        _ordered(name, a, b)
        return a < b
    return test


def _greater(name: str) -> Callable[[LispValue, LispValue], bool]:
    def test(a, b):
        _ordered(name, a, b)
        return a > b
    return test


def lt(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable less-than: true if a0 < a1 < a2 ... holds for all pairs."""
    return _chain("<", expr, _less("<"))


def gt(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable greater-than: true if a0 > a1 > a2 ... holds for all pairs."""
    return _chain(">", expr, _greater(">"))


def gte(env: Environment, expr: list[LispValue]) -> bool:
    """(gte a b ...) is (not (< a b ...))."""
    return not _chain("gte", expr, _less("gte"))


def lte(env: Environment, expr: list[LispValue]) -> bool:
    """(lte a b ...) is (not (> a b ...))."""
    return not _chain("lte", expr, _greater("lte"))


def logical_not(env: Environment, expr: list[LispValue]) -> bool:
    """Logical NOT of the argument's truthiness."""
    _check_arity("not", expr, 1)
    return not is_truthy(expr[0])


# -------------------------------
# Lists
# -------------------------------
def _list_arg(name: str, value: LispValue) -> tuple:
    if not isinstance(value, tuple):
        raise TypeMismatch(f"{name} expects a list, got {kind_of(value)}")
    return value


def first(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the head of a list; EmptyList for []."""
    _check_arity("first", expr, 1)
    xs = _list_arg("first", expr[0])
    if not xs:
        raise EmptyList("first of an empty list")
    return xs[0]


def rest(env: Environment, expr: list[LispValue]) -> tuple:
    """Return all but the head of a list; [] for [] or singletons."""
    _check_arity("rest", expr, 1)
    return _list_arg("rest", expr[0])[1:]


def count(env: Environment, expr: list[LispValue]) -> int:
    _check_arity("count", expr, 1)
    return len(_list_arg("count", expr[0]))


def cons(env: Environment, expr: list[LispValue]) -> tuple:
    """Construct a new list by prepending head to tail (non-destructive)."""
    _check_arity("cons", expr, 2)
    head, tail = expr
    return (head,) + _list_arg("cons", tail)


# -------------------------------
# Strings
# -------------------------------
def concat_str(env: Environment, expr: list[LispValue]) -> str:
    return "".join(display(v) for v in expr)


# -------------------------------
# Numeric utilities and predicates
# -------------------------------
def minimum(env: Environment, expr: list[LispValue]) -> LispValue:
    if not expr:
        raise ArityMismatch("min requires at least 1 argument")
    return min(_numbers("min", expr))


def maximum(env: Environment, expr: list[LispValue]) -> LispValue:
    if not expr:
        raise ArityMismatch("max requires at least 1 argument")
    return max(_numbers("max", expr))


def _unary(name: str, fn: Callable[[int | float], LispValue], integers_only: bool = False) -> Builtin:
    def builtin(env: Environment, expr: list[LispValue]) -> LispValue:
        _check_arity(name, expr, 1)
        x = expr[0]
        if integers_only and not is_integer(x):
            raise TypeMismatch(f"{name} expects an integer, got {kind_of(x)}")
        _numbers(name, expr)
        return fn(x)
    builtin.__name__ = name
    return builtin


# -------------------------------
# Registration helper
# -------------------------------
def register(table: dict[str, Builtin]) -> None:
    """Register all builtins into the provided name -> operator table."""
    table.update(
        {
            "+": add,
            "-": sub,
            "*": mul,
            "/": div,
            "%": mod,
            "modulo": mod,
            "=": equals,
            "eq": equals,
            "ne": not_equals,
            "<": lt,
            ">": gt,
            "gte": gte,
            "lte": lte,
            "not": logical_not,
            "first": first,
            "rest": rest,
            "count": count,
            "cons": cons,
            "str": concat_str,
            "min": minimum,
            "max": maximum,
            "abs": _unary("abs", abs),
            "inc": _unary("inc", lambda x: x + 1),
            "dec": _unary("dec", lambda x: x - 1),
            "zero": _unary("zero", lambda x: x == 0),
            "pos": _unary("pos", lambda x: x > 0),
            "neg": _unary("neg", lambda x: x < 0),
            "even": _unary("even", lambda x: x % 2 == 0, integers_only=True),
            "odd": _unary("odd", lambda x: x % 2 != 0, integers_only=True),
        }
    )


BUILTINS: dict[str, Builtin] = {}
register(BUILTINS)
