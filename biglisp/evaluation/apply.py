"""Application engine for BigLisp.

Centralizes how an operator is applied to already-evaluated arguments, whether
it is a user Function (the `call` form and calls by name) or a Python builtin.
"""

from __future__ import annotations

from typing import Callable

from biglisp import EvaluatorFn, LispValue
from biglisp.errors import TypeMismatch
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.function import Function


def apply_function(
    fn: Function,
    args: list[LispValue],
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """Apply a user Function.

    Arguments bind positionally in a fresh frame chained to the function's
    defining environment (lexical closure); the body is evaluated there.
    Raises ArityMismatch when the argument count differs from the parameter count.
    """
    new_env = fn.extend_env(list(args))
    return evaluate_fn(fn.body, new_env, ctx, depth)


def apply(
    head: Function | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    """Apply either a Function or a Python builtin.

    - For Function, defer to apply_function.
    - For Python callables (builtins), invoke with the runtime env and list of args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Function):
        return apply_function(head, args, ctx, evaluate_fn, depth)
    elif callable(head):
        return head(env, args)
    else:
        raise TypeMismatch(f"Cannot apply non-function {head}")
