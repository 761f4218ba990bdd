"""Core evaluator for the BigLisp interpreter.

Walks the AST produced by the reader, dispatching on node kind and, for forms,
on the operator name: special forms first (they control evaluation of their own
arguments), then strict builtins, then user functions bound in scope. Depth is
counted on every nested call so runaway nesting surfaces as RecursionLimit.
"""

from __future__ import annotations

import logging

from biglisp import Expression, LispValue
from biglisp.builtin.core_builtin import BUILTINS
from biglisp.errors import RecursionLimit, TypeMismatch, UnknownForm
from biglisp.evaluation.apply import apply
from biglisp.evaluation.special_forms import SPECIAL_FORMS
from biglisp.runtime_context import RuntimeContext, stack_headroom
from biglisp.types.environment import Environment
from biglisp.types.expression import Bindings, Form, Literal, Symbol, VectorLiteral
from biglisp.types.function import Function

logger = logging.getLogger(__name__)


def evaluate(
    expr: Expression, env: Environment, ctx: RuntimeContext | None = None
) -> LispValue:
    """
    Evaluate `expr` in `env` with enough interpreter stack for the depth cap,
    converting stack exhaustion into RecursionLimit.
    """
    if ctx is None:
        ctx = RuntimeContext()
    with stack_headroom(ctx.max_depth):
        try:
            return evaluate0(expr, env, ctx, 0)
        except RecursionError:
            logger.debug("Python stack exhausted below depth cap %d", ctx.max_depth)
            raise RecursionLimit("Maximum evaluation depth exceeded") from None


def evaluate0(
    expr: Expression,
    env: Environment,
    ctx: RuntimeContext,
    depth: int = 0,
) -> LispValue:
    """
    Core evaluator: one step of the tree walk at nesting level `depth`.
    """
    if depth > ctx.max_depth:
        logger.debug("Depth cap %d exceeded", ctx.max_depth)
        raise RecursionLimit(f"Maximum evaluation depth {ctx.max_depth} exceeded")

    match expr:
        case Literal(value=value):
            return value

        case Symbol(name=name):
            return env.lookup(name)

        case VectorLiteral(items=items):
            values = []
            for item in items:
                values.append(evaluate0(item, env, ctx, depth + 1))
            return tuple(values)

        case Form(op=op, args=args):
            return evaluate_form(op.name, args, env, ctx, depth)

        case Bindings():
            raise TypeMismatch("A binding vector is only valid as the first argument of let")

    raise TypeMismatch(f"Cannot evaluate {expr!r}")


def evaluate_form(
    name: str,
    args: tuple[Expression, ...],
    env: Environment,
    ctx: RuntimeContext,
    depth: int,
) -> LispValue:
    # --- Special forms handling ---
    handler = SPECIAL_FORMS.get(name)
    if handler is not None:
        return handler(args, env, ctx, evaluate0, depth + 1)

    # --- Strict operators and user functions ---
    head = BUILTINS.get(name)
    if head is None:
        scope = env.find(name)
        if scope is None:
            logger.debug("No special form, builtin or function named %s", name)
            raise UnknownForm(name)
        head = scope.vars[name]
        if not isinstance(head, Function):
            raise TypeMismatch(f"{name} is not a function")

    values = []
    for arg in args:
        values.append(evaluate0(arg, env, ctx, depth + 1))
    return apply(head, values, env, ctx, evaluate0, depth + 1)
