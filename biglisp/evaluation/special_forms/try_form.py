"""Special form: try.

(try body fallback) evaluates body; if that raises any evaluation error, the
fallback is evaluated and returned instead. Without a fallback the error is
re-raised unchanged. Exhausting the interpreter stack inside the body counts as
a RecursionLimit.
"""

import logging

from biglisp import Expression, LispValue
from biglisp.errors import ArityMismatch, BigLispEvalError, RecursionLimit
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment

logger = logging.getLogger(__name__)


def try_form(tail: tuple[Expression, ...], env: Environment, ctx: RuntimeContext, evaluate_fn, depth: int) -> LispValue:
    if len(tail) not in (1, 2):
        raise ArityMismatch("try requires a body and an optional fallback")

    body_expr = tail[0]
    try:
        return evaluate_fn(body_expr, env, ctx, depth)
    except RecursionError:
        error: BigLispEvalError = RecursionLimit("Maximum evaluation depth exceeded")
    except BigLispEvalError as ex:
        if len(tail) == 1:
            raise
        error = ex

    if len(tail) == 1:
        raise error
    logger.debug("try recovered from %s: %s", type(error).__name__, error)
    return evaluate_fn(tail[1], env, ctx, depth)
