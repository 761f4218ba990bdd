from biglisp import EvaluatorFn
from biglisp import Expression, LispValue
from biglisp.errors import ArityMismatch
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.unit import Unit
from biglisp.types.values import is_truthy


def if_form(
    tail: tuple[Expression, ...],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise ArityMismatch("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env, ctx, depth)

    # Only the untaken branch is skipped; it is never evaluated.
    if is_truthy(cond):
        return evaluate_fn(tail[1], env, ctx, depth)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, ctx, depth)
    else:
        return Unit
