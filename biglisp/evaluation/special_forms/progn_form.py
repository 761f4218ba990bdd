from biglisp import EvaluatorFn
from biglisp import Expression, LispValue
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.unit import Unit


def progn_form(
    tail: tuple[Expression, ...],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    result: LispValue = Unit
    for e in tail:
        result = evaluate_fn(e, env, ctx, depth)
    return result
