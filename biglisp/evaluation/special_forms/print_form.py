from biglisp import EvaluatorFn
from biglisp import Expression, LispValue
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.unit import Unit
from biglisp.types.values import display


def println_form(
    tail: tuple[Expression, ...],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """(println a b ...): evaluate all arguments, emit their display forms as one line."""
    values = []
    for e in tail:
        values.append(evaluate_fn(e, env, ctx, depth))
    ctx.output(" ".join(display(v) for v in values))
    return Unit
