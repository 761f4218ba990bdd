from biglisp import EvaluatorFn
from biglisp import Expression, LispValue
from biglisp.errors import ArityMismatch, TypeMismatch
from biglisp.evaluation.apply import apply_function
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.function import Function
from biglisp.types.values import kind_of


def call_form(
    tail: tuple[Expression, ...],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """(call f args...): apply the Function that `f` evaluates to."""
    if not tail:
        raise ArityMismatch("call requires at least a function")

    fn = evaluate_fn(tail[0], env, ctx, depth)
    if not isinstance(fn, Function):
        raise TypeMismatch(f"call expects a function, got {kind_of(fn)}")

    args = []
    for arg in tail[1:]:
        args.append(evaluate_fn(arg, env, ctx, depth))
    return apply_function(fn, args, ctx, evaluate_fn, depth)
