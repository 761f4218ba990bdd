from biglisp import EvaluatorFn
from biglisp import Expression, LispValue
from biglisp.errors import ArityMismatch, TypeMismatch
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.expression import Bindings
from biglisp.evaluation.special_forms.progn_form import progn_form


def let_form(
    tail: tuple[Expression, ...],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    (let [name expr ...] body...)

    Bindings are evaluated in order inside the new frame, so each expression
    sees the names bound before it but none bound after it.
    """
    if not tail or not isinstance(tail[0], Bindings):
        raise TypeMismatch("let requires a binding vector")
    if len(tail) < 2:
        raise ArityMismatch("let requires a body")

    local_env = Environment(outer=env)
    for name, expr in tail[0].pairs:
        local_env.define(name.name, evaluate_fn(expr, local_env, ctx, depth))

    return progn_form(tail[1:], local_env, ctx, evaluate_fn, depth)
