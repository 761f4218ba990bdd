from biglisp import EvaluatorFn
from biglisp import Expression, LispValue
from biglisp.errors import ArityMismatch, TypeMismatch
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.expression import Symbol, VectorLiteral
from biglisp.evaluation.special_forms.progn_form import progn_form


def with_vars_form(
    tail: tuple[Expression, ...],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    (with-vars [a b ...] body...)
    Captures the named variables, which must already be bound (usually by the
    host), into a new frame and evaluates the body there.
    """
    if len(tail) < 2:
        raise ArityMismatch("with-vars requires a variable vector and a body")
    names = tail[0]
    if not isinstance(names, VectorLiteral):
        raise TypeMismatch(f"with-vars requires a vector of names, got {names}")

    local_env = Environment(outer=env)
    for sym in names.items:
        if not isinstance(sym, Symbol):
            raise TypeMismatch(f"with-vars names must be symbols, got {sym}")
        local_env.define(sym.name, env.lookup(sym.name))

    return progn_form(tail[1:], local_env, ctx, evaluate_fn, depth)
