from biglisp import EvaluatorFn
from biglisp import Expression, LispValue
from biglisp.errors import ArityMismatch, TypeMismatch
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.expression import Form, Symbol, VectorLiteral
from biglisp.types.function import Function


def define_form(
    tail: tuple[Expression, ...],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    (defn name [params] body...)
    Binds the Function in the current environment and returns it. The function
    closes over that same environment, so it can call itself by name.
    """
    if len(tail) < 3:
        raise ArityMismatch("defn requires a name, a parameter vector and a body")

    name, params, *body_forms = tail
    if not isinstance(name, Symbol):
        raise TypeMismatch(f"defn name must be a symbol, got {name}")
    if not isinstance(params, VectorLiteral):
        raise TypeMismatch(f"defn parameters must be a vector, got {params}")

    formals: list[str] = []
    for p in params.items:
        if not isinstance(p, Symbol):
            raise TypeMismatch(f"defn parameter must be a symbol, got {p}")
        if p.name in formals:
            raise TypeMismatch(f"Duplicate parameter {p.name} in defn {name}")
        formals.append(p.name)

    # Several body forms are an implicit do.
    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = Form(Symbol("do", name.pos), tuple(body_forms), name.pos)

    fn = Function(name.name, tuple(formals), body, env)
    env.define(name.name, fn)
    return fn
