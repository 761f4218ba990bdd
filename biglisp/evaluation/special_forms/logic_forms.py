from biglisp import Expression, LispValue
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.values import is_truthy


def and_form(tail: tuple[Expression, ...], env: Environment, ctx: RuntimeContext, evaluate_fn, depth: int) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsy value
    is found, which is returned immediately; later operands are never evaluated.
    If all operands are truthy, returns the value of the last operand. With zero
    operands, returns true.
    """
    result: LispValue = True
    for expr in tail:
        result = evaluate_fn(expr, env, ctx, depth)
        if not is_truthy(result):
            return result
    return result


def or_form(tail: tuple[Expression, ...], env: Environment, ctx: RuntimeContext, evaluate_fn, depth: int) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value. If none are truthy, returns the last value. With zero
    operands, returns false.
    """
    result: LispValue = False
    for expr in tail:
        result = evaluate_fn(expr, env, ctx, depth)
        if is_truthy(result):
            return result
    return result
