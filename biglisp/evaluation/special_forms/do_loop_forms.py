"""Looping special form for BigLisp: dotimes.

The loop is implemented as a small evaluator object that closes over the loop
header and reuses the main evaluator to execute the body in a per-iteration scope.
"""

from __future__ import annotations
from biglisp import Expression, LispValue, EvaluatorFn
from biglisp.errors import ArityMismatch, TypeMismatch
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.expression import Symbol
from biglisp.types.unit import Unit
from biglisp.types.values import is_integer, kind_of


class DoTimesLoopEval:
    """Implements the (dotimes var count body...) loop."""

    def __init__(
        self,
        var: Expression,
        count_expr: Expression,
        body: tuple[Expression, ...],
        evaluate_fn: EvaluatorFn,
    ):
        self.var: Expression = var
        self.count_expr: Expression = count_expr
        self.body: tuple[Expression, ...] = body
        self.evaluate_fn: EvaluatorFn = evaluate_fn

    def eval(self, env: Environment, ctx: RuntimeContext, depth: int) -> LispValue:
        """Execute body `count` times with `var` bound from 0..count-1."""
        if not isinstance(self.var, Symbol):
            raise TypeMismatch(f"dotimes variable must be a symbol, got {self.var}")
        count = self.evaluate_fn(self.count_expr, env, ctx, depth)
        if not is_integer(count):
            raise TypeMismatch(f"dotimes count must be an integer, got {kind_of(count)}")

        last_value: LispValue = Unit
        for i in range(count):
            # A fresh frame per iteration; the body cannot leak bindings across iterations.
            local_env = Environment(outer=env)
            local_env.define(self.var.name, i)
            for expr in self.body:
                last_value = self.evaluate_fn(expr, local_env, ctx, depth)

        return last_value


def do_times_n_loop_form(
    tail: tuple[Expression, ...],
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """Special form (dotimes var n body...): run body `n` times."""
    if len(tail) < 3:
        raise ArityMismatch("dotimes requires a variable, a count and a body")
    return DoTimesLoopEval(tail[0], tail[1], tail[2:], evaluate_fn).eval(env, ctx, depth)
