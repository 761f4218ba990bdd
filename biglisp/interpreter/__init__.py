from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from biglisp import Expression, LispValue
from biglisp.reader.parser import parse_all
from biglisp.runtime_context import RuntimeContext
from biglisp.types.environment import Environment
from biglisp.types.unit import Unit
from biglisp.types.values import from_host
from biglisp.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


def _context(output: Callable[[str], None] | None, max_depth: int | None) -> RuntimeContext:
    kwargs: dict[str, Any] = {}
    if output is not None:
        kwargs["output"] = output
    if max_depth is not None:
        kwargs["max_depth"] = max_depth
    return RuntimeContext(**kwargs)


def evaluate_expression(
    expr: Expression,
    initial_bindings: Mapping[str, Any] | None = None,
    *,
    output: Callable[[str], None] | None = None,
    max_depth: int | None = None,
) -> LispValue:
    """
    Evaluate a parsed expression with `initial_bindings` captured into a fresh
    top-level environment. The mapping itself is never modified.
    """
    env = Environment()
    if initial_bindings:
        env.update({name: from_host(value) for name, value in initial_bindings.items()})
    return evaluate(expr, env, _context(output, max_depth))


class Interpreter:
    """
    Orchestrates reading and evaluating BigLisp source.
    Host-captured variables live in a read-only outer frame; top-level
    definitions made by evaluated code live in a session frame chained to it,
    and persist across calls to eval().
    """

    def __init__(
        self,
        bindings: Mapping[str, Any] | None = None,
        *,
        output: Callable[[str], None] | None = None,
        max_depth: int | None = None,
    ):
        self.captured: Environment = Environment()
        if bindings:
            for name, value in bindings.items():
                self.capture(name, value)
        self.env: Environment = Environment(outer=self.captured)
        self.ctx: RuntimeContext = _context(output, max_depth)

    def capture(self, name: str, value: Any) -> None:
        """Bind a host variable for use by subsequently evaluated code."""
        self.captured.define(name, from_host(value))

    def check(self, code: str) -> list[Expression]:
        """Parse `code` without evaluating it; raises BigLispParseError on bad syntax."""
        return parse_all(code, self.ctx.max_depth)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level expression in `code`; return the last value."""
        result: LispValue = Unit
        exprs = parse_all(code, self.ctx.max_depth)
        logger.debug("Evaluating %d top-level expression(s)", len(exprs))
        for expr in exprs:
            result = evaluate(expr, self.env, self.ctx)
        return result
