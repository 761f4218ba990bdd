# Core type aliases for BigLisp's data model.
# Runtime values are plain Python objects (int, float, str, bool, tuple for lists)
# plus the Function and Unit types from biglisp.types. Source code is read into
# the immutable node classes in biglisp.types.expression.
#
# Naming guidance:
# - Expression: use in reader/evaluator code to denote AST nodes.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# AST node alias (see biglisp.types.expression for the concrete node classes)
Expression = Any

# Evaluator function type: Python evaluator used inside special forms
EvaluatorFn = Callable[..., LispValue]

from biglisp.reader.parser import parse, parse_all  # noqa: E402
from biglisp.interpreter import Interpreter, evaluate_expression  # noqa: E402

__all__ = [
    "LispValue",
    "Expression",
    "EvaluatorFn",
    "parse",
    "parse_all",
    "evaluate_expression",
    "Interpreter",
]
