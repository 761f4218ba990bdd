"""User function values and positional argument binding for BigLisp."""

from __future__ import annotations

from io import StringIO

from biglisp import Expression, LispValue
from biglisp.errors import ArityMismatch
from biglisp.types.environment import Environment


class Function:
    """A first-class function: parameter names, body, and defining environment."""

    __slots__ = ("name", "params", "body", "env")

    def __init__(
        self, name: str, params: tuple[str, ...], body: Expression, env: Environment
    ):
        self.name: str = name
        self.params: tuple[str, ...] = tuple(params)
        self.body: Expression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return f"<fn {self.name}/{self.arity}>"

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"(defn {self.name} [")
            buffer.write(" ".join(self.params))
            buffer.write("] ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind argument values positionally to this function's parameters and
        return a new Environment for evaluating the body.

        The new frame is chained to the *defining* environment, so free names in
        the body resolve lexically, never through the caller.
        """
        if len(args) != len(self.params):
            raise ArityMismatch(
                f"{self.name} expects {len(self.params)} argument(s), got {len(args)}"
            )
        local_env = Environment(outer=self.env)
        for name, value in zip(self.params, args):
            local_env.define(name, value)
        return local_env
