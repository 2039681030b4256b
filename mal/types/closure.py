"""Closure representation for mal."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from mal import SExpression, LispValue
from mal.types.symbol import Symbol

if TYPE_CHECKING:
    from mal.types.environment import Environment


class Closure:
    """A first-class function with parameters, body, and defining env.

    `env` is the live environment the `fn*` form was evaluated in, not a
    copy, so later `def!`s reachable through it are visible at call time.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from mal.printer import pr_str
        with StringIO() as buffer:
            buffer.write("(fn* (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(pr_str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Closure({self})"

    # --- Evaluation helpers ---
    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's parameters and
        return a new Environment, parented to the captured env, for
        evaluating the body.
        """
        from mal.types.bind import bind_arguments
        return bind_arguments(self.params, args, self.env)
