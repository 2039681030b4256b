from __future__ import annotations

import logging

from mal import LispValue
from mal.config import get_log_level, get_max_eval_depth
from mal.core import default_environment, evaluate, read_all, rep
from mal.runtime_context import ensure_recursion_limit
from mal.types.environment import Environment
from mal.types.nil import Nil


class Interpreter:
    """
    Holds one root Environment across calls so that `def!` persists from
    one input to the next, the way a REPL session does.
    """

    def __init__(self, env: Environment | None = None):
        level = get_log_level()
        if level is not None:
            logging.getLogger("mal").setLevel(level)
        # deep reads need the same stack as deep evaluation
        ensure_recursion_limit(get_max_eval_depth())
        self.env: Environment = env if env is not None else default_environment()

    def rep(self, line: str) -> str:
        """One read-eval-print round; errors come back as text."""
        return rep(self.env, line)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last value (nil if none).

        Reader and runtime errors propagate as exceptions.
        """
        result: LispValue = Nil
        for expr in read_all(code):
            result = evaluate(self.env, expr)
        return result
