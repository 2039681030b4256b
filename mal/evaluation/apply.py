"""Application engine for mal.

Function application has two cases: native functions (plain Python
callables registered by `mal.builtin.env_builtin`) receive the caller's
environment and the evaluated arguments; closures run their body in a fresh
frame chained to the environment they were defined in, never the caller's.
"""

import logging

from mal import LispValue, EvaluatorFn
from mal.printer import pr_str
from mal.types.closure import Closure
from mal.types.environment import Environment
from mal.types.errors import MalEvaluationError
from mal.types.value import Kind, kind_of

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind `args` to the closure's parameters and evaluate its body."""
    new_env = fn.extend_env(args)
    logger.debug("applying %s to %d argument(s)", fn, len(args))
    return evaluate_fn(new_env, fn.body)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a native function.

    - For Closure, defer to apply_closure.
    - For native functions, invoke with the runtime env and list of args.
    - Otherwise, raise an evaluation error naming the value.
    """
    kind = kind_of(head)
    if kind is Kind.CLOSURE:
        return apply_closure(head, args, evaluate_fn)
    elif kind is Kind.NATIVE_FUN:
        return head(env, args)
    else:
        raise MalEvaluationError(f"{pr_str(head)} is not a function")
