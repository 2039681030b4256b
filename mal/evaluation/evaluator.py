"""Core evaluator for the mal interpreter.

`evaluate` decides what a form means: a non-empty list is a special form
or a call, everything else goes to `evaluate_ast`. `evaluate_ast` handles
the non-call cases: symbol lookup, element-wise evaluation of arrays and
maps, and self-evaluation of every other value. A list nested inside an
array is handed back to `evaluate`, which alone decides whether a list is a
call.
"""

from __future__ import annotations

import logging

from mal import SExpression, LispValue
from mal.evaluation.apply import apply
from mal.evaluation.special_forms import SPECIAL_FORMS
from mal.runtime_context import eval_frame
from mal.types.environment import Environment
from mal.types.sequence import Array, List, Map
from mal.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(env: Environment, ast: SExpression) -> LispValue:
    """Evaluate one form in `env`."""
    with eval_frame():
        match ast:
            case List() if not ast.is_empty():
                return evaluate_list(env, ast)
        return evaluate_ast(env, ast)


def evaluate_list(env: Environment, form: List) -> LispValue:
    head = form.head()
    tail_args = form.rest()

    # --- Special forms handling ---
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        logger.debug("special form %s", head)
        return SPECIAL_FORMS[head](tail_args, env, evaluate)

    # --- Function application: head and arguments, left to right ---
    fn = evaluate(env, head)
    args = [evaluate(env, arg) for arg in tail_args]
    return apply(fn, args, env, evaluate)


def evaluate_ast(env: Environment, ast: SExpression) -> LispValue:
    """Evaluate a form that is not a call."""
    match ast:
        case Symbol():
            return env.lookup(ast)
        case Array() | Map():
            return type(ast)([evaluate(env, item) for item in ast])
    # --- Atoms (and the empty list) return as-is ---
    return ast
