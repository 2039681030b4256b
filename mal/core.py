"""Boundary between the interpreter core and whatever front end drives it.

    read(text)                  -> one form, or a MalReaderError
    evaluate(env, form)         -> a value, or a MalRuntimeError
    print_result(value | error) -> text
    default_environment()       -> a fresh root frame with the builtins

`rep` strings the three together for one line of input and never raises a
MalError: failures come back as their rendered message.
"""

from __future__ import annotations

import logging
from typing import Iterator

from mal import SExpression
from mal.builtin.env_builtin import register
from mal.evaluation.evaluator import evaluate
from mal.printer import pr_str, print_result
from mal.reader.parser import TokenStream
from mal.reader.tokenizer import tokenize
from mal.types.environment import Environment
from mal.types.errors import MalNestingTooDeep, MalReaderError, MalRuntimeError

logger = logging.getLogger(__name__)

READER_ERROR_PREFIX = "(EOF|end of input|unbalanced): "

__all__ = [
    "read",
    "read_all",
    "evaluate",
    "pr_str",
    "print_result",
    "default_environment",
    "rep",
]


def read(text: str) -> SExpression:
    """Read the first form in `text`; anything after it is ignored."""
    try:
        form = TokenStream(tokenize(text)).parse_expr()
    except RecursionError:
        raise MalNestingTooDeep() from None
    logger.debug("read %r -> %r", text, form)
    return form


def read_all(text: str) -> Iterator[SExpression]:
    """Read every top-level form in `text`, in order."""
    stream = TokenStream(tokenize(text))
    try:
        yield from stream.parse_all()
    except RecursionError:
        raise MalNestingTooDeep() from None


def default_environment() -> Environment:
    """Create a new root frame populated with the builtins."""
    env = Environment()
    register(env)
    return env


def rep(env: Environment, text: str) -> str:
    """Read, evaluate and print one form from `text` in `env`."""
    try:
        form = read(text)
    except MalReaderError as e:
        return READER_ERROR_PREFIX + str(e)
    try:
        return print_result(evaluate(env, form))
    except MalRuntimeError as e:
        logger.debug("evaluation failed: %s", e)
        return print_result(e)
