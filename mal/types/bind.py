from __future__ import annotations

import logging

from mal import LispValue
from mal.types.environment import Environment
from mal.types.errors import MalArityError, MalInvalidSymbol
from mal.types.symbol import Symbol

logger = logging.getLogger(__name__)


def bind_arguments(
    params: list[Symbol],
    args: list[LispValue],
    outer: Environment,
) -> Environment:
    """
    Build the frame a closure body runs in.

    Each parameter symbol is bound positionally to the matching argument in
    a new Environment whose outer is `outer` (the closure's defining env).
    Raises MalArityError when the counts differ and MalInvalidSymbol when a
    parameter slot holds anything but a symbol.
    """
    params = list(params)
    args = list(args)
    if len(params) != len(args):
        raise MalArityError(
            f"Expected {len(params)} argument(s), got {len(args)}"
        )

    local_env = Environment(outer=outer)
    for param, arg in zip(params, args):
        if not isinstance(param, Symbol):
            raise MalInvalidSymbol(f"Parameter {param} is not a symbol")
        local_env.define(param, arg)
    logger.debug("bound %d parameter(s) in new frame at depth %d", len(params), local_env.depth())
    return local_env
