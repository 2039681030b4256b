from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.types.closure import Closure
from mal.types.environment import Environment
from mal.types.errors import MalArityError, MalEvaluationError, MalInvalidSymbol
from mal.types.nil import Nil
from mal.types.sequence import Array, List
from mal.types.symbol import Symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn* (params) body); a missing body makes a function returning nil.
    if not 1 <= len(tail) <= 2:
        raise MalArityError("fn* requires a parameter list and at most one body expression")

    params = tail[0]
    if not isinstance(params, (List, Array)):
        raise MalEvaluationError(f"fn* parameters must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise MalInvalidSymbol(f"fn* parameter {p} is not a symbol")

    body = tail[1] if len(tail) == 2 else Nil
    return Closure(list(params), body, env)
