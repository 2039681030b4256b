from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.types.environment import Environment
from mal.types.errors import MalArityError
from mal.types.nil import Nil
from mal.types.value import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not 2 <= len(tail) <= 3:
        raise MalArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(env, tail[0])
    # Lisp truthiness: anything not nil or false is true, including 0 and ()
    if is_truthy(cond):
        return evaluate_fn(env, tail[1])
    elif len(tail) > 2:
        return evaluate_fn(env, tail[2])
    else:
        return Nil
