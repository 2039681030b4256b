from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.types.errors import MalArityError, MalInvalidSymbol
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds in the current frame and returns the value. If evaluating the
    value fails, any previous binding of `name` is left untouched.
    """
    if len(tail) != 2:
        raise MalArityError(
            f"def! expects a symbol and exactly one value expression, got {len(tail)} operand(s)"
        )

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalInvalidSymbol(f"First element of def! must be a symbol, got {name}")
    value = evaluate_fn(env, val_expr)
    env.define(name, value)
    return value
