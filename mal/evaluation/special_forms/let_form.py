from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.types.environment import Environment
from mal.types.errors import MalArityError, MalEvaluationError, MalInvalidSymbol
from mal.types.sequence import Array, List
from mal.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let* (name1 expr1 name2 expr2 ...) body)

    All bindings go into one new child frame, in order, and each expression
    is evaluated in that frame so it can see the names bound before it.
    Nothing leaks into `env`.
    """
    if len(tail) != 2:
        raise MalArityError(
            f"let* expects a binding list and a body, got {len(tail)} operand(s)"
        )

    bindings, body = tail
    if not isinstance(bindings, (List, Array)):
        raise MalEvaluationError(f"let* bindings must be a list, got {bindings}")

    pairs = list(bindings)
    if len(pairs) % 2 != 0:
        raise MalEvaluationError(
            f"let* binding for {pairs[-1]} has no value expression"
        )

    local_env = Environment(outer=env)
    for name, val_expr in zip(pairs[::2], pairs[1::2]):
        if not isinstance(name, Symbol):
            raise MalInvalidSymbol(f"let* binding name must be a symbol, got {name}")
        local_env.define(name, evaluate_fn(local_env, val_expr))

    return evaluate_fn(local_env, body)
