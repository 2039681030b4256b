"""Built-in functions for the mal runtime environment.

This module defines arithmetic, chained comparison and list helpers exposed
to Lisp code. Every builtin is a plain function taking the caller's
environment and the list of already-evaluated arguments.
"""
from __future__ import annotations

from typing import Callable

from mal import LispValue
from mal.printer import pr_str
from mal.reader.parser import INT64_MAX, INT64_MIN
from mal.types.environment import Environment
from mal.types.errors import MalArityError, MalEvaluationError, MalTypeError
from mal.types.sequence import List
from mal.types.symbol import Symbol
from mal.types.value import Kind, SEQUENCE_KINDS, kind_of, values_equal

BOOLEAN_KINDS = frozenset({Kind.TRUE, Kind.FALSE})


# -------------------------------
# Arithmetic
# -------------------------------
def _check_range(value: int, op: str) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalEvaluationError(f"Integer overflow in {op}: result does not fit in 64 bits")
    return value


def _expect_integer(value: LispValue, op: str) -> int:
    if kind_of(value) is not Kind.INTEGER:
        raise MalTypeError(f"All arguments to {op} must be integers, got {pr_str(value)}")
    return value


def _string_content(value: LispValue) -> str:
    """Text a value contributes to string concatenation (quotes stripped)."""
    if kind_of(value) is Kind.STRING:
        return value[1:-1]
    return str(value)


def _fold(op: str, args: list[LispValue], step: Callable[[LispValue, LispValue], LispValue]) -> LispValue:
    if not args:
        raise MalArityError(f"{op} requires at least 1 argument")
    result = args[0]
    for x in args[1:]:
        result = step(result, x)
    return result


def _add_pair(a: LispValue, b: LispValue) -> LispValue:
    ka, kb = kind_of(a), kind_of(b)
    if ka is Kind.INTEGER and kb is Kind.INTEGER:
        return _check_range(a + b, "+")
    if ka in (Kind.INTEGER, Kind.STRING) and kb in (Kind.INTEGER, Kind.STRING):
        return '"' + _string_content(a) + _string_content(b) + '"'
    raise MalTypeError(f"All arguments to + must be integers or strings, got {pr_str(a)} and {pr_str(b)}")


def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Sum integers left to right; a string operand switches to concatenation."""
    if expr and kind_of(expr[0]) not in (Kind.INTEGER, Kind.STRING):
        raise MalTypeError(f"All arguments to + must be integers or strings, got {pr_str(expr[0])}")
    return _fold("+", expr, _add_pair)


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent integers from the first."""
    nums = [_expect_integer(x, "-") for x in expr]
    return _fold("-", nums, lambda a, b: _check_range(a - b, "-"))


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Multiply all arguments left to right."""
    nums = [_expect_integer(x, "*") for x in expr]
    return _fold("*", nums, lambda a, b: _check_range(a * b, "*"))


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise MalEvaluationError("Division by zero")
    q = abs(a) // abs(b)
    q = q if (a < 0) == (b < 0) else -q
    return _check_range(q, "/")


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Integer division left to right, truncating toward zero; errors on zero."""
    nums = [_expect_integer(x, "/") for x in expr]
    return _fold("/", nums, _truncating_div)


# -------------------------------
# Comparison
# -------------------------------
def _orderable(a: LispValue, b: LispValue) -> bool:
    ka, kb = kind_of(a), kind_of(b)
    if ka in BOOLEAN_KINDS and kb in BOOLEAN_KINDS:
        return True
    return ka is kb and ka in (Kind.INTEGER, Kind.STRING)


def _equatable(a: LispValue, b: LispValue) -> bool:
    ka, kb = kind_of(a), kind_of(b)
    if Kind.NIL in (ka, kb):
        return True
    if ka in SEQUENCE_KINDS and kb in SEQUENCE_KINDS:
        return True
    if ka in BOOLEAN_KINDS and kb in BOOLEAN_KINDS:
        return True
    return ka is kb


def _order_key(value: LispValue):
    if kind_of(value) is Kind.STRING:
        return value[1:-1]
    return int(value)


def _chain(
    op: str,
    expr: list[LispValue],
    compatible: Callable[[LispValue, LispValue], bool],
    predicate: Callable[[LispValue, LispValue], bool],
) -> bool:
    """Check `predicate` over adjacent pairs, stopping at the first failure.

    An incompatible pair reached before a failing one is an error.
    """
    for a, b in zip(expr, expr[1:]):
        if not compatible(a, b):
            raise MalTypeError(f"Cannot compare {pr_str(a)} and {pr_str(b)} with {op}")
        if not predicate(a, b):
            return False
    return True


def equals(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable structural equality: (= a b c ...)."""
    return _chain("=", expr, _equatable, values_equal)


def lt(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable less-than: true if a0 < a1 < a2 ... holds for all pairs."""
    return _chain("<", expr, _orderable, lambda a, b: _order_key(a) < _order_key(b))


def lte(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable less-or-equal: true if a0 <= a1 <= a2 ... holds for all pairs."""
    return _chain("<=", expr, _orderable, lambda a, b: _order_key(a) <= _order_key(b))


def gt(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable greater-than: true if a0 > a1 > a2 ... holds for all pairs."""
    return _chain(">", expr, _orderable, lambda a, b: _order_key(a) > _order_key(b))


def gte(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable greater-or-equal: true if a0 >= a1 >= a2 ... holds for all pairs."""
    return _chain(">=", expr, _orderable, lambda a, b: _order_key(a) >= _order_key(b))


# -------------------------------
# Lists
# -------------------------------
def _single_argument(op: str, expr: list[LispValue]) -> LispValue:
    if len(expr) != 1:
        raise MalArityError(f"{op} requires exactly 1 argument, got {len(expr)}")
    return expr[0]


def list_builtin(env: Environment, expr: list[LispValue]) -> List:
    """Construct a list from the provided arguments, in order."""
    return List(expr)


def is_list(env: Environment, expr: list[LispValue]) -> bool:
    """Predicate: true only for List values (arrays and maps are not lists)."""
    return kind_of(_single_argument("list?", expr)) is Kind.LIST


def is_empty(env: Environment, expr: list[LispValue]) -> bool:
    """Predicate: true if the list or array has no elements."""
    xs = _single_argument("empty?", expr)
    if kind_of(xs) not in (Kind.LIST, Kind.ARRAY):
        raise MalTypeError(f"empty? expects a list or array, got {pr_str(xs)}")
    return xs.is_empty()


def count(env: Environment, expr: list[LispValue]) -> int:
    """Number of elements in a list or array; nil counts as empty."""
    xs = _single_argument("count", expr)
    kind = kind_of(xs)
    if kind is Kind.NIL:
        return 0
    if kind not in (Kind.LIST, Kind.ARRAY):
        raise MalTypeError(f"count expects a list, array or nil, got {pr_str(xs)}")
    return len(xs)


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("="): equals,
            Symbol("<"): lt,
            Symbol("<="): lte,
            Symbol(">"): gt,
            Symbol(">="): gte,
            Symbol("list"): list_builtin,
            Symbol("list?"): is_list,
            Symbol("empty?"): is_empty,
            Symbol("count"): count,
        }
    )
