"""Printer: render values back to source-like text."""

from __future__ import annotations

from mal import LispValue
from mal.types.errors import MalError, MalEvaluationError
from mal.types.value import Kind, SEQUENCE_KINDS, kind_of


def pr_str(value: LispValue) -> str:
    """Return the textual form of `value`.

    Strings keep the quotes they were read with, keywords keep their colon,
    and sequences print with their own delimiters: (a b) [a b] {k v}.
    """
    kind = kind_of(value)
    if kind in SEQUENCE_KINDS:
        return value.open_delim + " ".join(pr_str(v) for v in value) + value.close_delim
    match kind:
        case Kind.NIL:
            return "nil"
        case Kind.TRUE:
            return "true"
        case Kind.FALSE:
            return "false"
        case Kind.STRING:
            return value
        case Kind.INTEGER:
            return str(value)
        case Kind.SYMBOL | Kind.KEYWORD | Kind.READER_MACRO:
            return str(value)
        case Kind.CLOSURE:
            return f"#<function {value}>"
        case Kind.NATIVE_FUN:
            return f"#<native-function {value.__name__}>"
    raise AssertionError(f"unhandled kind {kind}")


def print_result(result: LispValue | MalError) -> str:
    """Render an evaluation outcome: the value's text, or the error message.

    Raises MalEvaluationError for a value nested deeper than pr_str can recurse.
    """
    if isinstance(result, MalError):
        return str(result)
    try:
        return pr_str(result)
    except RecursionError:
        raise MalEvaluationError("Value nested too deeply to print") from None
