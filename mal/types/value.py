"""Tags, structural equality and truthiness over the closed value union.

`kind_of` is the one place that maps a Python object to its mal variant;
the printer, the equality rules and the built-in operators all dispatch on
its result instead of scattering isinstance checks.
"""

from __future__ import annotations

from enum import Enum

from mal import LispValue
from mal.types.closure import Closure
from mal.types.errors import MalTypeError
from mal.types.keyword import Keyword
from mal.types.nil import NilType
from mal.types.reader_macro import ReaderMacro
from mal.types.sequence import Array, List, Map
from mal.types.symbol import Symbol


class Kind(Enum):
    INTEGER = "integer"
    SYMBOL = "symbol"
    STRING = "string"
    KEYWORD = "keyword"
    NIL = "nil"
    TRUE = "true"
    FALSE = "false"
    LIST = "list"
    ARRAY = "array"
    MAP = "map"
    NATIVE_FUN = "native-function"
    CLOSURE = "closure"
    READER_MACRO = "reader-macro"


SEQUENCE_KINDS = frozenset({Kind.LIST, Kind.ARRAY, Kind.MAP})
FUNCTION_KINDS = frozenset({Kind.NATIVE_FUN, Kind.CLOSURE})


def kind_of(value: LispValue) -> Kind:
    match value:
        # bool before int: True/False are ints to Python
        case bool():
            return Kind.TRUE if value else Kind.FALSE
        case int():
            return Kind.INTEGER
        case str():
            return Kind.STRING
        case Symbol():
            return Kind.SYMBOL
        case Keyword():
            return Kind.KEYWORD
        case NilType():
            return Kind.NIL
        case List():
            return Kind.LIST
        case Array():
            return Kind.ARRAY
        case Map():
            return Kind.MAP
        case Closure():
            return Kind.CLOSURE
        case ReaderMacro():
            return Kind.READER_MACRO
        case _ if callable(value):
            return Kind.NATIVE_FUN
    raise MalTypeError(f"{value!r} is not a mal value")


def is_truthy(value: LispValue) -> bool:
    """Lisp truthiness: anything not Nil or false is true (0 and () included)."""
    return not (isinstance(value, NilType) or value is False)


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality. Values of different kinds are never equal."""
    if a is b:
        return True
    ka, kb = kind_of(a), kind_of(b)
    if ka is not kb:
        return False
    if ka in SEQUENCE_KINDS:
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    if ka in FUNCTION_KINDS:
        return False
    return a == b
