from __future__ import annotations

from enum import Enum


class ReaderMacro(Enum):
    """Markers produced by reader sugar.

    `'x` reads as `(quote x)` where `quote` is `ReaderMacro.QUOTE`, not a
    symbol. The evaluator leaves these alone; they only print by name.
    """

    QUOTE = "quote"
    QUASIQUOTE = "quasiquote"
    UNQUOTE = "unquote"
    SPLICE_UNQUOTE = "splice-unquote"
    DEREF = "deref"
    WITH_META = "with-meta"

    def __str__(self) -> str:
        return self.value
