from __future__ import annotations
import sys


class Symbol:
    """A name looked up in the environment when evaluated.

    Names are interned, so two symbols read from the same text share one
    string and compare by that string. Unlike `Keyword`, a symbol does not
    evaluate to itself, and `nil`, `true` and `false` never read as symbols.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
