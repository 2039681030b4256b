"""Tagged sequence values: List, Array and Map.

All three wrap the same PersistentList; only the tag differs. A Map is a
flat run of alternating keys and values, kept in source order with no
deduplication, so lookups and equality are positional.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from mal import LispValue
from mal.types.persistent_list import PersistentList


class Sequence:
    __slots__ = ("items",)

    open_delim = ""
    close_delim = ""

    def __init__(self, items: PersistentList | Iterable[LispValue] = PersistentList.EMPTY):
        if not isinstance(items, PersistentList):
            items = PersistentList.from_iterable(items)
        self.items: PersistentList = items

    @classmethod
    def of(cls, *values: LispValue) -> Sequence:
        return cls(PersistentList.from_iterable(values))

    def is_empty(self) -> bool:
        return self.items.is_empty()

    def head(self) -> LispValue:
        return self.items.head()

    def rest(self) -> list[LispValue]:
        """Elements after the head, as a Python list (for special-form handlers)."""
        return self.items.tail().to_list()

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        # Empty sequences are truthy in Lisp; never fall back to __len__.
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        from mal.types.value import values_equal
        return values_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}([" + ", ".join(repr(v) for v in self) + "])"

    def __str__(self) -> str:
        from mal.printer import pr_str
        return pr_str(self)


class List(Sequence):
    __slots__ = ()
    open_delim = "("
    close_delim = ")"


class Array(Sequence):
    __slots__ = ()
    open_delim = "["
    close_delim = "]"


class Map(Sequence):
    __slots__ = ()
    open_delim = "{"
    close_delim = "}"
