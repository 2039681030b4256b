"""Immutable, structurally shared singly linked list.

Every Lisp sequence (lists, arrays, maps) and every argument vector is
built on this type. `prepend` never copies: the new list points at the old
one as its tail, and because no operation mutates a node the shared suffix
is safe. Nodes are freed by reference counting as soon as the last list
that includes them goes away; nothing here can form a cycle.

This module is plain Python so that setup.py can compile it with Cython;
keep it free of constructs that need the interpreter at build time.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("elem", "next")

    def __init__(self, elem: Any, next: Optional[_Node]):
        self.elem = elem
        self.next = next


class PersistentList:
    __slots__ = ("_head", "_size")

    def __init__(self, _head: Optional[_Node] = None, _size: int = 0):
        self._head = _head
        self._size = _size

    @classmethod
    def from_iterable(cls, items: Iterable[Any]) -> PersistentList:
        """Build a list holding `items` in iteration order."""
        result = cls.EMPTY
        for item in reversed(list(items)):
            result = result.prepend(item)
        return result

    def is_empty(self) -> bool:
        return self._head is None

    def prepend(self, elem: Any) -> PersistentList:
        return PersistentList(_Node(elem, self._head), self._size + 1)

    def head(self) -> Any:
        """First element, or None for the empty list."""
        if self._head is None:
            return None
        return self._head.elem

    def tail(self) -> PersistentList:
        """Everything after the first element; the empty list stays empty."""
        if self._head is None:
            return self
        return PersistentList(self._head.next, self._size - 1)

    def reverse(self) -> PersistentList:
        result = PersistentList.EMPTY
        for elem in self:
            result = result.prepend(elem)
        return result

    def nth(self, index: int, error: Optional[Exception] = None) -> Any:
        """Element at `index`; raises `error` (IndexError if None) when out of range."""
        if 0 <= index < self._size:
            node = self._head
            for _ in range(index):
                node = node.next
            return node.elem
        if error is not None:
            raise error
        raise IndexError(f"index {index} out of range for list of size {self._size}")

    def first(self, error: Optional[Exception] = None) -> Any:
        return self.nth(0, error)

    def to_list(self) -> list:
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.elem
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __eq__(self, other: object) -> bool:
        """Elementwise host `==`, so 1 and True match here.

        Lisp equality lives in mal.types.value.values_equal, which the
        List, Array and Map wrappers use instead of this method.
        """
        if not isinstance(other, PersistentList):
            return NotImplemented
        if self._size != other._size:
            return False
        a, b = self._head, other._head
        while a is not None:
            if a is b:
                # shared suffix
                return True
            if not (a.elem == b.elem):
                return False
            a, b = a.next, b.next
        return True

    __hash__ = None

    def __repr__(self) -> str:
        return "PersistentList([" + ", ".join(repr(e) for e in self) + "])"


PersistentList.EMPTY = PersistentList()
