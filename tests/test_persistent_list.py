import pytest
from hypothesis import given, strategies as st

from mal.types.persistent_list import PersistentList


def test_basics():
    lst = PersistentList()
    assert lst.head() is None

    lst = lst.prepend(1).prepend(2).prepend(3)
    assert lst.head() == 3

    lst = lst.tail()
    assert lst.head() == 2

    lst = lst.tail()
    assert lst.head() == 1

    lst = lst.tail()
    assert lst.head() is None

    # tail of the empty list is still empty, not an error
    lst = lst.tail()
    assert lst.head() is None
    assert lst.is_empty()


def test_iter_restarts():
    lst = PersistentList().prepend(1).prepend(2).prepend(3)
    assert list(lst) == [3, 2, 1]
    assert list(lst) == [3, 2, 1]
    it = iter(lst)
    assert next(it) == 3
    assert next(it) == 2
    assert next(it) == 1
    with pytest.raises(StopIteration):
        next(it)


def test_prepend_shares_tail_without_changing_it():
    base = PersistentList.from_iterable([2, 3])
    a = base.prepend(1)
    b = base.prepend(10)
    assert list(a) == [1, 2, 3]
    assert list(b) == [10, 2, 3]
    assert list(base) == [2, 3]
    assert a.tail() == b.tail()


def test_reverse_is_fresh():
    lst = PersistentList.from_iterable([1, 2, 3])
    rev = lst.reverse()
    assert list(rev) == [3, 2, 1]
    assert list(lst) == [1, 2, 3]
    assert PersistentList().reverse().is_empty()


def test_len_and_bool():
    assert len(PersistentList()) == 0
    assert not PersistentList()
    lst = PersistentList.from_iterable("abc")
    assert len(lst) == 3
    assert len(lst.tail()) == 2
    assert lst


def test_nth_and_first():
    lst = PersistentList.from_iterable(["a", "b", "c"])
    assert lst.first() == "a"
    assert lst.nth(2) == "c"
    with pytest.raises(IndexError):
        lst.nth(3)
    with pytest.raises(KeyError):
        PersistentList().first(KeyError("empty"))


def test_equality():
    assert PersistentList.from_iterable([1, 2]) == PersistentList.from_iterable([1, 2])
    assert PersistentList.from_iterable([1, 2]) != PersistentList.from_iterable([1])
    assert PersistentList.from_iterable([1, 2]) != PersistentList.from_iterable([2, 1])
    assert PersistentList() == PersistentList.EMPTY


@given(st.lists(st.integers()))
def test_from_iterable_preserves_order(items):
    lst = PersistentList.from_iterable(items)
    assert lst.to_list() == items
    assert list(lst.reverse()) == items[::-1]
    assert len(lst) == len(items)


def test_raw_equality_is_host_equality():
    from mal.types.sequence import List

    ones = PersistentList.from_iterable([1])
    trues = PersistentList.from_iterable([True])
    assert ones == trues
    # the tagged wrapper keeps 1 and true apart
    assert List(ones) != List(trues)
