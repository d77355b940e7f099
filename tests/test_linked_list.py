import pytest

from edjudge.linked_list import LinkedList


def test_push_back_and_front_order():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_back(3)
    lst.push_front(1)
    assert list(lst) == [1, 2, 3]


def test_pop_front_returns_first():
    lst = LinkedList([4, 5])
    assert lst.pop_front() == 4
    assert lst.pop_front() == 5
    assert not lst


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_pop_last_then_push_back():
    lst = LinkedList([1])
    lst.pop_front()
    lst.push_back(9)
    assert list(lst) == [9]


def test_truthiness():
    assert LinkedList([0])
    assert not LinkedList()


@pytest.mark.parametrize("values", [[1, 2, 3], [7], []])
def test_duplicate(values):
    lst = LinkedList(values)
    lst.duplicate()
    out = list(lst)
    assert len(out) == 2 * len(values)
    assert out[::2] == values
    assert out[1::2] == values


def test_duplicate_keeps_tail():
    lst = LinkedList([1, 2])
    lst.duplicate()
    lst.push_back(3)
    assert list(lst)[-1] == 3
    assert len(list(lst)) == 5


def test_matching_words_by_initial():
    words = "casa perro coche gato cuna".split()
    lst = LinkedList(words)
    assert list(lst.matching(lambda w: w[0] == "c")) == ["casa", "coche", "cuna"]


def test_matching_nothing():
    lst = LinkedList(["a", "b"])
    assert list(lst.matching(lambda w: w == "z")) == []


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3], list(range(10))])
def test_remove_odd_positions(values):
    lst = LinkedList(values)
    lst.remove_odd_positions()
    assert list(lst) == values[::2]


def test_remove_odd_positions_keeps_tail():
    lst = LinkedList([1, 2, 3, 4])
    lst.remove_odd_positions()
    lst.push_back(5)
    assert list(lst) == [1, 3, 5]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4]])
def test_reverse(values):
    lst = LinkedList(values)
    lst.reverse()
    assert list(lst) == values[::-1]


def test_reverse_updates_tail():
    lst = LinkedList([1, 2, 3])
    lst.reverse()
    lst.push_back(4)
    assert list(lst) == [3, 2, 1, 4]


@pytest.mark.parametrize(
    "first, second",
    [([1, 3, 5], [2, 4, 6]), ([], [1, 2]), ([1, 2], []), ([5, 6], [1, 2]), ([1, 1], [1])],
)
def test_merge(first, second):
    a = LinkedList(first)
    b = LinkedList(second)
    a.merge(b)
    assert list(a) == sorted(first + second)
    assert not b


def test_merge_tail_after_merge():
    a = LinkedList([1, 5])
    b = LinkedList([2, 8])
    a.merge(b)
    a.push_back(10)
    assert list(a) == [1, 2, 5, 8, 10]


def test_merge_ties_take_other_first():
    a = LinkedList([(1, "a")])
    b = LinkedList([(1, "a")])
    marker = list(b)[0]
    a.merge(b)
    assert list(a)[0] is marker


def test_merge_with_itself_rejected():
    a = LinkedList([1])
    with pytest.raises(ValueError):
        a.merge(a)


def test_split_negatives():
    lst = LinkedList([3, -1, 0, 5, -2, 0])
    negatives = lst.split_negatives()
    assert list(lst) == [3, 5]
    assert list(negatives) == [-1, -2]


def test_split_negatives_all_non_positive():
    lst = LinkedList([0, -4, 0])
    negatives = lst.split_negatives()
    assert not lst
    assert list(negatives) == [-4]


def test_split_negatives_tails_usable():
    lst = LinkedList([1, -1, 2, -2])
    negatives = lst.split_negatives()
    lst.push_back(3)
    negatives.push_back(-3)
    assert list(lst) == [1, 2, 3]
    assert list(negatives) == [-1, -2, -3]


@pytest.mark.parametrize(
    "values", [[], [1], [2, 1], [5, 3, 4, 1, 2], [1, 2, 3], [3, 3, 1, 3]]
)
def test_bubble_sort(values):
    lst = LinkedList(values)
    lst.bubble_sort()
    assert list(lst) == sorted(values)


def test_bubble_sort_tail_usable():
    lst = LinkedList([3, 1, 2])
    lst.bubble_sort()
    lst.push_back(0)
    assert list(lst) == [1, 2, 3, 0]