import pytest

from edjudge.sequences import Deque, LinkedSequence


def test_deque_push_and_pop_both_ends():
    d = Deque([2, 3])
    d.push_front(1)
    d.push_back(4)
    assert len(d) == 4
    assert d.front() == 1
    assert d.back() == 4
    assert d.pop_front() == 1
    assert d.pop_back() == 4
    assert len(d) == 2


def test_deque_empty_errors():
    d = Deque()
    assert not d
    with pytest.raises(IndexError):
        d.front()
    with pytest.raises(IndexError):
        d.back()
    with pytest.raises(IndexError):
        d.pop_front()
    with pytest.raises(IndexError):
        d.pop_back()


def test_deque_drains_in_order():
    d = Deque(range(5))
    drained = [d.pop_front() for _ in range(5)]
    assert drained == [0, 1, 2, 3, 4]
    assert not d


def test_at_and_out_of_range():
    seq = LinkedSequence(["a", "b", "c"])
    assert [seq.at(i) for i in range(3)] == ["a", "b", "c"]
    with pytest.raises(IndexError):
        seq.at(3)
    with pytest.raises(IndexError):
        seq.at(-1)


def test_iter_and_reversed():
    values = [5, 1, 4, 2]
    seq = LinkedSequence(values)
    assert list(seq) == values
    assert list(reversed(seq)) == values[::-1]


def test_reverse_cursor_walk():
    seq = LinkedSequence([1, 2, 3])
    seen = []
    cursor = seq.rbegin()
    while cursor != seq.rend():
        seen.append(cursor.value())
        cursor.advance()
    assert seen == [3, 2, 1]
    with pytest.raises(IndexError):
        cursor.value()
    with pytest.raises(IndexError):
        cursor.advance()


def test_begin_equals_end_when_empty():
    seq = LinkedSequence()
    assert seq.begin() == seq.end()
    assert seq.rbegin() == seq.rend()


def test_insert_before_cursor():
    seq = LinkedSequence([1, 3])
    cursor = seq.begin().advance()
    new = seq.insert(cursor, 2)
    assert new.value() == 2
    assert cursor.value() == 3
    assert list(seq) == [1, 2, 3]
    seq.insert(seq.end(), 4)
    assert list(seq) == [1, 2, 3, 4]
    assert len(seq) == 4


def test_erase_returns_next():
    seq = LinkedSequence([1, 2, 3])
    following = seq.erase(seq.begin())
    assert following.value() == 2
    assert list(seq) == [2, 3]
    with pytest.raises(IndexError):
        seq.erase(seq.end())


def test_erase_reverse_cursor_moves_backwards():
    seq = LinkedSequence([1, 2, 3])
    following = seq.erase(seq.rbegin())
    assert following.value() == 2
    assert list(seq) == [1, 2]


def test_foreign_cursor_rejected():
    first = LinkedSequence([1])
    second = LinkedSequence([2])
    with pytest.raises(ValueError):
        first.insert(second.begin(), 3)
    with pytest.raises(ValueError):
        first.erase(second.begin())