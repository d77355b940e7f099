import pytest

from edjudge.stack_min import MinStack, Stack


def test_stack_is_lifo():
    stack = Stack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert len(stack) == 3
    assert stack.top() == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert not stack


def test_stack_grows_past_many_elements():
    stack = Stack()
    for value in range(100):
        stack.push(value)
    assert len(stack) == 100
    assert stack.top() == 99


def test_stack_empty_errors():
    stack = Stack()
    with pytest.raises(IndexError, match="no tiene cima"):
        stack.top()
    with pytest.raises(IndexError, match="desapilando"):
        stack.pop()


def test_min_stack_tracks_minimum_while_pushing():
    values = [5, 3, 7, 3, 1, 8, 2]
    stack = MinStack()
    for i, value in enumerate(values, start=1):
        stack.push(value)
        assert stack.minimum() == min(values[:i])
        assert stack.top() == value
        assert len(stack) == i


def test_min_stack_minimum_restored_after_pop():
    values = [5, 3, 7, 3, 1, 8, 2]
    stack = MinStack()
    for value in values:
        stack.push(value)
    for i in range(len(values), 1, -1):
        assert stack.pop() == values[i - 1]
        assert stack.minimum() == min(values[: i - 1])
    assert stack.pop() == values[0]
    assert not stack


def test_min_stack_with_characters():
    stack = MinStack()
    for ch in "dbca":
        stack.push(ch)
    assert stack.minimum() == "a"
    stack.pop()
    assert stack.minimum() == "b"


@pytest.mark.parametrize("method", ["top", "pop", "minimum"])
def test_min_stack_empty_errors(method):
    with pytest.raises(IndexError) as info:
        getattr(MinStack(), method)()
    assert str(info.value) == "ERROR: Pila vacia"