import pytest

from structkit.stack import Stack, StackOverflowError, StackUnderflowError


def _pushed(values, *capacity):
    stack = Stack(*capacity)
    for value in values:
        stack.push(value)
    return stack


def test_pop_is_lifo():
    stack = _pushed([1, 2, 3])
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_peek_keeps_top():
    stack = _pushed([10, 20])
    assert stack.peek() == 20
    assert len(stack) == 2


def test_iterates_top_to_bottom():
    assert list(_pushed([4, 5, 6])) == [6, 5, 4]


@pytest.mark.parametrize("capacity, limit", [((2,), 2), ((), 100)])
def test_overflow(capacity, limit):
    stack = _pushed(range(limit), *capacity)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(limit)
    assert len(stack) == limit
    assert stack.peek() == limit - 1


@pytest.mark.parametrize("operation", [Stack.pop, Stack.peek])
def test_underflow(operation):
    with pytest.raises(StackUnderflowError):
        operation(Stack())


@pytest.mark.parametrize("capacity", [0, -5])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        Stack(capacity)