import pytest

from classics.stack import BoundedStack, StackOverflowError, StackUnderflowError


def test_lifo_order():
    stack = BoundedStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [30, 20, 10]
    assert stack.is_empty()


def test_underflow():
    stack = BoundedStack()
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_overflow_small_capacity():
    stack = BoundedStack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_default_capacity_is_100():
    stack = BoundedStack()
    for value in range(100):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(100)


def test_len_tracks_pushes_and_pops():
    stack = BoundedStack(5)
    stack.push("a")
    stack.push("b")
    assert len(stack) == 2
    stack.pop()
    assert len(stack) == 1
    assert not stack.is_empty()
    assert not stack.is_full()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)