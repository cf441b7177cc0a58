import pytest

from dsprimer.stack import MAXSIZE, SeqStack, SharedStack


def test_seqstack_lifo_order():
    stack = SeqStack()
    for value in ("a", "b", "c"):
        stack.push(value)
    assert len(stack) == 3
    assert stack.top() == "c"
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert stack.is_empty()


def test_seqstack_empty_errors():
    stack = SeqStack()
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_seqstack_overflow():
    stack = SeqStack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(OverflowError):
        stack.push(3)
    assert len(stack) == 2
    assert stack.top() == 2


def test_seqstack_default_capacity():
    stack = SeqStack()
    for value in range(MAXSIZE):
        stack.push(value)
    with pytest.raises(OverflowError):
        stack.push(MAXSIZE)
    assert len(stack) == MAXSIZE


def test_shared_stack_independent_ends():
    shared = SharedStack(capacity=5)
    assert shared.is_empty()
    shared.push("x", 0)
    shared.push("y", 0)
    shared.push("p", 1)
    assert not shared.is_empty()
    assert shared.top(0) == "y"
    assert shared.top(1) == "p"
    assert shared.pop(0) == "y"
    assert shared.pop(1) == "p"
    assert shared.pop(0) == "x"
    assert shared.is_empty()


def test_shared_stack_full_when_ends_meet():
    shared = SharedStack(capacity=3)
    shared.push(1, 0)
    shared.push(2, 1)
    shared.push(3, 1)
    with pytest.raises(OverflowError):
        shared.push(4, 0)
    with pytest.raises(OverflowError):
        shared.push(4, 1)
    assert shared.pop(1) == 3


def test_shared_stack_empty_errors():
    shared = SharedStack()
    with pytest.raises(IndexError):
        shared.pop(0)
    with pytest.raises(IndexError):
        shared.pop(1)
    with pytest.raises(IndexError):
        shared.top(1)


def test_shared_stack_bad_number():
    shared = SharedStack()
    with pytest.raises(ValueError):
        shared.push(1, 2)
    with pytest.raises(ValueError):
        shared.pop(-1)
    assert shared.is_empty()