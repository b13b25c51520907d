import pytest

from algodrills.stacks import ArrayStack, run_stack_commands


def test_push_pop_top_sequence():
    stack = ArrayStack()
    stack.push(5)
    stack.push(4)
    stack.push(3)
    assert stack.top() == 3
    stack.pop()
    stack.pop()
    assert stack.top() == 5
    stack.push(10)
    stack.push(12)
    assert stack.top() == 12
    stack.pop()
    assert stack.top() == 10


def test_pop_returns_values_in_reverse_order():
    stack = ArrayStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert len(stack) == 0


def test_empty_stack_raises():
    stack = ArrayStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_run_commands():
    commands = [
        "push 1", "push 2", "top", "size", "empty",
        "pop", "pop", "pop", "size", "empty", "top",
    ]
    assert run_stack_commands(commands) == [2, 2, 0, 2, 1, -1, 0, 1, -1]


def test_run_commands_rejects_unknown():
    with pytest.raises(ValueError):
        run_stack_commands(["peek"])


def test_run_commands_rejects_push_without_value():
    with pytest.raises(ValueError):
        run_stack_commands(["push"])