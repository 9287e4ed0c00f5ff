from collections import deque

import pytest

from algonotes.stacks_queues import (
    TwoQueueStack,
    TwoStackQueue,
    is_valid_parentheses,
    max_sliding_window,
    next_greater_element,
)


def test_queue_is_fifo():
    queue = TwoStackQueue()
    items = [5, 1, 9, 3]
    for item in items:
        queue.push(item)
    assert queue.peek() == items[0]
    assert [queue.pop() for _ in items] == items
    assert queue.is_empty()


def test_queue_interleaved_matches_deque():
    queue = TwoStackQueue()
    model: deque[int] = deque()
    for step in range(30):
        if step % 3 == 2:
            assert queue.pop() == model.popleft()
        else:
            queue.push(step)
            model.append(step)
        assert len(queue) == len(model)
        assert queue.is_empty() == (not model)


def test_queue_empty_errors():
    queue = TwoStackQueue()
    assert queue.is_empty()
    with pytest.raises(IndexError):
        queue.peek()
    with pytest.raises(IndexError):
        queue.pop()


def test_stack_is_lifo():
    stack = TwoQueueStack()
    items = [5, 1, 9, 3]
    for item in items:
        stack.push(item)
    assert stack.top() == items[-1]
    assert [stack.pop() for _ in items] == list(reversed(items))
    assert stack.is_empty()


def test_stack_top_keeps_item():
    stack = TwoQueueStack()
    stack.push(4)
    stack.push(8)
    assert stack.top() == stack.top()
    assert len(stack) == 2
    assert stack.pop() == 8
    assert stack.top() == 4


def test_stack_interleaved_matches_list():
    stack = TwoQueueStack()
    model: list[int] = []
    for step in range(30):
        if step % 3 == 2:
            assert stack.pop() == model.pop()
        else:
            stack.push(step)
            model.append(step)
        assert len(stack) == len(model)


def test_stack_empty_errors():
    stack = TwoQueueStack()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.pop()


def test_next_greater_element_example():
    assert next_greater_element([4, 1, 2], [1, 3, 4, 2]) == [-1, 3, -1]


def test_next_greater_element_decreasing_has_none():
    nums2 = [9, 7, 4, 2]
    assert next_greater_element(nums2, nums2) == [-1] * len(nums2)


def test_next_greater_element_increasing_is_successor():
    nums2 = [1, 4, 6, 10]
    assert next_greater_element(nums2[:-1], nums2) == nums2[1:]


def test_max_sliding_window_example():
    assert max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3) == [3, 3, 5, 5, 6, 7]


def test_max_sliding_window_edges():
    nums = [4, -2, 7, 7, 0, 3]
    assert max_sliding_window(nums, 1) == nums
    assert max_sliding_window(nums, len(nums)) == [max(nums)]
    assert len(max_sliding_window(nums, 4)) == len(nums) - 4 + 1


def test_max_sliding_window_rejects_bad_size():
    with pytest.raises(ValueError):
        max_sliding_window([1, 2], 0)


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[]}", "", "([{}])"])
def test_valid_parentheses(text):
    assert is_valid_parentheses(text)


@pytest.mark.parametrize("text", ["(]", "([)]", "(", ")", "{a}"])
def test_invalid_parentheses(text):
    assert not is_valid_parentheses(text)