"""Stacks and queues built from each other, and monotonic-stack problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


class TwoStackQueue:
    """A first-in first-out queue kept in two stacks."""

    def __init__(self) -> None:
        self._input: list[int] = []
        self._output: list[int] = []

    def push(self, x: int) -> None:
        """Add ``x`` to the back of the queue."""
        self._input.append(x)

    def pop(self) -> int:
        """Remove and return the front item."""
        self.peek()
        return self._output.pop()

    def peek(self) -> int:
        """Return the front item without removing it."""
        if not self._output:
            while self._input:
                self._output.append(self._input.pop())
        if not self._output:
            raise IndexError("peek from an empty queue")
        return self._output[-1]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no items."""
        return not self._input and not self._output

    def __len__(self) -> int:
        return len(self._input) + len(self._output)


class TwoQueueStack:
    """A last-in first-out stack kept in two queues."""

    def __init__(self) -> None:
        self._main: deque[int] = deque()
        self._spare: deque[int] = deque()

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._main.append(x)

    def _take_last(self) -> int:
        if not self._main:
            raise IndexError("stack is empty")
        while len(self._main) > 1:
            self._spare.append(self._main.popleft())
        return self._main.popleft()

    def pop(self) -> int:
        """Remove and return the top item."""
        value = self._take_last()
        self._main, self._spare = self._spare, self._main
        return value

    def top(self) -> int:
        """Return the top item without removing it."""
        value = self._take_last()
        self._spare.append(value)
        self._main, self._spare = self._spare, self._main
        return value

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return not self._main

    def __len__(self) -> int:
        return len(self._main)


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first larger value after it in
    ``nums2``, or -1 when there is none."""
    greater: dict[int, int] = {}
    stack: list[int] = []
    for num in nums2:
        while stack and stack[-1] < num:
            greater[stack.pop()] = num
        stack.append(num)
    return [greater.get(num, -1) for num in nums1]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("max_sliding_window() needs a window size of at least 1")
    window: deque[int] = deque()
    result = []
    for idx, num in enumerate(nums):
        while window and window[-1] < num:
            window.pop()
        window.append(num)
        if idx >= k and nums[idx - k] == window[0]:
            window.popleft()
        if idx >= k - 1:
            result.append(window[0])
    return result


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character other than an opening bracket must close the latest one.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENING:
            stack.append(ch)
        elif not stack or _PAIRS.get(ch) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack