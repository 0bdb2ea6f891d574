"""Queue and stack exercises: reversing a queue's head, dropping a stack's middle."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def k_reverse(items: Iterable[int], k: int) -> list[int]:
    """Reverse the first ``k`` items of a queue, keeping the rest in order.

    The queue comes back unchanged when it is empty, when ``k`` exceeds its
    length, or when ``k`` is not positive.
    """
    queue = deque(items)
    if not queue or k > len(queue) or k <= 0:
        return list(queue)
    stack = [queue.popleft() for _ in range(k)]
    while stack:
        queue.append(stack.pop())
    queue.rotate(-(len(queue) - k))
    return list(queue)


def drop_middle_of_stack(items: Iterable[int]) -> list[int]:
    """Pop a stack built from ``items`` completely, skipping the middle element.

    Values come back in pop order, top first; the element popped at position
    ``len // 2`` is left out.
    """
    stack = list(items)
    middle = len(stack) // 2
    popped = []
    for position in range(len(stack)):
        value = stack.pop()
        if position != middle:
            popped.append(value)
    return popped