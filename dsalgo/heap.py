"""A max-heap, bottom-up heap construction, heap sort, and the k largest values."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def _sift_down(items: list[int], size: int, index: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def _heapify(items: list[int]) -> None:
    for index in reversed(range(len(items) // 2)):
        _sift_down(items, len(items), index)


class MaxHeap:
    """A binary max-heap of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items = list(values)
        _heapify(self._items)

    def push(self, value: int) -> None:
        """Add a value, moving it up past smaller parents."""
        items = self._items
        items.append(value)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if items[parent] >= items[child]:
                break
            items[parent], items[child] = items[child], items[parent]
            child = parent

    def pop(self) -> int:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        items[0], items[-1] = items[-1], items[0]
        largest = items.pop()
        _sift_down(items, len(items), 0)
        return largest

    def top(self) -> int:
        """The largest value, left in place."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Arrange values as an array-backed max-heap in linear time."""
    items = list(values)
    _heapify(items)
    return items


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted with a max-heap."""
    items = build_max_heap(values)
    for size in range(len(items) - 1, 0, -1):
        items[0], items[size] = items[size], items[0]
        _sift_down(items, size, 0)
    return items


def top_k(values: Iterable[int], k: int) -> list[int]:
    """The ``k`` largest values, smallest first, kept in a min-heap of size ``k``."""
    if k < 0:
        raise ValueError("k must not be negative")
    stream = iter(values)
    window: list[int] = []
    for _ in range(k):
        try:
            window.append(next(stream))
        except StopIteration:
            raise ValueError(f"fewer than {k} values given") from None
    heapq.heapify(window)
    for value in stream:
        if window and value > window[0]:
            heapq.heapreplace(window, value)
    return [heapq.heappop(window) for _ in range(len(window))]