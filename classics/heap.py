"""Bounded binary min- and max-heaps, and heap sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class HeapFullError(OverflowError):
    """Raised when adding to a heap that is at capacity."""


class HeapEmptyError(IndexError):
    """Raised when reading from an empty heap."""


class BinaryHeap:
    """A binary heap holding at most ``capacity`` items."""

    def __init__(self, capacity: int, max_heap: bool = True) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.max_heap = max_heap
        self._data: list[Any] = []

    def _should_swap(self, parent_value: Any, child_value: Any) -> bool:
        if self.max_heap:
            return parent_value < child_value
        return parent_value > child_value

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if not self._should_swap(data[parent], data[index]):
                break
            data[parent], data[index] = data[index], data[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            target = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._should_swap(data[target], data[child]):
                    target = child
            if target == index:
                break
            data[index], data[target] = data[target], data[index]
            index = target

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        if len(self._data) >= self.capacity:
            raise HeapFullError("heap is full")
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the root (largest or smallest value)."""
        if not self._data:
            raise HeapEmptyError("heap is empty")
        root = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> Any:
        """Return the root without removing it."""
        if not self._data:
            raise HeapEmptyError("heap is empty")
        return self._data[0]

    def build(self, values: Iterable[Any]) -> None:
        """Replace the contents with ``values`` and restore heap order."""
        items = list(values)
        if len(items) > self.capacity:
            raise HeapFullError("too many values for heap capacity")
        self._data = items
        for index in range(len(items) // 2 - 1, -1, -1):
            self._sift_down(index)

    def levels(self) -> list[list[Any]]:
        """Return the stored values grouped by tree level."""
        result = []
        start, width = 0, 1
        while start < len(self._data):
            result.append(self._data[start:start + width])
            start += width
            width *= 2
        return result

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted with a max-heap."""
    items = list(values)
    heap = BinaryHeap(len(items), max_heap=True)
    heap.build(items)
    result = [heap.pop() for _ in range(len(items))]
    result.reverse()
    return result