"""Singly and doubly linked lists of values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _SNode:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _SNode | None = None) -> None:
        self.value = value
        self.next = next_node


class SinglyLinkedList:
    """A singly linked list that grows at the front."""

    def __init__(self) -> None:
        self._head: _SNode | None = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the current first element."""
        self._head = _SNode(value, self._head)
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"


class _DNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _DNode | None = None
        self.next: _DNode | None = None


class DoublyLinkedList:
    """A doubly linked list with head and tail access."""

    def __init__(self) -> None:
        self._head: _DNode | None = None
        self._tail: _DNode | None = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        node = _DNode(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Insert ``value`` at the back."""
        node = _DNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if index < 0 or index > self._size:
            raise IndexError(f"insert position {index} out of range")
        if index == 0:
            self.push_front(value)
            return
        if index == self._size:
            self.push_back(value)
            return
        current = self._head
        for _ in range(index - 1):
            assert current is not None
            current = current.next
        assert current is not None and current.next is not None
        node = _DNode(value)
        node.next = current.next
        node.prev = current
        current.next.prev = node
        current.next = node
        self._size += 1

    def _unlink(self, node: _DNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._tail)

    def _find(self, value: Any) -> _DNode | None:
        node = self._head
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        return None

    def remove(self, value: Any) -> None:
        """Remove the first occurrence of ``value``."""
        node = self._find(value)
        if node is None:
            raise ValueError(f"{value!r} not in list")
        self._unlink(node)

    def __contains__(self, value: object) -> bool:
        return self._find(value) is not None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._size = 0

    def format_forward(self) -> str:
        """Render the values from head to tail."""
        return "NULL <-> " + "".join(f"{v} <-> " for v in self) + "NULL"

    def format_backward(self) -> str:
        """Render the values from tail to head."""
        return "NULL <-> " + "".join(f"{v} <-> " for v in reversed(self)) + "NULL"