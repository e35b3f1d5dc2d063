"""Bounded FIFO queues: shifting array, doubly linked list and ring buffer."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from .double_list import DoubleList
from .errors import ContainerEmptyError, ContainerFullError

T = TypeVar("T")


def _checked_capacity(max_size: int) -> int:
    if max_size < 0:
        raise ValueError("max_size must not be negative")
    return max_size


class ArrayQueue(Generic[T]):
    """A queue in contiguous storage; dequeuing shifts the remaining elements."""

    def __init__(self, max_size: int) -> None:
        self._max_size = _checked_capacity(max_size)
        self._items: List[T] = []

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the queue has reached its capacity."""
        return len(self._items) >= self._max_size

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back of the queue."""
        if self.is_full():
            raise ContainerFullError("Queue is full")
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front element."""
        if self.is_empty():
            raise ContainerEmptyError("Queue is empty")
        return self._items.pop(0)

    def peek(self) -> T:
        """Return the front element without removing it."""
        if self.is_empty():
            raise ContainerEmptyError("Queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class LinkedQueue(Generic[T]):
    """A queue stored in a doubly linked list."""

    def __init__(self, max_size: int) -> None:
        self._max_size = _checked_capacity(max_size)
        self._list: DoubleList[T] = DoubleList()

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return len(self._list) == 0

    def is_full(self) -> bool:
        """Return True if the queue has reached its capacity."""
        return len(self._list) >= self._max_size

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back of the queue."""
        if self.is_full():
            raise ContainerFullError("Queue is full")
        self._list.insert_at_end(value)

    def dequeue(self) -> T:
        """Remove and return the front element."""
        value = self.peek()
        self._list.remove_from_beginning()
        return value

    def peek(self) -> T:
        """Return the front element without removing it."""
        if self.is_empty():
            raise ContainerEmptyError("Queue is empty")
        return self._list[0]

    def __len__(self) -> int:
        return len(self._list)


class CircularQueue(Generic[T]):
    """A queue in a fixed-size ring buffer."""

    def __init__(self, max_size: int) -> None:
        self._max_size = _checked_capacity(max_size)
        self._slots: List[Optional[T]] = [None] * max_size
        self._front = 0
        self._rear = -1
        self._size = 0

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._size == 0

    def is_full(self) -> bool:
        """Return True if the queue has reached its capacity."""
        return self._size == self._max_size

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back of the queue."""
        if self.is_full():
            raise ContainerFullError("Queue is full")
        self._rear = (self._rear + 1) % self._max_size
        self._slots[self._rear] = value
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the front element."""
        value = self.peek()
        self._slots[self._front] = None
        self._front = (self._front + 1) % self._max_size
        self._size -= 1
        return value

    def peek(self) -> T:
        """Return the front element without removing it."""
        if self.is_empty():
            raise ContainerEmptyError("Queue is empty")
        return self._slots[self._front]  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._size