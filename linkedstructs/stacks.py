"""Bounded LIFO stacks backed by a Python list or by a singly linked list."""

from __future__ import annotations

from typing import Generic, List, TypeVar

from .errors import ContainerEmptyError, ContainerFullError
from .single_list import SingleList

T = TypeVar("T")


def _checked_capacity(max_size: int) -> int:
    if max_size < 0:
        raise ValueError("max_size must not be negative")
    return max_size


class ArrayStack(Generic[T]):
    """A stack holding at most ``max_size`` elements in contiguous storage."""

    def __init__(self, max_size: int) -> None:
        self._max_size = _checked_capacity(max_size)
        self._items: List[T] = []

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the stack has reached its capacity."""
        return len(self._items) >= self._max_size

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise ContainerFullError("Stack is full")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top element."""
        if self.is_empty():
            raise ContainerEmptyError("Stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top element without removing it."""
        if self.is_empty():
            raise ContainerEmptyError("Stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack(Generic[T]):
    """A stack holding at most ``max_size`` elements in a singly linked list."""

    def __init__(self, max_size: int) -> None:
        self._max_size = _checked_capacity(max_size)
        self._list: SingleList[T] = SingleList()

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return len(self._list) == 0

    def is_full(self) -> bool:
        """Return True if the stack has reached its capacity."""
        return len(self._list) >= self._max_size

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise ContainerFullError("Stack is full")
        self._list.insert_at_beginning(value)

    def pop(self) -> T:
        """Remove and return the top element."""
        value = self.peek()
        self._list.remove_from_beginning()
        return value

    def peek(self) -> T:
        """Return the top element without removing it."""
        if self.is_empty():
            raise ContainerEmptyError("Stack is empty")
        return self._list[0]

    def __len__(self) -> int:
        return len(self._list)