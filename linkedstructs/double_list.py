"""A doubly linked list."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None
    previous: Optional["_Node[T]"] = None


class DoubleList(Generic[T]):
    """A doubly linked list with head and tail references.

    Negative indices are not accepted.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.insert_at_end(item)

    def _checked(self, index: int, *, allow_end: bool = False) -> int:
        index = operator.index(index)
        limit = self._size + 1 if allow_end else self._size
        if not 0 <= index < limit:
            raise IndexError("Index out of range")
        return index

    def _require_items(self) -> None:
        if self._head is None:
            raise IndexError("List is empty!")

    def _node_at(self, index: int) -> _Node[T]:
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
            return node
        node = self._tail
        for _ in range(self._size - 1 - index):
            node = node.previous
        return node

    def insert_at_beginning(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value, next=self._head)
        if self._head is not None:
            self._head.previous = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def insert_at_end(self, value: T) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value, previous=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_index(self, index: int, value: T) -> None:
        """Insert ``value`` so that it ends up at position ``index`` (0..len)."""
        index = self._checked(index, allow_end=True)
        if index == 0:
            self.insert_at_beginning(value)
        elif index == self._size:
            self.insert_at_end(value)
        else:
            current = self._node_at(index)
            node = _Node(value, next=current, previous=current.previous)
            current.previous.next = node
            current.previous = node
            self._size += 1

    def remove_from_beginning(self) -> None:
        """Remove the first element."""
        self._require_items()
        self._head = self._head.next
        if self._head is not None:
            self._head.previous = None
        else:
            self._tail = None
        self._size -= 1

    def remove_from_end(self) -> None:
        """Remove the last element."""
        self._require_items()
        previous = self._tail.previous
        if previous is not None:
            previous.next = None
            self._tail = previous
        else:
            self._head = self._tail = None
        self._size -= 1

    def remove_at_index(self, index: int) -> None:
        """Remove the element at position ``index``."""
        index = self._checked(index)
        if index == 0:
            self.remove_from_beginning()
        elif index == self._size - 1:
            self.remove_from_end()
        else:
            current = self._node_at(index)
            current.previous.next = current.next
            current.next.previous = current.previous
            self._size -= 1

    def __getitem__(self, index: int) -> T:
        return self._node_at(self._checked(index)).data

    def __setitem__(self, index: int, value: T) -> None:
        self._node_at(self._checked(index)).data = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.previous

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._size == 0

    def __str__(self) -> str:
        return "List: " + "".join(f"{item} " for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"