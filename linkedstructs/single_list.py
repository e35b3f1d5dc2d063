"""A singly linked list."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from itertools import islice
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class SingleList(Generic[T]):
    """A singly linked list supporting insertion and removal at either end or by index.

    Negative indices are not accepted.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        for item in reversed(list(items)):
            self.insert_at_beginning(item)

    def _walk(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node[T]:
        return next(islice(self._walk(), index, None))

    def _position(self, index: int, *, allow_end: bool = False) -> int:
        index = operator.index(index)
        if index not in range(self._size + allow_end):
            raise IndexError("Index out of range")
        return index

    def _link_after(self, previous: Optional[_Node[T]], value: T) -> None:
        if previous is None:
            self._head = _Node(value, self._head)
        else:
            previous.next = _Node(value, previous.next)
        self._size += 1

    def _unlink_after(self, previous: Optional[_Node[T]]) -> None:
        if self._head is None:
            raise IndexError("List is empty!")
        if previous is None:
            self._head = self._head.next
        else:
            previous.next = previous.next.next
        self._size -= 1

    def _predecessor(self, index: int) -> Optional[_Node[T]]:
        return self._node_at(index - 1) if index > 0 else None

    def insert_at_beginning(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        self._link_after(None, value)

    def insert_at_end(self, value: T) -> None:
        """Append ``value`` after the last element."""
        self._link_after(self._predecessor(self._size), value)

    def insert_at_index(self, index: int, value: T) -> None:
        """Insert ``value`` so that it ends up at position ``index`` (0..len)."""
        index = self._position(index, allow_end=True)
        self._link_after(self._predecessor(index), value)

    def remove_from_beginning(self) -> None:
        """Remove the first element."""
        self._unlink_after(None)

    def remove_from_end(self) -> None:
        """Remove the last element."""
        self._unlink_after(self._predecessor(self._size - 1))

    def remove_at_index(self, index: int) -> None:
        """Remove the element at position ``index``."""
        index = self._position(index)
        self._unlink_after(self._predecessor(index))

    def __getitem__(self, index: int) -> T:
        return self._node_at(self._position(index)).data

    def __setitem__(self, index: int, value: T) -> None:
        self._node_at(self._position(index)).data = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._walk())

    def __contains__(self, value: object) -> bool:
        for item in self:
            if item == value:
                return True
        return False

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._head is None

    def __str__(self) -> str:
        body = "".join(f"{item} " for item in self)
        return f"List data: {body}\n"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"