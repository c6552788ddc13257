"""Circular singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice, pairwise
from typing import Any, Optional

from structkit.singly_linked import EmptyListError, _chain, _holds, _largest, _Node, _nth


class CircularLinkedList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _last(self) -> _Node:
        if self._tail is None:
            raise EmptyListError("linked list is empty")
        return self._tail

    def _ring(self, start: Optional[_Node], count: int) -> Iterator[_Node]:
        return islice(_chain(start), count)

    def _link_front(self, value: Any) -> _Node:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def insert_front(self, value: Any) -> None:
        """Insert a value before the first element."""
        self._link_front(value)

    def append(self, value: Any) -> None:
        """Insert a value after the last element."""
        self._tail = self._link_front(value)

    def insert_after(self, position: int, value: Any) -> None:
        """Insert after the 1-based position, or at the end if it is out of range."""
        if not 1 <= position <= self._size:
            self.append(value)
            return
        node = _nth(self._tail.next, position)
        new = _Node(value, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        last = self._last()
        head = last.next
        if head is last:
            self._tail = None
        else:
            last.next = head.next
        self._size -= 1
        return head.value

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        last = self._last()
        if last.next is last:
            self._tail = None
        else:
            before = next(node for node in _chain(last.next) if node.next is last)
            before.next = last.next
            self._tail = before
        self._size -= 1
        return last.value

    def remove(self, value: Any) -> None:
        """Remove the first element equal to value."""
        for previous, node in pairwise(self._ring(self._tail, self._size + 1)):
            if node.value == value:
                break
        else:
            raise ValueError(f"{value!r} not in list")
        if node is previous:
            self._tail = None
        else:
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
        self._size -= 1

    def search(self, value: Any) -> bool:
        """Return whether any element equals value."""
        return _holds(self, value)

    def maximum(self) -> Any:
        """Largest element."""
        return _largest(self)

    def __iter__(self) -> Iterator[Any]:
        head = self._tail.next if self._tail is not None else None
        return (node.value for node in self._ring(head, self._size))

    def __len__(self) -> int:
        return self._size