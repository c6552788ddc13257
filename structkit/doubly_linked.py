"""Doubly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from structkit.singly_linked import (
    EmptyListError,
    _chain,
    _check_position,
    _holds,
    _largest,
    _Node,
    _nth,
)


class DoublyLinkedList:
    """A doubly linked list that can be walked in either direction."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _link_between(self, before: Optional[_Node], after: Optional[_Node], value: Any) -> None:
        node = _Node(value, next=after, prev=before)
        if before is None:
            self._head = node
        else:
            before.next = node
        if after is None:
            self._tail = node
        else:
            after.prev = node
        self._size += 1

    def _unlink(self, node: Optional[_Node]) -> Any:
        if node is None:
            raise EmptyListError("linked list is empty")
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

    def insert_front(self, value: Any) -> None:
        """Insert a value before the first element."""
        self._link_between(None, self._head, value)

    def insert_after(self, position: int, value: Any) -> None:
        """Insert a value after the element at a 1-based position."""
        _check_position(position, self._size)
        node = _nth(self._head, position)
        self._link_between(node, node.next, value)

    def append(self, value: Any) -> None:
        """Insert a value after the last element."""
        self._link_between(self._tail, None, value)

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        return self._unlink(self._head)

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at a 1-based position."""
        _check_position(position, self._size)
        return self._unlink(_nth(self._head, position))

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        return self._unlink(self._tail)

    def search(self, value: Any) -> bool:
        """Return whether any element equals value."""
        return _holds(self, value)

    def maximum(self) -> Any:
        """Largest element."""
        return _largest(self)

    def reverse(self) -> None:
        """Reverse the list in place by swapping each node's links."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def backward(self) -> Iterator[Any]:
        """Values from the last element to the first."""
        return (node.value for node in _chain(self._tail, "prev"))

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _chain(self._head))

    def __len__(self) -> int:
        return self._size