"""Singly linked list of arbitrary values, and node helpers shared by the other lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Optional


class EmptyListError(IndexError):
    """Raised when an operation needs at least one element."""


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional["_Node"] = None
    prev: Optional["_Node"] = None


def _chain(node: Optional[_Node], step: str = "next") -> Iterator[_Node]:
    """Yield nodes by following the ``step`` link until it runs out."""
    while node is not None:
        yield node
        node = getattr(node, step)


def _nth(node: Optional[_Node], position: int) -> _Node:
    """The node ``position - 1`` links after ``node``."""
    return next(islice(_chain(node), position - 1, None))


def _check_position(position: int, size: int) -> None:
    if not 1 <= position <= size:
        raise IndexError(f"position {position} out of range")


def _holds(values: Iterable[Any], value: Any) -> bool:
    return any(item == value for item in values)


def _largest(values: Iterable[Any], floor: Any = None) -> Any:
    candidates = list(values)
    if floor is not None:
        candidates.append(floor)
    if not candidates:
        raise EmptyListError("linked list is empty")
    return max(candidates)


class SinglyLinkedList:
    """A singly linked list with O(1) insertion at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _first(self) -> _Node:
        if self._head is None:
            raise EmptyListError("linked list is empty")
        return self._head

    def _link_after(self, node: Optional[_Node], value: Any) -> None:
        """Link a new node after ``node``, or at the head when it is None."""
        if node is None:
            new = _Node(value, self._head)
            self._head = new
        else:
            new = _Node(value, node.next)
            node.next = new
        if new.next is None:
            self._tail = new
        self._size += 1

    def insert_front(self, value: Any) -> None:
        """Insert a value before the first element."""
        self._link_after(None, value)

    def insert_after(self, position: int, value: Any) -> None:
        """Insert a value after the element at a 1-based position."""
        _check_position(position, self._size)
        self._link_after(_nth(self._head, position), value)

    def append(self, value: Any) -> None:
        """Insert a value after the last element."""
        self._link_after(self._tail, value)

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        node = self._first()
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def remove(self, value: Any) -> None:
        """Remove the first element equal to value."""
        previous: Optional[_Node] = None
        for node in _chain(self._head):
            if node.value == value:
                break
            previous = node
        else:
            raise ValueError(f"{value!r} not in list")
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._first() is self._tail:
            return self.pop_front()
        before = next(node for node in _chain(self._head) if node.next is self._tail)
        value = self._tail.value
        before.next = None
        self._tail = before
        self._size -= 1
        return value

    def search(self, value: Any) -> bool:
        """Return whether any element equals value."""
        return _holds(self, value)

    def maximum(self, floor: Any = None) -> Any:
        """Largest element, never less than floor when one is given."""
        return _largest(self, floor)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[_Node] = None
        node = self._head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = previous
            previous, node = node, following
        self._head = previous

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _chain(self._head))

    def __len__(self) -> int:
        return self._size