"""Self-balancing AVL tree of unique, ordered keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _find(node: Any, key: Any) -> bool:
    """Search a binary search tree of nodes with value, left and right."""
    while node is not None:
        if key < node.value:
            node = node.left
        elif key > node.value:
            node = node.right
        else:
            return True
    return False


def _inorder(node: Any) -> Iterator[Any]:
    """Yield the values of a binary tree in left, node, right order."""
    pending: list[Any] = []
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.value
        node = node.right


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    """Refresh the node's height and restore the AVL property below it."""
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node
    return _rebalance(node)


def _delete(node: Optional[_Node], value: Any) -> Optional[_Node]:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return _rebalance(node)


def _is_avl(node: Optional[_Node]) -> bool:
    if node is None:
        return True
    return (
        abs(_balance(node)) <= 1
        and _is_avl(node.left)
        and _is_avl(node.right)
    )


class AVLTree:
    """An AVL tree holding each key at most once."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add a key; return False if it was already present."""
        if value in self:
            return False
        self._root = _insert(self._root, value)
        self._size += 1
        return True

    def delete(self, value: Any) -> bool:
        """Remove a key; return False if it was not present."""
        if value not in self:
            return False
        self._root = _delete(self._root, value)
        self._size -= 1
        return True

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(self)

    def is_avl(self) -> bool:
        """Check that every node's subtrees differ in height by at most one."""
        return _is_avl(self._root)

    def height(self) -> int:
        """Height of the tree; 0 when empty, 1 for a single node."""
        return _height(self._root)

    def __contains__(self, value: Any) -> bool:
        return _find(self._root, value)

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self._root)

    def __len__(self) -> int:
        return self._size