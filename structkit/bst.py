"""Unbalanced binary search tree of unique, ordered keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from structkit.avl import _find, _inorder


class EmptyTreeError(LookupError):
    """Raised when asking an empty tree for its smallest or largest key."""


@dataclass(slots=True)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """A plain binary search tree; duplicate keys are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add a key; return False if it was already present."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            if value == node.value:
                return False
            parent = node
            node = node.left if value < node.value else node.right
        new = _Node(value)
        if parent is None:
            self._root = new
        elif value < parent.value:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        return True

    def delete(self, value: Any) -> bool:
        """Remove a key, replacing a two-child node by its in-order successor."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            parent = node
            successor = node.right
            while successor.left is not None:
                parent = successor
                successor = successor.left
            node.value = successor.value
            node = successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def search(self, key: Any) -> bool:
        """Return whether the key is in the tree."""
        return _find(self._root, key)

    def _extreme(self, side: str) -> Any:
        if self._root is None:
            raise EmptyTreeError("BST is empty")
        node = self._root
        while (child := getattr(node, side)) is not None:
            node = child
        return node.value

    def smallest(self) -> Any:
        """Return the smallest key."""
        return self._extreme("left")

    def largest(self) -> Any:
        """Return the largest key."""
        return self._extreme("right")

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 when empty."""
        level = [self._root] if self._root is not None else []
        height = -1
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def depth(self) -> int:
        """Same as height for a non-empty tree; 0 when empty."""
        return max(self.height(), 0)

    def count(self) -> int:
        """Number of keys in the tree."""
        return self._size

    def inorder(self) -> list[Any]:
        """Keys in left, node, right order."""
        return list(self)

    def _node_first(self, later: str, sooner: str) -> list[Any]:
        """Visit each node before its children, the ``sooner`` child first."""
        result = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.value)
            pending.extend(
                child
                for child in (getattr(node, later), getattr(node, sooner))
                if child is not None
            )
        return result

    def preorder(self) -> list[Any]:
        """Keys in node, left, right order."""
        return self._node_first("right", "left")

    def postorder(self) -> list[Any]:
        """Keys in left, right, node order."""
        return self._node_first("left", "right")[::-1]

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self._root)

    def __len__(self) -> int:
        return self._size