# structkit

Textbook data structures as plain Python classes, plus a command that
drives some of them through interactive menus.

## What is in the package

- `structkit.avl.AVLTree`: a self-balancing binary search tree that holds
  each key once. It has `insert`, `delete`, `inorder`, `is_avl` and `height`,
  and supports `in`, iteration in ascending order and `len`.
- `structkit.bst.BinarySearchTree`: an unbalanced binary search tree that
  ignores duplicate keys. It has `insert`, `delete`, `search`, `smallest`,
  `largest`, `height` (-1 when empty), `depth` (0 when empty), `count`,
  `inorder`, `preorder` and `postorder`. `smallest` and `largest` raise
  `EmptyTreeError` on an empty tree.
- `structkit.stack.Stack`: a stack with a fixed capacity (100 by default).
  `push` raises `StackOverflowError` when full; `pop` and `peek` raise
  `StackUnderflowError` when empty. Iteration goes from top to bottom.
- `structkit.linear_queue.LinearQueue`: a fixed-capacity queue in which each
  enqueue uses up a slot; the slots are reclaimed only once the queue has
  been drained. It raises `QueueFullError` and `QueueEmptyError`.
- `structkit.circular_queue.CircularQueue`: a ring buffer that reuses slots
  as soon as items are dequeued, raising the same two errors.
- `structkit.singly_linked.SinglyLinkedList`,
  `structkit.doubly_linked.DoublyLinkedList` and
  `structkit.circular_linked.CircularLinkedList`: linked lists with insertion
  at the front, at the end and after a 1-based position, removal from either
  end, `search` and `maximum`. Operations that need an element raise
  `EmptyListError` on an empty list. The singly and doubly linked lists can
  be reversed in place, and the doubly linked list can be walked with
  `backward()`.
- `structkit.graph.Graph`: an undirected graph over vertices
  `0 .. vertex_count - 1` (at most 100), kept both as an adjacency matrix
  and as adjacency lists. It has `add_edge` (raising `InvalidEdgeError` for
  a vertex outside the graph), `bfs`, `dfs`, `reachable`, `adjacency_matrix`,
  `adjacency_list`, `format_matrix` and `format_list`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Usage

```python
from structkit.avl import AVLTree
from structkit.bst import BinarySearchTree
from structkit.stack import Stack
from structkit.graph import Graph

tree = AVLTree([30, 20, 10, 40])
tree.insert(25)
tree.delete(20)
print(tree.inorder())   # [10, 25, 30, 40]
print(tree.is_avl())    # True

bst = BinarySearchTree([8, 3, 10, 1, 6])
print(bst.smallest(), bst.largest(), bst.height())
print(bst.preorder())

stack = Stack(capacity=3)
stack.push(1)
stack.push(2)
print(stack.pop())      # 2

graph = Graph(4)
graph.add_edge(0, 1)
graph.add_edge(1, 2)
print(graph.bfs(0))             # [0, 1, 2]
print(graph.reachable(0, 3))    # False
print(graph.format_matrix())
```

## Interactive menu

The `structkit` command runs a menu-driven session on standard input and
standard output. It takes the structure to work on as its one argument:

```
structkit avl
structkit bst
structkit graph
structkit queue
structkit stack
```

Input is read as whitespace-separated integers. The session ends when its
exit option is chosen (`-1` for `bst`) or when input runs out. Input that is
not an integer stops the session with an error message and exit status 2.

The menus cover only the five structures above. The linked lists and the
circular queue have no menu session; use them from Python.

## Running the tests

```
pytest
```