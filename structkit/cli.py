"""Interactive menu-driven sessions for the data structures."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from structkit.avl import AVLTree
from structkit.bst import BinarySearchTree, EmptyTreeError
from structkit.graph import Graph, InvalidEdgeError
from structkit.linear_queue import LinearQueue, QueueEmptyError, QueueFullError
from structkit.stack import Stack, StackOverflowError, StackUnderflowError


class _EndOfInput(Exception):
    """Input ran out before the session was told to exit."""


class InputError(ValueError):
    """Raised when the session reads something that is not an integer."""


class _Input:
    """Whitespace-separated integers read lazily from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._tokens: Iterator[str] = (
            token for line in stream for token in line.split()
        )

    def integer(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None


def _prompt(text: str, out: TextIO) -> None:
    print(text, end="", file=out)


def _avl_session(source: _Input, out: TextIO) -> int:
    tree = AVLTree()
    while True:
        print("\nAVL Tree Operations Menu", file=out)
        print("1. Create AVL tree", file=out)
        print("2. Display AVL tree (inorder)", file=out)
        print("3. Insert data into AVL tree", file=out)
        print("4. Delete data from AVL tree", file=out)
        print("5. Check if AVL tree", file=out)
        print("6. Exit", file=out)
        _prompt("Enter your choice: ", out)
        choice = source.integer()
        if choice == 1:
            _prompt("Enter the no. of nodes to create AVL tree: ", out)
            count = source.integer()
            for number in range(1, count + 1):
                _prompt(f"Enter data for node {number}: ", out)
                tree.insert(source.integer())
        elif choice == 2:
            values = "".join(f"{value} " for value in tree)
            print(f"AVL tree (inorder): {values}", file=out)
        elif choice == 3:
            _prompt("Enter the element to insert: ", out)
            value = source.integer()
            tree.insert(value)
            print(f"Element {value} inserted into AVL tree.", file=out)
        elif choice == 4:
            _prompt("Enter the element to delete: ", out)
            value = source.integer()
            tree.delete(value)
            print(f"Element {value} deleted from AVL tree.", file=out)
        elif choice == 5:
            verdict = "is AVL" if tree.is_avl() else "is not AVL"
            print(f"The tree {verdict}.", file=out)
        elif choice == 6:
            print("Exiting...", file=out)
            return 0
        else:
            print("Invalid choice! Please try again.", file=out)


def _bst_session(source: _Input, out: TextIO) -> int:
    tree = BinarySearchTree()
    print(
        "\t1.Create Node\n\t2.display\n\t3.Search number\n"
        "\t4.Smallest number\n\t5.largest number\n\t6.height of bst\n"
        "\t7.count of bst\n\t8.Depth of BST\n\t9.Delete a node in Bst",
        file=out,
    )
    print("\t10.inorder traversal\n\t11.preorder traversal\n\t12.postorder traversal", file=out)
    _prompt("enter your choice ( enter -1 to exit ) : ", out)
    selection = source.integer()
    while selection != -1:
        if selection == 1:
            _prompt("Enter new number to add into bst : ", out)
            tree.insert(source.integer())
        elif selection == 2:
            for value in tree:
                print(value, file=out)
        elif selection == 3:
            _prompt("Enter key to search in bst : ", out)
            key = source.integer()
            verdict = "found" if tree.search(key) else "not found"
            print(f"{key} {verdict} in BST.", file=out)
        elif selection in (4, 5):
            try:
                if selection == 4:
                    print(f"Smallest number : {tree.smallest()}", file=out)
                else:
                    print(f"Largest number : {tree.largest()}", file=out)
            except EmptyTreeError:
                print(" BST is empty !", file=out)
        elif selection == 6:
            height = tree.height()
            if height == -1:
                print(" BST is empty !", file=out)
            else:
                print(f"Height of BST : {height}", file=out)
        elif selection == 7:
            print(f"No.of nodes in Bst: {tree.count()}", file=out)
        elif selection == 8:
            print(f"depth is : {tree.depth()}", file=out)
        elif selection == 9:
            print("Enter a number to delete: ", file=out)
            tree.delete(source.integer())
        elif selection == 10:
            print(" ".join(str(value) for value in tree.inorder()), file=out)
        elif selection == 11:
            print(" ".join(str(value) for value in tree.preorder()), file=out)
        elif selection == 12:
            print(" ".join(str(value) for value in tree.postorder()), file=out)
        else:
            print("wrong choice !!!", file=out)
        print(f"Successfully completed operation {selection}\n", file=out)
        _prompt("Enter your selection ( enter -1 to exit ) : ", out)
        selection = source.integer()
    return 0


def _stack_session(source: _Input, out: TextIO) -> int:
    stack = Stack()
    while True:
        print("1. push", file=out)
        print("2. pop", file=out)
        print("3. top", file=out)
        print("4. display elements", file=out)
        print("5. exit program", file=out)
        _prompt("Enter a choice :", out)
        choice = source.integer()
        if choice == 1:
            _prompt("Enter a value to push: ", out)
            try:
                stack.push(source.integer())
            except StackOverflowError:
                print("stack overflow", file=out)
        elif choice == 2:
            try:
                print(f"deleted element {stack.pop()}", file=out)
            except StackUnderflowError:
                print("stack underflow", file=out)
        elif choice == 3:
            try:
                print(f"topmost element {stack.peek()}", file=out)
            except StackUnderflowError:
                print("stack underflow", file=out)
                return 1
        elif choice == 4:
            if stack.is_empty():
                print("stack underflow", file=out)
            for value in stack:
                print(value, file=out)
        elif choice == 5:
            return 0
        else:
            print("Wrong choice", file=out)


def _queue_session(source: _Input, out: TextIO) -> int:
    queue = LinearQueue()
    while True:
        print("1. enqueue:", file=out)
        print("2. dequeue:", file=out)
        print("3. front and rear Elements: ", file=out)
        print("4. print all Elements: ", file=out)
        print("5. Exit", file=out)
        _prompt("Enter your choice: ", out)
        choice = source.integer()
        if choice == 1:
            print("ENTER A VALUE TO ENQUEUE", file=out)
            try:
                queue.enqueue(source.integer())
            except QueueFullError:
                print("Queue is full", file=out)
            else:
                print("Element inserted successfully", file=out)
        elif choice == 2:
            try:
                value = queue.dequeue()
            except QueueEmptyError:
                print("Queue is Empty", file=out)
            else:
                print("Element Deleted", file=out)
                print(f"deleted Element : {value}", file=out)
        elif choice == 3:
            if queue.is_empty():
                print("Queue is Empty", file=out)
            else:
                print(
                    f"Front and Rear elements are: {queue.front()} and {queue.rear()}",
                    file=out,
                )
        elif choice == 4:
            if queue.is_empty():
                print("Queue is Empty", file=out)
            else:
                _prompt("Elements in the Queue: ", out)
                for value in queue:
                    print(value, file=out)
        elif choice == 5:
            return 0
        else:
            print("Wrong choice", file=out)


def _read_graph(source: _Input, out: TextIO, kind: str) -> Graph | None:
    _prompt(f"Enter number of nodes for {kind}: ", out)
    try:
        graph = Graph(source.integer())
    except ValueError as error:
        print(error, file=out)
        return None
    max_edges = graph.vertex_count * (graph.vertex_count - 1)
    added = 0
    while added < max_edges:
        _prompt(f"Enter edge {added + 1}(-1 -1 to quit): ", out)
        origin = source.integer()
        destination = source.integer()
        if origin == -1 and destination == -1:
            break
        try:
            graph.add_edge(origin, destination)
        except InvalidEdgeError:
            print("Invalid edge!", file=out)
        else:
            added += 1
    return graph


def _graph_session(source: _Input, out: TextIO) -> int:
    graph = Graph(0)
    while True:
        print("\n****Menu****", file=out)
        print("1. Create Graph (Adjacency Matrix)", file=out)
        print("2. Create Graph (Adjacency List)", file=out)
        print("3. Breadth First Search (BFS)", file=out)
        print("4. Depth First Search (DFS)", file=out)
        print("5. search of edge", file=out)
        print("6. Print Adjacency Matrix", file=out)
        print("7. Print Adjacency List", file=out)
        print("8. Exit", file=out)
        _prompt("Enter your option : ", out)
        option = source.integer()
        if option in (1, 2):
            kind = "adjacency matrix" if option == 1 else "adjacency list"
            created = _read_graph(source, out, kind)
            if created is not None:
                graph = created
        elif option in (3, 4):
            name = "BFS" if option == 3 else "DFS"
            _prompt(f"Enter start node for {name} : ", out)
            start = source.integer()
            try:
                order = graph.bfs(start) if option == 3 else graph.dfs(start)
            except IndexError:
                print("Invalid vertex!", file=out)
            else:
                visited = "".join(f"{vertex} " for vertex in order)
                print(f"Nodes reachable from {start} are : {visited}", file=out)
        elif option == 5:
            _prompt("Enter start node for BFS : ", out)
            start = source.integer()
            _prompt("Enter the target node: ", out)
            target = source.integer()
            _prompt(f"Searching for node {target} starting from {start}: ", out)
            try:
                found = graph.reachable(start, target)
            except IndexError:
                print("Invalid vertex!", file=out)
            else:
                print("Found" if found else "Not Found", file=out)
        elif option == 6:
            print("\n" + graph.format_matrix(), file=out)
        elif option == 7:
            print("\n" + graph.format_list(), file=out)
        elif option == 8:
            return 0


_SESSIONS: dict[str, Callable[[_Input, TextIO], int]] = {
    "avl": _avl_session,
    "bst": _bst_session,
    "graph": _graph_session,
    "queue": _queue_session,
    "stack": _stack_session,
}


def main(argv: list[str] | None = None) -> int:
    """Run an interactive session for the chosen structure on stdin and stdout."""
    parser = argparse.ArgumentParser(
        prog="structkit",
        description="Menu-driven operations on classic data structures.",
    )
    parser.add_argument("structure", choices=sorted(_SESSIONS))
    args = parser.parse_args(argv)
    out = sys.stdout
    try:
        return _SESSIONS[args.structure](_Input(sys.stdin), out)
    except _EndOfInput:
        print(file=out)
        return 0
    except InputError as error:
        print(f"structkit: {error}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())