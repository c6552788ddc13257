import io

import pytest

from structkit.cli import main


def run(monkeypatch, capsys, structure, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([structure])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_avl_create_display_and_check(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "avl", "1 3 30 20 10\n2\n5\n6\n")
    assert code == 0
    assert "AVL tree (inorder): 10 20 30 \n" in out
    assert "The tree is AVL." in out
    assert out.rstrip().endswith("Exiting...")


def test_avl_insert_and_delete(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "avl", "3 5\n3 7\n4 5\n2\n6\n")
    assert code == 0
    assert "Element 5 inserted into AVL tree." in out
    assert "Element 5 deleted from AVL tree." in out
    assert "AVL tree (inorder): 7 \n" in out


def test_avl_invalid_choice(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "avl", "9\n6\n")
    assert code == 0
    assert "Invalid choice! Please try again." in out


def test_bst_queries(monkeypatch, capsys):
    text = "1 50\n1 30\n1 70\n3 30\n3 99\n4\n5\n7\n-1\n"
    code, out, _ = run(monkeypatch, capsys, "bst", text)
    assert code == 0
    assert "30 found in BST." in out
    assert "99 not found in BST." in out
    assert "Smallest number : 30" in out
    assert "Largest number : 70" in out
    assert "No.of nodes in Bst: 3" in out
    assert "Successfully completed operation 7" in out


def test_bst_empty_tree(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "bst", "4\n5\n6\n-1\n")
    assert code == 0
    assert out.count(" BST is empty !") == 3


def test_bst_traversals_and_delete(monkeypatch, capsys):
    text = "1 2\n1 1\n1 3\n11\n9 1\n10\n-1\n"
    code, out, _ = run(monkeypatch, capsys, "bst", text)
    assert code == 0
    assert "2 1 3\n" in out
    assert "2 3\n" in out


def test_bst_wrong_choice(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "bst", "42\n-1\n")
    assert code == 0
    assert "wrong choice !!!" in out
    assert "Successfully completed operation 42" in out


def test_stack_push_display_pop(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "stack", "1 1\n1 2\n4\n2\n3\n5\n")
    assert code == 0
    assert "2\n1\n" in out
    assert "deleted element 2" in out
    assert "topmost element 1" in out


def test_stack_pop_empty(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "stack", "2\n5\n")
    assert code == 0
    assert "stack underflow" in out


def test_stack_peek_empty_stops(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "stack", "3\n1 4\n5\n")
    assert code == 1
    assert "stack underflow" in out
    assert "Enter a value to push" not in out


def test_stack_overflow(monkeypatch, capsys):
    text = "1 7\n" * 101 + "5\n"
    code, out, _ = run(monkeypatch, capsys, "stack", text)
    assert code == 0
    assert out.count("stack overflow") == 1


def test_queue_operations(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "queue", "1 5\n1 6\n3\n2\n4\n5\n")
    assert code == 0
    assert out.count("Element inserted successfully") == 2
    assert "Front and Rear elements are: 5 and 6" in out
    assert "deleted Element : 5" in out
    assert "Elements in the Queue: 6\n" in out


def test_queue_empty(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "queue", "2\n3\n4\n5\n")
    assert code == 0
    assert out.count("Queue is Empty") == 3


def test_graph_search_and_traversals(monkeypatch, capsys):
    text = "1 3 0 1 1 2 -1 -1\n3 0\n4 0\n5 0 2\n8\n"
    code, out, _ = run(monkeypatch, capsys, "graph", text)
    assert code == 0
    assert out.count("Nodes reachable from 0 are : 0 1 2 ") == 2
    assert "Found\n" in out


def test_graph_invalid_edge_and_matrix(monkeypatch, capsys):
    text = "1 2 0 5 0 1 -1 -1\n6\n7\n8\n"
    code, out, _ = run(monkeypatch, capsys, "graph", text)
    assert code == 0
    assert "Invalid edge!" in out
    assert "Adjacency Matrix:\n0 1\n1 0\n" in out
    assert "Vertex 0: 1 -> NULL" in out


def test_graph_invalid_start(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "graph", "3 0\n8\n")
    assert code == 0
    assert "Invalid vertex!" in out


def test_non_integer_input(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "stack", "abc\n")
    assert code == 2
    assert "abc" in err


def test_end_of_input_returns_zero(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "queue", "1 3\n")
    assert code == 0
    assert "Element inserted successfully" in out


def test_unknown_structure():
    with pytest.raises(SystemExit) as info:
        main(["heap"])
    assert info.value.code == 2