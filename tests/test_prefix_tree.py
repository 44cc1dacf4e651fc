import io

import pytest

from treelab.prefix_tree import (
    ExpressionTree,
    ExprNode,
    build_from_prefix,
    iter_postorder,
    main,
)

SAMPLE = "+--a*bc/def"


def test_sample_postfix():
    tree = ExpressionTree()
    root = tree.build(SAMPLE)
    assert root.data == "+"
    assert tree.postfix() == "abc*-de/-f+"


def test_postorder_covers_every_symbol():
    root = build_from_prefix(SAMPLE)
    values = [node.data for node in iter_postorder(root)]
    assert sorted(values) == sorted(SAMPLE)
    assert values[-1] == root.data


def test_operand_order_is_preserved():
    root = build_from_prefix("-ab")
    assert (root.data, root.left.data, root.right.data) == ("-", "a", "b")


def test_single_operand():
    assert build_from_prefix("x") == ExprNode("x")


def test_other_characters_ignored():
    tree = ExpressionTree()
    tree.build("+ a 1 b")
    assert tree.postfix() == "ab+"


def test_delete_order_matches_postorder():
    tree = ExpressionTree()
    tree.build(SAMPLE)
    expected = list(tree.postfix())
    assert tree.delete() == expected
    assert tree.root is None
    assert tree.postfix() == ""


def test_empty_postorder():
    assert list(iter_postorder(None)) == []


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 -ab 2 3 4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "ab-\n" in out
    assert "Deleting node: a\nDeleting node: b\nDeleting node: -\n" in out