import io

import pytest

from treelab.bst_dict import BSTDictionary, main


@pytest.fixture
def filled():
    tree = BSTDictionary()
    for word in ["m", "c", "t", "a", "e", "r", "z", "d"]:
        tree.insert(word, word.upper())
    return tree


def test_insert_reports_duplicates():
    tree = BSTDictionary()
    assert tree.insert("word", "meaning") is True
    assert tree.insert("word", "other") is False
    assert tree.search("word") == "meaning"
    assert len(tree) == 1


def test_sample_session():
    tree = BSTDictionary()
    tree.insert("testWord", "life")
    tree.insert("test2", "sdfj")
    assert tree.search("test2") == "sdfj"
    tree.update("test2", "val")
    assert list(tree.items()) == [("test2", "val"), ("testWord", "life")]


def test_search_missing_raises():
    tree = BSTDictionary()
    with pytest.raises(KeyError):
        tree.search("absent")


def test_update_missing_raises(filled):
    with pytest.raises(KeyError):
        filled.update("absent", "x")


def test_delete_missing_raises(filled):
    with pytest.raises(KeyError):
        filled.delete("absent")
    assert len(filled) == 8


def test_iteration_is_sorted(filled):
    keys = list(filled)
    assert keys == sorted(keys)
    assert len(keys) == len(filled)


@pytest.mark.parametrize("victim", ["m", "c", "t", "a", "e", "r", "z", "d"])
def test_delete_each_keeps_order(filled, victim):
    before = list(filled)
    filled.delete(victim)
    assert victim not in filled
    assert list(filled) == [k for k in before if k != victim]
    assert len(filled) == len(before) - 1
    for key in filled:
        assert filled.search(key) == key.upper()


def test_delete_everything(filled):
    for key in list(filled):
        filled.delete(key)
    assert len(filled) == 0
    assert list(filled.items()) == []


def test_contains(filled):
    assert "e" in filled
    assert "q" not in filled
    assert 5 not in filled


def test_main_session(monkeypatch, capsys):
    script = "1 testWord life 1 test2 sdfj 2 test2 3 test2 val 5 2 nope 0\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Value (meaning) is:\tsdfj" in out
    assert "Element updated." in out
    assert "test2 : val\ntestWord : life\n" in out
    assert "Element does not exist." in out