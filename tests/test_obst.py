import io

import pytest

from treelab.obst import OBSTCell, OptimalBST, build_obst, main


@pytest.fixture
def sample():
    return build_obst(["A", "B", "C"], [3, 3, 1], [2, 3, 1, 1])


def test_sample_preorder(sample):
    assert sample.preorder() == ["B", "A", "C"]


def test_sample_root(sample):
    assert sample.root_of(0, 3) == 2
    assert sample.identifiers[sample.root_of(0, 3) - 1] == "B"


def test_total_weight_is_sum_of_weights(sample):
    assert sample.weight == 3 + 3 + 1 + 2 + 3 + 1 + 1


def test_sample_cost(sample):
    assert sample.cost == 25


def test_empty_ranges_have_no_root(sample):
    for i in range(4):
        assert sample.root_of(i, i) == 0
        assert sample.table[(i, i)].cost == 0


def test_single_key_ranges_root_at_key(sample):
    for i in range(3):
        assert sample.root_of(i, i + 1) == i + 1


def test_preorder_is_permutation():
    ids = ["d", "e", "f", "g", "h"]
    tree = build_obst(ids, [1, 5, 2, 7, 1], [1, 1, 2, 1, 3, 1])
    assert sorted(tree.preorder()) == ids


def test_roots_lie_in_range():
    tree = build_obst(list("abcdef"), [4, 1, 3, 2, 6, 1], [1, 2, 1, 1, 2, 1, 1])
    for i in range(7):
        for j in range(i + 1, 7):
            assert i < tree.root_of(i, j) <= j


def test_cost_not_below_weight():
    tree = build_obst(list("abcd"), [2, 2, 2, 2], [1, 1, 1, 1, 1])
    for i, j, cell in tree.cells():
        if i < j:
            assert cell.cost >= cell.weight


def test_single_identifier():
    tree = build_obst(["only"], [5], [1, 1])
    assert tree.preorder() == ["only"]
    assert tree.cost == tree.weight


def test_no_identifiers():
    tree = build_obst([], [], [4])
    assert tree.preorder() == []
    assert tree.weight == 4


def test_cells_cover_table(sample):
    cells = list(sample.cells())
    assert len(cells) == len(sample.table)
    assert cells[0][:2] == (0, 0)
    assert cells[-1][:2] == (0, 3)
    assert all(isinstance(c, OBSTCell) for _, _, c in cells)


def test_wrong_success_count():
    with pytest.raises(ValueError):
        build_obst(["a", "b"], [1], [1, 1, 1])


def test_wrong_failure_count():
    with pytest.raises(ValueError):
        build_obst(["a", "b"], [1, 1], [1, 1])


def test_root_of_out_of_range(sample):
    with pytest.raises(IndexError):
        sample.root_of(2, 1)
    with pytest.raises(IndexError):
        sample.root_of(0, 4)


def test_main_sample(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 A B C 3 3 1 2 3 1 1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Final OBST is:" in out
    assert out.strip().splitlines()[-3:] == ["B", "A", "C"]


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 A\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_result_type(sample):
    assert isinstance(sample, OptimalBST)
    assert sample.size == 3