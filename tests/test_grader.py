import pytest

from bstmap.grader import (
    Word,
    initialize_tree,
    lower_than_int,
    main,
    run_checks,
)
from bstmap.treemap import minimum


@pytest.mark.parametrize(
    "a, b, expected",
    [(10, 15, True), (15, 10, False), (5, 5, False)],
)
def test_lower_than_int(a, b, expected):
    result = lower_than_int(a, b)
    assert result == expected


def test_initialize_tree_layout(capsys):
    tree = initialize_tree()
    assert tree.root.pair.key == 5239
    assert tree.root.pair.value == Word(5239, "auto")
    assert tree.root.left.pair.key == 1273
    assert tree.root.right.pair.key == 8213
    assert tree.root.right.left.pair.value.word == "hoja"
    assert tree.root.right.left.parent is tree.root.right
    assert tree.root.left.parent is tree.root
    assert "[ INFO ]" in capsys.readouterr().out


def test_initialize_tree_in_order():
    tree = initialize_tree()
    assert [pair.key for pair in tree] == [1273, 5239, 6980, 8213]
    assert minimum(tree.root).pair.value.word == "reto"


def test_run_all_checks_full_score(capsys):
    assert run_checks(-1) == 70
    out = capsys.readouterr().out
    assert "[FAILED]" not in out
    assert "SUCCESS" not in out
    assert out.count("partial_score") == 7


def test_main_prints_total(capsys):
    assert main([]) == 0
    assert "total_score: 70/70" in capsys.readouterr().out


@pytest.mark.parametrize("test_id", list(range(12)))
def test_single_test_id_succeeds(test_id, capsys):
    run_checks(test_id)
    out = capsys.readouterr().out
    assert out.rstrip().endswith("SUCCESS")
    assert "[FAILED]" not in out


def test_early_id_stops_before_minimum(capsys):
    assert run_checks(0) == 0
    assert "Test minimum" not in capsys.readouterr().out


def test_later_id_runs_minimum(capsys):
    assert run_checks(5) == 0
    out = capsys.readouterr().out
    assert "Test minimum" in out
    assert "Test erase" in out
    assert "Test search" not in out


def test_unknown_id_runs_only_minimum(capsys):
    assert run_checks(12) == 0
    out = capsys.readouterr().out
    assert "Test minimum" in out
    assert "SUCCESS" not in out
    assert "partial_score" not in out


def test_main_with_argument_skips_total(capsys):
    main(["3"])
    out = capsys.readouterr().out
    assert "SUCCESS" in out
    assert "total_score" not in out


def test_main_non_numeric_argument_means_zero(capsys):
    main(["abc"])
    out = capsys.readouterr().out
    assert "Test create" in out
    assert "Test search" not in out
    assert "SUCCESS" in out