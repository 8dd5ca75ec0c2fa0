import io
from itertools import combinations

import pytest

from algokit.nqueens import MAX_N, SEPARATOR, format_board, main, solve


def _no_attacks(columns):
    for (r1, c1), (r2, c2) in combinations(enumerate(columns), 2):
        if c1 == c2 or abs(r1 - r2) == abs(c1 - c2):
            return False
    return True


def test_first_solution_for_four():
    assert solve(4) == [1, 3, 0, 2]


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 8, 9, 10])
def test_solutions_are_valid(n):
    columns = solve(n)
    assert len(columns) == n
    assert sorted(columns) == list(range(n))
    assert _no_attacks(columns)


@pytest.mark.parametrize("n", [2, 3, -1])
def test_no_solution(n):
    assert solve(n) is None


def test_empty_board_is_solved():
    assert solve(0) == []


def test_too_large_raises():
    with pytest.raises(ValueError, match="Max supported value is 20"):
        solve(MAX_N + 1)


def test_format_single_queen():
    assert format_board([0]) == "Q \n" + SEPARATOR


def test_format_board_marks_each_queen():
    columns = solve(5)
    lines = format_board(columns).split("\n")
    assert lines[-1] == SEPARATOR
    assert len(lines) == 6
    for line, col in zip(lines, columns):
        assert line.split(" ")[:-1].index("Q") == col
        assert line.count("Q") == 1


def test_main_prints_board(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main([]) == 0
    assert format_board(solve(4)) in capsys.readouterr().out


def test_main_no_solution(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    assert "No solution exists for N = 3" in capsys.readouterr().out


def test_main_too_large(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("21\n"))
    assert main([]) == 1
    assert "N is too large. Max supported value is 20." in capsys.readouterr().out