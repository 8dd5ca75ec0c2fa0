import pytest

from algokit.astar import (
    DEFAULT_GOAL,
    DEFAULT_GRID,
    DEFAULT_START,
    astar_search,
    format_path,
    heuristic,
    main,
)


def _assert_valid_path(grid, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        assert abs(ax - bx) + abs(ay - by) == 1
    for x, y in path[1:]:
        assert grid[x][y] == 0
    assert len(set(path)) == len(path)


def test_heuristic_is_zero_for_same_cell():
    assert heuristic((3, 2), (3, 2)) == 0


def test_heuristic_is_symmetric():
    assert heuristic((1, 7), (4, 2)) == heuristic((4, 2), (1, 7))


def test_heuristic_along_a_row():
    assert heuristic((0, 0), (0, 5)) == 5


def test_sample_grid_path():
    path = astar_search(DEFAULT_GRID, DEFAULT_START, DEFAULT_GOAL)
    assert path == [
        (0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (3, 2), (4, 2), (4, 3), (4, 4)
    ]


def test_sample_grid_path_is_valid():
    path = astar_search(DEFAULT_GRID, DEFAULT_START, DEFAULT_GOAL)
    _assert_valid_path(DEFAULT_GRID, path, DEFAULT_START, DEFAULT_GOAL)


@pytest.mark.parametrize(
    "start, goal", [((0, 0), (5, 5)), ((5, 0), (0, 5)), ((2, 3), (4, 1))]
)
def test_open_grid_path_is_optimal(start, goal):
    grid = [[0] * 6 for _ in range(6)]
    path = astar_search(grid, start, goal)
    _assert_valid_path(grid, path, start, goal)
    assert len(path) - 1 == heuristic(start, goal)


def test_start_equals_goal():
    assert astar_search(DEFAULT_GRID, (2, 2), (2, 2)) == [(2, 2)]


def test_no_path_when_goal_walled_off():
    grid = [
        [0, 0, 0],
        [1, 1, 1],
        [0, 0, 0],
    ]
    assert astar_search(grid, (0, 0), (2, 2)) is None


def test_blocked_goal_unreachable():
    grid = [[0, 0], [0, 1]]
    assert astar_search(grid, (0, 0), (1, 1)) is None


def test_detour_is_not_shorter_than_manhattan():
    path = astar_search(DEFAULT_GRID, (0, 0), (0, 4))
    _assert_valid_path(DEFAULT_GRID, path, (0, 0), (0, 4))
    assert len(path) - 1 >= heuristic((0, 0), (0, 4))


@pytest.mark.parametrize("start, goal", [((-1, 0), (1, 1)), ((0, 0), (5, 0))])
def test_out_of_bounds_raises(start, goal):
    with pytest.raises(ValueError):
        astar_search(DEFAULT_GRID, start, goal)


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        astar_search([], (0, 0), (0, 0))


def test_format_path():
    assert format_path([(0, 0), (1, 0)]) == "Path: (0,0) (1,0)"


def test_main_prints_found_path(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Path found!"
    assert out[1] == format_path(astar_search(DEFAULT_GRID, DEFAULT_START, DEFAULT_GOAL))


def test_main_reports_no_path(capsys):
    assert main(["--goal", "0", "1"]) == 0
    assert capsys.readouterr().out.strip() == "No path found."